"""Asset embedding: walk an asset directory and gzip every file in it."""

from __future__ import annotations

import gzip
import json
import os
from pathlib import Path

COMPRESSED_DIRNAME = "_assets_compressed"
INDEX_FILENAME = "assets.json"


def _walk_files(root: Path) -> list[tuple[str, Path]]:
    entries = [
        (path.relative_to(root).as_posix(), path)
        for path in root.rglob("*")
        if path.is_file()
    ]
    entries.sort(key=lambda entry: entry[0])
    return entries


def _resolve_dir(asset_dir: str | os.PathLike[str]) -> Path:
    try:
        root = Path(asset_dir).resolve(strict=True)
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"Asset directory '{asset_dir}' not found: {exc}") from exc
    if not root.is_dir():
        raise NotADirectoryError(f"Asset path '{asset_dir}' is not a directory")
    return root


def compress_assets(asset_dir: str | os.PathLike[str]) -> list[tuple[str, bytes]]:
    """Gzip every file under ``asset_dir``.

    Returns ``(relative_path, gzip_bytes)`` pairs sorted by path, with ``/``
    as the path separator. The result can be given to
    ``AssetStore.load_embedded``.
    """
    root = _resolve_dir(asset_dir)
    return [
        (rel, gzip.compress(path.read_bytes(), compresslevel=9, mtime=0))
        for rel, path in _walk_files(root)
    ]


def embed_assets(asset_dir: str | os.PathLike[str], out_dir: str | os.PathLike[str]) -> Path:
    """Compress the assets under ``asset_dir`` into ``out_dir``.

    Each file is written as ``<out_dir>/_assets_compressed/<name>.gz``, where
    path separators in the name become ``__``. An index,
    ``<out_dir>/assets.json``, lists each asset path with its compressed file
    relative to ``out_dir``. Returns the path of the index.
    """
    out_path = Path(out_dir)
    compressed_dir = out_path / COMPRESSED_DIRNAME
    compressed_dir.mkdir(parents=True, exist_ok=True)

    index = []
    for rel_path, compressed in compress_assets(asset_dir):
        safe_name = rel_path.replace("/", "__").replace("\\", "__")
        gz_path = compressed_dir / f"{safe_name}.gz"
        gz_path.write_bytes(compressed)
        index.append({"path": rel_path, "file": f"{COMPRESSED_DIRNAME}/{safe_name}.gz"})

    index_path = out_path / INDEX_FILENAME
    index_path.write_text(json.dumps({"assets": index}, indent=2) + "\n", encoding="utf-8")
    return index_path