"""Runtime asset store that decompresses and serves embedded assets by path."""

from __future__ import annotations

import gzip
import zlib
from typing import Iterable, Iterator, Tuple

EmbeddedAsset = Tuple[str, bytes]
"""A ``(relative_path, gzip_compressed_bytes)`` pair."""


class AssetError(ValueError):
    """Raised when an embedded asset cannot be decompressed."""


class AssetStore:
    """Decompressed asset data keyed by relative path."""

    def __init__(self) -> None:
        self._assets: dict[str, bytes] = {}

    def load_embedded(self, table: Iterable[EmbeddedAsset]) -> None:
        """Decompress every ``(path, gzip_bytes)`` entry and store it by path.

        An entry whose path is already loaded replaces the earlier data.
        """
        for path, compressed in table:
            try:
                data = gzip.decompress(compressed)
            except (OSError, EOFError, zlib.error) as exc:
                raise AssetError(f"Failed to decompress asset '{path}': {exc}") from exc
            self._assets[path] = data

    def get(self, path: str) -> bytes | None:
        """The asset's bytes, or None if no asset has that path."""
        return self._assets.get(path)

    def __contains__(self, path: object) -> bool:
        return path in self._assets

    def __len__(self) -> int:
        return len(self._assets)

    def paths(self) -> Iterator[str]:
        """Iterate over all loaded asset paths."""
        return iter(self._assets)