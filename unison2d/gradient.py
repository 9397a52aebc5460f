"""Radial gradient texture for drawing point lights."""

from __future__ import annotations


def generate_radial_gradient(size: int) -> bytes:
    """RGBA8 pixels of a ``size`` x ``size`` radial gradient, row by row.

    RGB is white; alpha falls off as ``1 - dist**2``, where ``dist`` is the
    distance from the center normalized to 1 at the edge.
    """
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    data = bytearray()
    center = size / 2.0
    for y in range(size):
        dy = (y + 0.5 - center) / center
        for x in range(size):
            dx = (x + 0.5 - center) / center
            dist_sq = min(dx * dx + dy * dy, 1.0)
            intensity = max(1.0 - dist_sq, 0.0)
            data += bytes((255, 255, 255, int(intensity * 255.0)))
    return bytes(data)