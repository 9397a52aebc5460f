"""Occluder shapes that block light and cast shadows."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Sequence, Tuple

Point = Tuple[float, float]


@dataclass(frozen=True)
class OccluderEdge:
    """One edge of an occluder: two world-space endpoints and an outward unit normal."""

    a: Point
    b: Point
    normal: Point


@dataclass
class Occluder:
    """A shadow-casting shape made of edges."""

    edges: list[OccluderEdge] = field(default_factory=list)

    @classmethod
    def from_aabb(cls, cx: float, cy: float, hw: float, hh: float) -> "Occluder":
        """Box occluder from a center and half-extents, with outward normals."""
        bl = (cx - hw, cy - hh)
        br = (cx + hw, cy - hh)
        tr = (cx + hw, cy + hh)
        tl = (cx - hw, cy + hh)
        return cls(
            [
                OccluderEdge(bl, br, (0.0, -1.0)),
                OccluderEdge(br, tr, (1.0, 0.0)),
                OccluderEdge(tr, tl, (0.0, 1.0)),
                OccluderEdge(tl, bl, (-1.0, 0.0)),
            ]
        )

    @classmethod
    def from_ground(cls, y: float, x_min: float, x_max: float) -> "Occluder":
        """Ground-plane edge at ``y``; its normal points down so overhead lights shadow below it."""
        return cls([OccluderEdge((x_min, y), (x_max, y), (0.0, -1.0))])

    @classmethod
    def from_boundary_edges(
        cls,
        positions: Sequence[float],
        boundary_edges: Iterable[Tuple[int, int]],
    ) -> "Occluder":
        """Occluder from mesh boundary edges.

        ``positions`` is a flat ``[x0, y0, x1, y1, ...]`` list and each boundary
        edge is a directed vertex-index pair. For counter-clockwise winding the
        right-hand perpendicular of each edge is its outward normal.
        """
        edges = []
        for v0, v1 in boundary_edges:
            ax, ay = positions[v0 * 2], positions[v0 * 2 + 1]
            bx, by = positions[v1 * 2], positions[v1 * 2 + 1]
            dx = bx - ax
            dy = by - ay
            length = math.sqrt(dx * dx + dy * dy)
            normal = (dy / length, -dx / length) if length > 1e-6 else (0.0, 1.0)
            edges.append(OccluderEdge((ax, ay), (bx, by), normal))
        return cls(edges)


class ShadowFilter(Enum):
    """Percentage-closer filtering mode for shadow edges."""

    NONE = "none"
    """Hard shadows, a single sample."""
    PCF5 = "pcf5"
    """Five taps: center plus the cardinal directions."""
    PCF13 = "pcf13"
    """Thirteen taps: a 3x3 grid plus four extended samples."""

    def as_uniform_value(self) -> int:
        """Integer value handed to the shader."""
        return _UNIFORM_VALUES[self]


_UNIFORM_VALUES = {
    ShadowFilter.NONE: 0,
    ShadowFilter.PCF5: 5,
    ShadowFilter.PCF13: 13,
}