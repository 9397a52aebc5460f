"""Axis-aligned rectangle type shared across the engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from unison2d.vec2 import Vec2


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle defined by its min and max corners."""

    min: Vec2 = Vec2(0.0, 0.0)
    max: Vec2 = Vec2(0.0, 0.0)

    @classmethod
    def from_center(cls, center: Vec2, size: Vec2) -> "Rect":
        """Rect from a center point and full (width, height) size."""
        half = size * 0.5
        return cls(center - half, center + half)

    @classmethod
    def from_position(cls, position: Vec2, size: Vec2) -> "Rect":
        """Rect from its bottom-left corner and size."""
        return cls(position, position + size)

    @classmethod
    def from_bounds(cls, bounds: Iterable[float]) -> "Rect":
        """Rect from a (min_x, min_y, max_x, max_y) tuple."""
        min_x, min_y, max_x, max_y = bounds
        return cls(Vec2(min_x, min_y), Vec2(max_x, max_y))

    def width(self) -> float:
        return self.max.x - self.min.x

    def height(self) -> float:
        return self.max.y - self.min.y

    def size(self) -> Vec2:
        return self.max - self.min

    def center(self) -> Vec2:
        return (self.min + self.max) * 0.5

    def contains(self, point: Vec2) -> bool:
        """Whether the point lies inside or on the edge of the rect."""
        return (
            self.min.x <= point.x <= self.max.x
            and self.min.y <= point.y <= self.max.y
        )

    def intersects_circle(self, center: Vec2, radius: float) -> bool:
        closest = center.clamp(self.min, self.max)
        return center.distance_squared(closest) <= radius * radius

    def intersects(self, other: "Rect") -> bool:
        return (
            self.min.x <= other.max.x
            and self.max.x >= other.min.x
            and self.min.y <= other.max.y
            and self.max.y >= other.min.y
        )