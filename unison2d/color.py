"""RGBA color type shared across the engine."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterable, Iterator


def _to_byte(component: float) -> int:
    """Scale a 0..1 component to a byte, saturating and truncating."""
    value = component * 255.0
    if math.isnan(value):
        return 0
    if value <= 0.0:
        return 0
    if value >= 255.0:
        return 255
    return int(value)


@dataclass(frozen=True)
class Color:
    """RGBA color with float components in 0.0..1.0; white by default."""

    r: float = 1.0
    g: float = 1.0
    b: float = 1.0
    a: float = 1.0

    WHITE: ClassVar["Color"]
    BLACK: ClassVar["Color"]
    RED: ClassVar["Color"]
    GREEN: ClassVar["Color"]
    BLUE: ClassVar["Color"]
    TRANSPARENT: ClassVar["Color"]

    @classmethod
    def rgb(cls, r: float, g: float, b: float) -> "Color":
        """Opaque color from RGB components."""
        return cls(r, g, b, 1.0)

    @classmethod
    def from_rgba8(cls, r: int, g: int, b: int, a: int) -> "Color":
        """Color from byte components (0..255)."""
        for value in (r, g, b, a):
            if not 0 <= value <= 255:
                raise ValueError(f"byte component out of range: {value}")
        return cls(r / 255.0, g / 255.0, b / 255.0, a / 255.0)

    @classmethod
    def from_hex(cls, value: int) -> "Color":
        """Color from 0xRRGGBB, or 0xRRGGBBAA when the value exceeds 0xFFFFFF."""
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"hex color out of range: {value:#x}")
        if value > 0xFFFFFF:
            return cls.from_rgba8(
                (value >> 24) & 0xFF,
                (value >> 16) & 0xFF,
                (value >> 8) & 0xFF,
                value & 0xFF,
            )
        return cls.from_rgba8(
            (value >> 16) & 0xFF,
            (value >> 8) & 0xFF,
            value & 0xFF,
            255,
        )

    @classmethod
    def from_sequence(cls, values: Iterable[float]) -> "Color":
        """Color from three (RGB, opaque) or four (RGBA) components."""
        items = tuple(values)
        if len(items) == 3:
            return cls(items[0], items[1], items[2], 1.0)
        if len(items) == 4:
            return cls(*items)
        raise ValueError(f"expected 3 or 4 components, got {len(items)}")

    def to_array(self) -> list[float]:
        return [self.r, self.g, self.b, self.a]

    def to_rgba8(self) -> list[int]:
        return [_to_byte(c) for c in (self.r, self.g, self.b, self.a)]

    def to_rgb_tuple(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)

    def __iter__(self) -> Iterator[float]:
        yield self.r
        yield self.g
        yield self.b
        yield self.a


Color.WHITE = Color(1.0, 1.0, 1.0, 1.0)
Color.BLACK = Color(0.0, 0.0, 0.0, 1.0)
Color.RED = Color(1.0, 0.0, 0.0, 1.0)
Color.GREEN = Color(0.0, 1.0, 0.0, 1.0)
Color.BLUE = Color(0.0, 0.0, 1.0, 1.0)
Color.TRANSPARENT = Color(0.0, 0.0, 0.0, 0.0)