"""Two-dimensional vector type shared across the engine."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator, Union

Number = Union[int, float]


def _fmin(a: float, b: float) -> float:
    """Minimum that ignores a NaN operand."""
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a <= b else b


def _fmax(a: float, b: float) -> float:
    """Maximum that ignores a NaN operand."""
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a >= b else b


def _fclamp(value: float, lo: float, hi: float) -> float:
    if not lo <= hi:
        raise ValueError(f"invalid clamp range: {lo} > {hi}")
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def _fdiv(a: float, b: float) -> float:
    """Floating-point division that follows IEEE rules for a zero divisor."""
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    negative = (a < 0) != (math.copysign(1.0, b) < 0)
    return -math.inf if negative else math.inf


@dataclass(frozen=True)
class Vec2:
    """A 2D vector with float components."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar["Vec2"]
    ONE: ClassVar["Vec2"]
    UP: ClassVar["Vec2"]
    DOWN: ClassVar["Vec2"]
    LEFT: ClassVar["Vec2"]
    RIGHT: ClassVar["Vec2"]

    @classmethod
    def splat(cls, v: float) -> "Vec2":
        """Vector with both components set to ``v``."""
        return cls(v, v)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalized(self) -> "Vec2":
        """Unit-length copy; the zero vector for near-zero lengths."""
        length = self.length()
        if length < 1e-10:
            return Vec2.ZERO
        return self / length

    def dot(self, other: "Vec2") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vec2") -> float:
        """Z component of the 3D cross product."""
        return self.x * other.y - self.y * other.x

    def distance(self, other: "Vec2") -> float:
        return (self - other).length()

    def distance_squared(self, other: "Vec2") -> float:
        return (self - other).length_squared()

    def lerp(self, other: "Vec2", t: float) -> "Vec2":
        return self + (other - self) * t

    def min(self, other: "Vec2") -> "Vec2":
        return Vec2(_fmin(self.x, other.x), _fmin(self.y, other.y))

    def max(self, other: "Vec2") -> "Vec2":
        return Vec2(_fmax(self.x, other.x), _fmax(self.y, other.y))

    def clamp(self, lo: "Vec2", hi: "Vec2") -> "Vec2":
        """Per-component clamp; raises ValueError if ``lo`` exceeds ``hi``."""
        return Vec2(_fclamp(self.x, lo.x, hi.x), _fclamp(self.y, lo.y, hi.y))

    def to_array(self) -> list[float]:
        return [self.x, self.y]

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def __add__(self, other: object) -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: object) -> "Vec2":
        if isinstance(scalar, bool) or not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: object) -> "Vec2":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: object) -> "Vec2":
        if isinstance(scalar, bool) or not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec2(_fdiv(self.x, scalar), _fdiv(self.y, scalar))

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


Vec2.ZERO = Vec2(0.0, 0.0)
Vec2.ONE = Vec2(1.0, 1.0)
Vec2.UP = Vec2(0.0, 1.0)
Vec2.DOWN = Vec2(0.0, -1.0)
Vec2.LEFT = Vec2(-1.0, 0.0)
Vec2.RIGHT = Vec2(1.0, 0.0)