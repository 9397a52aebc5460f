"""Light types and handles."""

from __future__ import annotations

from dataclasses import dataclass, field

from unison2d.color import Color
from unison2d.occluder import ShadowFilter
from unison2d.vec2 import Vec2


@dataclass(frozen=True)
class LightId:
    """Handle to a light held by a lighting system."""

    value: int


@dataclass
class ShadowSettings:
    """How a shadow-casting light's shadows look.

    ``strength`` runs from 0.0 (no shadow) to 1.0 (black). ``distance`` limits
    how far shadows reach from the occluder; 0.0 means the full light range.
    ``attenuation`` shapes the fade within that distance as ``(1 - t) ** attenuation``;
    0.0 gives a solid shadow.
    """

    filter: ShadowFilter = ShadowFilter.NONE
    strength: float = 1.0
    distance: float = 0.0
    attenuation: float = 1.0

    @classmethod
    def hard(cls) -> "ShadowSettings":
        """Hard shadows with default settings."""
        return cls()

    @classmethod
    def soft(cls) -> "ShadowSettings":
        """Soft shadows with five-tap filtering."""
        return cls(filter=ShadowFilter.PCF5)


@dataclass
class PointLight:
    """A light emitting in all directions with radial falloff; shadows off by default."""

    position: Vec2
    color: Color
    intensity: float
    radius: float
    casts_shadows: bool = False
    shadow: ShadowSettings = field(default_factory=ShadowSettings)


@dataclass
class DirectionalLight:
    """A light covering the whole scene uniformly.

    ``direction`` is used only for shadow casting: shadows are projected along it.
    """

    direction: Vec2
    color: Color
    intensity: float
    casts_shadows: bool = False
    shadow: ShadowSettings = field(default_factory=ShadowSettings)