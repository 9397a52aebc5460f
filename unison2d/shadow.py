"""Shadow geometry: quads covering the region behind each occluder edge."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, Tuple

from unison2d.occluder import Occluder, OccluderEdge

FADE_STRIPS = 8
"""Number of strips a fading shadow is split into."""

Point = Tuple[float, float]

_QUAD_INDICES = (0, 1, 2, 0, 2, 3)


@dataclass(frozen=True)
class ShadowQuad:
    """A projected shadow polygon of two triangles.

    ``positions`` holds ``(ax, ay, bx, by, b'x, b'y, a'x, a'y)`` in world space,
    ``indices`` is always ``(0, 1, 2, 0, 2, 3)``, and ``vertex_colors`` holds
    black RGBA per vertex: the near vertices carry the near alpha and the far
    vertices the far alpha.
    """

    positions: Tuple[float, ...]
    indices: Tuple[int, ...]
    vertex_colors: Tuple[float, ...]


def _quad(a: Point, b: Point, b_proj: Point, a_proj: Point, near_alpha: float, far_alpha: float) -> ShadowQuad:
    return ShadowQuad(
        positions=(a[0], a[1], b[0], b[1], b_proj[0], b_proj[1], a_proj[0], a_proj[1]),
        indices=_QUAD_INDICES,
        vertex_colors=(
            0.0, 0.0, 0.0, near_alpha,
            0.0, 0.0, 0.0, near_alpha,
            0.0, 0.0, 0.0, far_alpha,
            0.0, 0.0, 0.0, far_alpha,
        ),
    )


def is_back_facing_point(edge: OccluderEdge, light_pos: Sequence[float]) -> bool:
    """Whether the edge's normal points away from a point light; such edges cast shadows."""
    mid_x = (edge.a[0] + edge.b[0]) * 0.5
    mid_y = (edge.a[1] + edge.b[1]) * 0.5
    dot = edge.normal[0] * (light_pos[0] - mid_x) + edge.normal[1] * (light_pos[1] - mid_y)
    return dot < 0.0


def is_back_facing_directional(edge: OccluderEdge, light_direction: Sequence[float]) -> bool:
    """Whether the edge's normal points along the light's travel direction."""
    dot = edge.normal[0] * light_direction[0] + edge.normal[1] * light_direction[1]
    return dot > 0.0


def _lerp2(a: Point, b: Point, t: float) -> Point:
    return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)


def _project_from_point(light_pos: Sequence[float], point: Point, min_distance: float) -> Point:
    """Push a point radially away from the light, always beyond the original point."""
    dx = point[0] - light_pos[0]
    dy = point[1] - light_pos[1]
    length = math.sqrt(dx * dx + dy * dy)
    if length < 1e-6:
        return (point[0], point[1])
    distance = max(min_distance, length + min_distance)
    return (light_pos[0] + dx / length * distance, light_pos[1] + dy / length * distance)


def _fraction(distance: float, total: float) -> float:
    if total == 0.0:
        return 1.0
    return min(distance / total, 1.0)


def _fade_strips(
    a_start: Point,
    b_start: Point,
    a_proj: Point,
    b_proj: Point,
    ta_max: float,
    tb_max: float,
    attenuation: float,
) -> Iterator[ShadowQuad]:
    """Quads from the edge out to the fade distance, alpha following ``(1 - t) ** attenuation``."""
    if attenuation <= 0.0:
        a_end = _lerp2(a_start, a_proj, ta_max)
        b_end = _lerp2(b_start, b_proj, tb_max)
        yield _quad(a_start, b_start, b_end, a_end, 1.0, 1.0)
        return

    for i in range(FADE_STRIPS):
        t0 = i / FADE_STRIPS
        t1 = (i + 1) / FADE_STRIPS
        alpha0 = (1.0 - t0) ** attenuation
        alpha1 = (1.0 - t1) ** attenuation
        a0 = _lerp2(a_start, a_proj, t0 * ta_max)
        b0 = _lerp2(b_start, b_proj, t0 * tb_max)
        a1 = _lerp2(a_start, a_proj, t1 * ta_max)
        b1 = _lerp2(b_start, b_proj, t1 * tb_max)
        yield _quad(a0, b0, b1, a1, alpha0, alpha1)


def project_point_shadows(
    light_pos: Sequence[float],
    light_radius: float,
    occluders: Iterable[Occluder],
    shadow_distance: float,
    shadow_attenuation: float,
) -> list[ShadowQuad]:
    """Shadow quads for a point light.

    Back-facing edges are projected radially away from the light. With
    ``shadow_distance`` 0.0 shadows reach the full light radius; otherwise they
    stop at that distance and fade according to ``shadow_attenuation``.
    """
    quads: list[ShadowQuad] = []
    for occluder in occluders:
        for edge in occluder.edges:
            if not is_back_facing_point(edge, light_pos):
                continue
            a_proj = _project_from_point(light_pos, edge.a, light_radius)
            b_proj = _project_from_point(light_pos, edge.b, light_radius)

            if shadow_distance > 0.0:
                da = math.dist(a_proj, edge.a)
                db = math.dist(b_proj, edge.b)
                quads.extend(
                    _fade_strips(
                        edge.a, edge.b, a_proj, b_proj,
                        _fraction(shadow_distance, da),
                        _fraction(shadow_distance, db),
                        shadow_attenuation,
                    )
                )
            else:
                quads.append(_quad(edge.a, edge.b, b_proj, a_proj, 1.0, 1.0))
    return quads


def project_directional_shadows(
    light_direction: Sequence[float],
    cast_distance: float,
    occluders: Iterable[Occluder],
    shadow_distance: float,
    shadow_attenuation: float,
) -> list[ShadowQuad]:
    """Shadow quads for a directional light.

    Back-facing edges are projected ``cast_distance`` along the light
    direction. A (near) zero direction yields no quads.
    """
    length = math.sqrt(light_direction[0] ** 2 + light_direction[1] ** 2)
    if length < 1e-6:
        return []
    dx = light_direction[0] / length * cast_distance
    dy = light_direction[1] / length * cast_distance
    fade_t = _fraction(shadow_distance, cast_distance) if shadow_distance > 0.0 else 0.0

    quads: list[ShadowQuad] = []
    for occluder in occluders:
        for edge in occluder.edges:
            if not is_back_facing_directional(edge, light_direction):
                continue
            a_proj = (edge.a[0] + dx, edge.a[1] + dy)
            b_proj = (edge.b[0] + dx, edge.b[1] + dy)
            if shadow_distance > 0.0:
                quads.extend(
                    _fade_strips(edge.a, edge.b, a_proj, b_proj, fade_t, fade_t, shadow_attenuation)
                )
            else:
                quads.append(_quad(edge.a, edge.b, b_proj, a_proj, 1.0, 1.0))
    return quads


def compute_boundary_edges(triangles: Sequence[int]) -> list[Tuple[int, int]]:
    """Edges that belong to exactly one triangle, in their original winding.

    ``triangles`` is a flat list of vertex indices, three per triangle; a
    trailing incomplete triangle is ignored.
    """
    counts: dict[Tuple[int, int], int] = {}
    directed: dict[Tuple[int, int], Tuple[int, int]] = {}
    for start in range(0, len(triangles) - 2, 3):
        v0, v1, v2 = triangles[start:start + 3]
        for a, b in ((v0, v1), (v1, v2), (v2, v0)):
            key = (a, b) if a < b else (b, a)
            counts[key] = counts.get(key, 0) + 1
            directed.setdefault(key, (a, b))
    return [directed[key] for key, count in counts.items() if count == 1]