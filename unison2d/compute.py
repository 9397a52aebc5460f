"""Batch physics kernels over flat position/velocity arrays.

Positions and velocities are flat ``[x0, y0, x1, y1, ...]`` lists that the
kernels update in place.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import MutableSequence, Sequence, Tuple

DistanceConstraint = Tuple[int, int, float]
"""``(vertex0, vertex1, rest_length)``."""


class ComputeBackend(ABC):
    """Batch operations on position and velocity arrays."""

    @staticmethod
    @abstractmethod
    def integrate_gravity(
        pos: MutableSequence[float],
        vel: MutableSequence[float],
        prev_pos: MutableSequence[float],
        gravity: float,
        dt: float,
        inv_mass: Sequence[float],
    ) -> None:
        """Store previous positions, apply gravity to velocity, predict positions."""

    @staticmethod
    @abstractmethod
    def derive_velocities(
        pos: Sequence[float],
        prev_pos: Sequence[float],
        vel: MutableSequence[float],
        dt: float,
    ) -> None:
        """Set ``vel = (pos - prev_pos) / dt``."""

    @staticmethod
    @abstractmethod
    def solve_distance_constraints_batch(
        pos: MutableSequence[float],
        constraints: Sequence[DistanceConstraint],
        inv_mass: Sequence[float],
        alpha: float,
    ) -> None:
        """Project each distance constraint once; ``alpha`` is compliance / dt²."""


class GpuComputeBackend(ABC):
    """Interface for a device-side constraint solver."""

    @abstractmethod
    def upload(self, pos: Sequence[float], vel: Sequence[float], inv_mass: Sequence[float]) -> None:
        """Send position, velocity and inverse-mass data to the device."""

    @abstractmethod
    def solve_constraints(self, iterations: int, dt: float) -> None:
        """Run the constraint solver for the given number of iterations."""

    @abstractmethod
    def download(self) -> tuple[list[float], list[float]]:
        """Return ``(positions, velocities)`` read back from the device."""


class ScalarBackend(ComputeBackend):
    """Plain per-element implementation."""

    @staticmethod
    def integrate_gravity(
        pos: MutableSequence[float],
        vel: MutableSequence[float],
        prev_pos: MutableSequence[float],
        gravity: float,
        dt: float,
        inv_mass: Sequence[float],
    ) -> None:
        for i, w in enumerate(inv_mass):
            if w == 0.0:
                continue
            x, y = 2 * i, 2 * i + 1
            prev_pos[x] = pos[x]
            prev_pos[y] = pos[y]
            vel[y] += gravity * dt
            pos[x] += vel[x] * dt
            pos[y] += vel[y] * dt

    @staticmethod
    def derive_velocities(
        pos: Sequence[float],
        prev_pos: Sequence[float],
        vel: MutableSequence[float],
        dt: float,
    ) -> None:
        n = len(vel)
        if len(pos) < n or len(prev_pos) < n:
            raise IndexError("position arrays are shorter than the velocity array")
        inv_dt = 1.0 / dt
        vel[:] = [(p - q) * inv_dt for p, q in zip(pos[:n], prev_pos[:n])]

    @staticmethod
    def solve_distance_constraints_batch(
        pos: MutableSequence[float],
        constraints: Sequence[DistanceConstraint],
        inv_mass: Sequence[float],
        alpha: float,
    ) -> None:
        for i0, i1, rest_len in constraints:
            w0 = inv_mass[i0]
            w1 = inv_mass[i1]
            w_sum = w0 + w1
            if w_sum < 1e-10:
                continue

            dx = pos[i1 * 2] - pos[i0 * 2]
            dy = pos[i1 * 2 + 1] - pos[i0 * 2 + 1]
            length = math.sqrt(dx * dx + dy * dy)
            if length < 1e-10:
                continue

            lam = -(length - rest_len) / (w_sum + alpha)
            nx = dx / length
            ny = dy / length
            corr0 = -lam * w0
            corr1 = lam * w1

            pos[i0 * 2] += corr0 * nx
            pos[i0 * 2 + 1] += corr0 * ny
            pos[i1 * 2] += corr1 * nx
            pos[i1 * 2 + 1] += corr1 * ny