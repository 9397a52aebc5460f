"""2x2 matrix helpers; matrices are column-major tuples (c0.x, c0.y, c1.x, c1.y)."""

from __future__ import annotations

from typing import Sequence, Tuple

Mat2 = Tuple[float, float, float, float]

_SINGULAR_EPS = 1e-10


def mat2_create(a: float, b: float, c: float, d: float) -> Mat2:
    """Matrix from column-major components."""
    return (a, b, c, d)


def mat2_identity() -> Mat2:
    return (1.0, 0.0, 0.0, 1.0)


def mat2_det(m: Sequence[float]) -> float:
    return m[0] * m[3] - m[2] * m[1]


def mat2_inv(m: Sequence[float]) -> Mat2:
    """Inverse; the identity when the matrix is (near) singular."""
    d = mat2_det(m)
    if abs(d) < _SINGULAR_EPS:
        return mat2_identity()
    return (m[3] / d, -m[1] / d, -m[2] / d, m[0] / d)


def mat2_transpose(m: Sequence[float]) -> Mat2:
    return (m[0], m[2], m[1], m[3])


def mat2_inv_transpose(m: Sequence[float]) -> Mat2:
    """Inverse transpose; the identity when the matrix is (near) singular."""
    d = mat2_det(m)
    if abs(d) < _SINGULAR_EPS:
        return mat2_identity()
    return (m[3] / d, -m[2] / d, -m[1] / d, m[0] / d)


def mat2_mul(a: Sequence[float], b: Sequence[float]) -> Mat2:
    """Matrix product ``a * b``."""
    return (
        a[0] * b[0] + a[2] * b[1],
        a[1] * b[0] + a[3] * b[1],
        a[0] * b[2] + a[2] * b[3],
        a[1] * b[2] + a[3] * b[3],
    )


def mat2_mul_vec(m: Sequence[float], v: Sequence[float]) -> Tuple[float, float]:
    return (m[0] * v[0] + m[2] * v[1], m[1] * v[0] + m[3] * v[1])


def mat2_add(a: Sequence[float], b: Sequence[float]) -> Mat2:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2], a[3] + b[3])


def mat2_sub(a: Sequence[float], b: Sequence[float]) -> Mat2:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2], a[3] - b[3])


def mat2_scale(m: Sequence[float], s: float) -> Mat2:
    return (m[0] * s, m[1] * s, m[2] * s, m[3] * s)


def mat2_trace(m: Sequence[float]) -> float:
    return m[0] + m[3]


def mat2_frobenius_norm_sq(m: Sequence[float]) -> float:
    return m[0] * m[0] + m[1] * m[1] + m[2] * m[2] + m[3] * m[3]