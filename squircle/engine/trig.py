"""Superellipse trigonometry.

squirc_cos / squirc_sin generalize cos / sin to the boundary of
|x|^e + |y|^e = 1: the point of the boundary on the ray at ``angle`` has
coordinates (squirc_cos, squirc_sin). The hybridial variants do the same for
|x|^ex + |y|^ey = 1, where the first-quadrant value has no closed form and is
found numerically.

All functions accept scalars or numpy arrays of angles. Overflow and
division by zero produce IEEE infinities/NaNs internally and are handled,
never raised.

Reflection identities used by the range reduction:
    cos(a) = cos(-a)              symmetric about the x-axis
    cos(a) = -cos(pi - a)         symmetric about the y-axis
    sin(a, ex, ey) = cos(pi/2 - a, ey, ex)   transposition
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray

from squircle.engine.exponent import Anisotropic

HALF_PI = math.pi / 2
TWO_PI = 2 * math.pi


def reduce_quadrant(angle: ArrayLike) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Map angles onto [0, pi/2] for an even, y-antisymmetric function.

    Returns (sign, reduced) such that f(angle) = sign * f(reduced) for any
    f with f(a) = f(-a) and f(a) = -f(pi - a).
    """
    a = np.abs(np.fmod(np.asarray(angle, dtype=np.float64), TWO_PI))

    first = a <= HALF_PI
    last = a > 3 * HALF_PI

    sign = np.where(first | last, 1.0, -1.0)
    reduced = np.where(first, a, np.where(last, TWO_PI - a, np.abs(math.pi - a)))
    return sign, reduced


def _scalar_or_array(values: NDArray[np.float64], like: ArrayLike) -> float | NDArray[np.float64]:
    if np.ndim(like) == 0:
        return float(values)
    return values


def squirc_cos(angle: ArrayLike, exponent: float) -> float | NDArray[np.float64]:
    sign, a = reduce_quadrant(angle)
    with np.errstate(all="ignore"):
        # first quadrant closed form
        value = 1.0 / np.power(1.0 + np.power(np.tan(a), exponent), 1.0 / exponent)
    return _scalar_or_array(sign * value, angle)


def squirc_sin(angle: ArrayLike, exponent: float) -> float | NDArray[np.float64]:
    return squirc_cos(HALF_PI - np.asarray(angle, dtype=np.float64), exponent)


def _newton_root(
    tan_a: NDArray[np.float64],
    ex: float,
    ey: float,
    iterations: int,
    tolerance: float | None,
) -> NDArray[np.float64]:
    """Positive root of x^ex + (tan_a * x)^ey - 1 = 0, starting at x = 1."""
    x = np.ones_like(tan_a)
    tan_pow = np.power(tan_a, ey)
    for _ in range(iterations):
        fx = np.power(x, ex) + np.power(tan_a * x, ey) - 1.0
        if tolerance is not None and np.all(np.abs(fx) < tolerance):
            break
        dfx = ex * np.power(x, ex - 1.0) + ey * tan_pow * np.power(x, ey - 1.0)
        x = x - fx / dfx
    # tan blows up on the y-axis; fall back to the boundary value
    return np.where(np.isnan(x), 1.0, x)


def hybridial_cos(
    angle: ArrayLike,
    exponent: Anisotropic,
    iterations: int = 5,
    tolerance: float | None = None,
) -> float | NDArray[np.float64]:
    sign, a = reduce_quadrant(angle)
    with np.errstate(all="ignore"):
        x = _newton_root(np.tan(a), exponent.x, exponent.y, iterations, tolerance)
    return _scalar_or_array(sign * x, angle)


def hybridial_sin(
    angle: ArrayLike,
    exponent: Anisotropic,
    iterations: int = 5,
    tolerance: float | None = None,
) -> float | NDArray[np.float64]:
    return hybridial_cos(
        HALF_PI - np.asarray(angle, dtype=np.float64),
        exponent.swapped(),
        iterations,
        tolerance,
    )


def quadrant_explicit(x: ArrayLike, exponent: Anisotropic) -> float | NDArray[np.float64]:
    """y >= 0 on the boundary for a given x in [0, 1]: (1 - x^ex)^(1/ey)."""
    xs = np.asarray(x, dtype=np.float64)
    with np.errstate(all="ignore"):
        y = np.power(1.0 - np.power(xs, exponent.x), 1.0 / exponent.y)
    return _scalar_or_array(y, x)
