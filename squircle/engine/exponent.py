"""Exponent variants — isotropic (one shared exponent) or anisotropic (per axis)."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Union

from squircle.utils.formatting import format_number
from squircle.utils.geometry import Point


@dataclass(frozen=True)
class Isotropic:
    """Superellipse |x|^e + |y|^e = 1. 1 = diamond, 2 = circle, inf = square."""

    exponent: float

    def __str__(self) -> str:
        return format_number(self.exponent)


@dataclass(frozen=True)
class Anisotropic:
    """Hybridial squircle |x|^ex + |y|^ey = 1 with independent exponents."""

    x: float
    y: float

    def swapped(self) -> Anisotropic:
        return Anisotropic(self.y, self.x)

    def __str__(self) -> str:
        return f"{format_number(self.x)} {format_number(self.y)}"


Exponent = Union[Isotropic, Anisotropic]

ExponentLike = Union[float, int, Point, tuple, list, Isotropic, Anisotropic]


def as_exponent(value: ExponentLike) -> Exponent:
    """Normalize any accepted exponent form into a tagged variant.

    A pair with equal components collapses to Isotropic so that it takes the
    closed-form path.
    """
    if isinstance(value, Isotropic):
        return value
    if isinstance(value, Anisotropic):
        pair = (value.x, value.y)
    elif isinstance(value, Point):
        pair = (value.x, value.y)
    elif isinstance(value, (tuple, list)):
        if len(value) != 2:
            raise TypeError(f"exponent pair must have 2 components, got {len(value)}")
        pair = (float(value[0]), float(value[1]))
    elif isinstance(value, numbers.Real) and not isinstance(value, bool):
        return Isotropic(float(value))
    else:
        raise TypeError(f"unsupported exponent type: {type(value).__name__}")

    ex, ey = pair
    if ex == ey:
        return Isotropic(ex)
    return Anisotropic(ex, ey)
