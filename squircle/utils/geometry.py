"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from squircle.utils.formatting import format_number


@dataclass(frozen=True)
class Point:
    """2D value used as a position, a vector, a size or an exponent pair."""

    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return add(self, other)

    def __sub__(self, other: Point) -> Point:
        return subtract(self, other)

    def rotate(self, angle: float) -> Point:
        return rotate(self, angle)

    def __iter__(self):
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"{format_number(self.x)} {format_number(self.y)}"


def add(p: Point, q: Point) -> Point:
    return Point(p.x + q.x, p.y + q.y)


def subtract(p: Point, q: Point) -> Point:
    return Point(p.x - q.x, p.y - q.y)


def rotate(p: Point, angle: float) -> Point:
    """Rotate about the origin. Positive angles turn clockwise in y-down space."""
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return Point(
        p.x * cos_a - p.y * sin_a,
        p.x * sin_a + p.y * cos_a,
    )


def rotate_array(points: NDArray[np.float64], angle: float) -> NDArray[np.float64]:
    """Vectorized rotate() for an Nx2 array."""
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    x = points[:, 0]
    y = points[:, 1]
    return np.column_stack((x * cos_a - y * sin_a, x * sin_a + y * cos_a))


def signed_area(points: NDArray[np.float64]) -> float:
    """Shoelace formula for signed area of a closed ring.

    Positive = CCW, Negative = CW (in y-up coordinates; flipped on screen).
    """
    if len(points) < 3:
        return 0.0
    x = points[:, 0]
    y = points[:, 1]
    return float(0.5 * np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def winding_direction(points: NDArray[np.float64]) -> int:
    """Return 1 for CCW, -1 for CW, 0 if degenerate."""
    sa = signed_area(points)
    if sa > 0:
        return 1
    elif sa < 0:
        return -1
    return 0


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )
