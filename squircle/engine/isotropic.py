"""Isotropic superellipse paths — one exponent shared by both axes."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from squircle.engine.config import GeneratorConfig
from squircle.engine.exponent import Isotropic
from squircle.engine.resolver import ShapeFrame
from squircle.engine.trig import HALF_PI, squirc_cos, squirc_sin
from squircle.utils.formatting import format_number
from squircle.utils.geometry import Point, rotate_array


def sample_angles(accuracy: int, clockwise: bool) -> NDArray[np.float64]:
    """Angles 1..accuracy-1 steps past the top, sweeping one full turn."""
    if accuracy <= 0:
        return np.empty(0, dtype=np.float64)
    step = 2 * math.pi / accuracy
    i = np.arange(1, accuracy, dtype=np.float64)
    if clockwise:
        return HALF_PI - i * step
    return HALF_PI + i * step


def place_offsets(offsets: NDArray[np.float64], frame: ShapeFrame, rotation: float) -> list[Point]:
    """Rotate center-relative offsets and translate them onto the frame center."""
    if len(offsets) == 0:
        return []
    placed = rotate_array(offsets, rotation)
    placed[:, 0] += frame.center.x
    placed[:, 1] += frame.center.y
    return [Point(float(x), float(y)) for x, y in placed]


def _polygon(vertices: tuple[Point, ...]) -> str:
    first, *rest = vertices
    return f"M{first} L{' '.join(str(p) for p in rest)}Z"


def _ellipse(frame: ShapeFrame) -> str:
    top = frame.edge_centers[0]
    opposite = frame.edge_centers[2]
    rx = format_number(frame.size.x / 2)
    ry = format_number(frame.size.y / 2)
    sweep = 1 if frame.clockwise else 0
    return f"M{top}A{rx} {ry} 0 0 {sweep} {opposite} {rx} {ry} 0 0 {sweep} {top}"


def isotropic_points(exponent: float, frame: ShapeFrame, accuracy: int) -> list[Point]:
    """Sampled boundary points following the anchor, in traversal order."""
    angles = sample_angles(accuracy, frame.clockwise)
    half = frame.half_size
    offsets = np.column_stack((
        half.x * np.asarray(squirc_cos(angles, exponent)),
        # sin grows upward, output y grows downward
        half.y * -np.asarray(squirc_sin(angles, exponent)),
    ))
    return place_offsets(offsets, frame, frame.rotation)


def isotropic_path(exponent: Isotropic, frame: ShapeFrame, config: GeneratorConfig) -> str:
    e = exponent.exponent

    if not math.isfinite(e):
        return _polygon(frame.bounding_box)
    if e == 1:
        return _polygon(frame.edge_centers)
    if e == 2:
        return _ellipse(frame)

    points = isotropic_points(e, frame, config.accuracy)
    return f"M{frame.anchor}" + "".join(f"L{p}" for p in points) + "Z"
