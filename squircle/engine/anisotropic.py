"""Hybridial squircle paths — independent exponents per axis.

Two regimes:

* both exponents >= explicit_threshold: sample by angle like the isotropic
  curve, with the boundary found by Newton's method.
* otherwise: the angular form is ill-conditioned near the axes, so walk one
  axis uniformly per quadrant and evaluate the other explicitly.
"""

from __future__ import annotations

import logging
import math

import numpy as np
from numpy.typing import NDArray

from squircle.engine.config import GeneratorConfig
from squircle.engine.exponent import Anisotropic
from squircle.engine.isotropic import place_offsets, sample_angles
from squircle.engine.resolver import ShapeFrame
from squircle.engine.trig import hybridial_cos, hybridial_sin, quadrant_explicit
from squircle.utils.geometry import Point

logger = logging.getLogger(__name__)


def uses_explicit_walk(exponent: Anisotropic, config: GeneratorConfig) -> bool:
    return exponent.x < config.explicit_threshold or exponent.y < config.explicit_threshold


def angular_points(exponent: Anisotropic, frame: ShapeFrame, config: GeneratorConfig) -> list[Point]:
    angles = sample_angles(config.accuracy, frame.clockwise)
    half = frame.half_size
    cos_v = hybridial_cos(angles, exponent, config.newton_iterations, config.newton_tolerance)
    sin_v = hybridial_sin(angles, exponent, config.newton_iterations, config.newton_tolerance)
    offsets = np.column_stack((
        half.x * np.asarray(cos_v),
        half.y * -np.asarray(sin_v),
    ))
    return place_offsets(offsets, frame, frame.rotation)


def _walk_parameters(accuracy: int) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Rising and falling walk positions in (0, 1], one quadrant each."""
    if accuracy <= 0:
        empty = np.empty(0, dtype=np.float64)
        return empty, empty
    step = 4 / accuracy
    rising = np.arange(1, math.ceil(accuracy / 4), dtype=np.float64) * step
    falling = np.arange(math.floor(accuracy / 4), 0, -1, dtype=np.float64) * step
    return rising, falling


def explicit_points(exponent: Anisotropic, frame: ShapeFrame, config: GeneratorConfig) -> list[Point]:
    """Quadrant-by-quadrant walk, mirrored into all four quadrants.

    The walk runs along the axis with the larger exponent, where the explicit
    form stays well conditioned. Either way the first sample sits next to the
    top anchor and the walk goes right first when clockwise.
    """
    rising, falling = _walk_parameters(config.accuracy)
    if len(rising) == 0 and len(falling) == 0:
        logger.warning("Accuracy %s leaves no samples for the quadrant walk", config.accuracy)

    cws = 1 if frame.clockwise else -1
    sx = cws * frame.half_size.x
    sy = frame.half_size.y

    if exponent.x >= exponent.y:
        y_rising = np.asarray(quadrant_explicit(rising, exponent))
        y_falling = np.asarray(quadrant_explicit(falling, exponent))
        offsets = np.concatenate((
            np.column_stack((sx * rising, -sy * y_rising)),
            np.column_stack((sx * falling, sy * y_falling)),
            np.column_stack((-sx * rising, sy * y_rising)),
            np.column_stack((-sx * falling, -sy * y_falling)),
        ))
    else:
        # walk y instead; x comes from the transposed exponents
        transposed = exponent.swapped()
        x_rising = np.asarray(quadrant_explicit(rising, transposed))
        x_falling = np.asarray(quadrant_explicit(falling, transposed))
        offsets = np.concatenate((
            np.column_stack((sx * x_falling, -sy * falling)),
            np.column_stack((sx * x_rising, sy * rising)),
            np.column_stack((-sx * x_falling, sy * falling)),
            np.column_stack((-sx * x_rising, -sy * rising)),
        ))
    return place_offsets(offsets, frame, frame.rotation)


def anisotropic_path(exponent: Anisotropic, frame: ShapeFrame, config: GeneratorConfig) -> str:
    if uses_explicit_walk(exponent, config):
        points = explicit_points(exponent, frame, config)
    else:
        points = angular_points(exponent, frame, config)

    path = f"M{frame.anchor}"
    if points:
        path += "L" + "".join(f"{p} " for p in points)
    return path + "Z"
