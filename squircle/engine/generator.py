"""Path generation entry point.

The process-wide default configuration is an immutable GeneratorConfig that
set_accuracy() swaps out. generate_path() reads it once on entry, so a call
already running is not affected by a concurrent set_accuracy(). Callers that
want per-call settings pass ``config=`` and never touch the default.
"""

from __future__ import annotations

import dataclasses
import logging

from squircle.config import settings
from squircle.engine.anisotropic import anisotropic_path, uses_explicit_walk
from squircle.engine.config import GeneratorConfig
from squircle.engine.exponent import Anisotropic, ExponentLike, Isotropic, as_exponent
from squircle.engine.isotropic import isotropic_path
from squircle.engine.resolver import resolve_frame
from squircle.utils.geometry import Point

logger = logging.getLogger(__name__)

_default_config = GeneratorConfig(accuracy=settings.squircle_accuracy)


def set_accuracy(accuracy: int) -> None:
    """Set the number of boundary samples used by subsequent calls.

    Not validated: values below 4 leave the quadrant walk without samples.
    """
    global _default_config
    _default_config = dataclasses.replace(_default_config, accuracy=accuracy)
    logger.info("Squircle accuracy set to %s", accuracy)


def get_accuracy() -> int:
    return _default_config.accuracy


def get_default_config() -> GeneratorConfig:
    return _default_config


def generate_path(
    exponent: ExponentLike = 2,
    size: Point | None = None,
    center: Point | None = None,
    rotation: float = 0.0,
    clockwise: bool = True,
    *,
    config: GeneratorConfig | None = None,
) -> str:
    """Build the SVG path data of a superellipse.

    Args:
        exponent: 1 = diamond, 2 = circle, inf = square, or a per-axis pair
            (Point, 2-tuple or Anisotropic) for a hybridial squircle.
        size: Full width/height of the bounding box. Defaults to 1x1.
        center: Center of the shape. Defaults to size / 2.
        rotation: Rotation in radians, clockwise on screen.
        clockwise: Traversal direction of the path.
        config: Sampling settings; the process-wide default when omitted.

    Returns:
        A closed path string usable as an SVG ``d`` attribute.
    """
    if config is None:
        config = _default_config

    shape = as_exponent(exponent)
    frame = resolve_frame(size, center, rotation, clockwise)

    if isinstance(shape, Isotropic):
        logger.debug("Isotropic squircle e=%s, %d samples", shape, config.accuracy)
        return isotropic_path(shape, frame, config)

    if isinstance(shape, Anisotropic):
        logger.debug(
            "Hybridial squircle e=(%s), %s, %d samples",
            shape,
            "quadrant walk" if uses_explicit_walk(shape, config) else "angular",
            config.accuracy,
        )
        return anisotropic_path(shape, frame, config)

    raise TypeError(f"unsupported exponent variant: {type(shape).__name__}")
