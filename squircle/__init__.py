"""Superellipse ("squircle") outlines as SVG path data."""

from squircle.engine import (
    Anisotropic,
    GeneratorConfig,
    Isotropic,
    as_exponent,
    generate_path,
    get_accuracy,
    set_accuracy,
)
from squircle.utils.geometry import Point, add, rotate, subtract

__version__ = "0.1.0"

__all__ = [
    "Anisotropic",
    "GeneratorConfig",
    "Isotropic",
    "Point",
    "add",
    "as_exponent",
    "generate_path",
    "get_accuracy",
    "rotate",
    "set_accuracy",
    "subtract",
]
