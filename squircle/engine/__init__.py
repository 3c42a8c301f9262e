"""Squircle path generation engine."""

from squircle.engine.config import GeneratorConfig
from squircle.engine.exponent import Anisotropic, Isotropic, as_exponent
from squircle.engine.generator import generate_path, get_accuracy, set_accuracy

__all__ = [
    "GeneratorConfig",
    "Isotropic",
    "Anisotropic",
    "as_exponent",
    "generate_path",
    "get_accuracy",
    "set_accuracy",
]
