"""Generator configuration — controls sampling density and the Newton solve."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_ACCURACY = 101


@dataclass(frozen=True)
class GeneratorConfig:
    """Knobs read once at the start of every path generation."""

    # Boundary samples for non-degenerate curves (quadrant walk uses accuracy // 4)
    accuracy: int = DEFAULT_ACCURACY

    # Newton's method for the anisotropic cosine
    newton_iterations: int = 5
    # Residual below which the solve stops early; None keeps the fixed budget
    newton_tolerance: float | None = None

    # Below this exponent (on either axis) the angular parametrization is
    # replaced by the quadrant-explicit walk
    explicit_threshold: float = 1.5
