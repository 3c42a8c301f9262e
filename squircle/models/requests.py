"""API request models."""

from __future__ import annotations

import math
from typing import Union

from pydantic import BaseModel, Field, field_validator

_INFINITY_NAMES = {"inf", "infinity", "+inf", "+infinity"}

MAX_ACCURACY = 100_000


class SquircleRequest(BaseModel):
    exponent: Union[float, list[float], str] = Field(
        default=2.0,
        description='Shared exponent, [x, y] exponent pair, or "inf" for a rectangle',
    )
    size: list[float] = Field(default_factory=lambda: [1.0, 1.0], min_length=2, max_length=2)
    center: list[float] | None = Field(default=None, min_length=2, max_length=2)
    rotation: float = Field(default=0.0, description="Radians, clockwise on screen")
    clockwise: bool = True
    accuracy: int | None = Field(
        default=None,
        ge=1,
        le=MAX_ACCURACY,
        description="Boundary samples for this request (server default when omitted)",
    )
    fill: str = "transparent"
    stroke: str = "black"
    stroke_width: float = 0.1

    @field_validator("exponent")
    @classmethod
    def _parse_exponent(cls, value):
        if isinstance(value, str):
            if value.strip().lower() in _INFINITY_NAMES:
                return math.inf
            try:
                return float(value)
            except ValueError:
                raise ValueError(f"invalid exponent: {value!r}") from None
        if isinstance(value, list) and len(value) != 2:
            raise ValueError("exponent pair must have exactly 2 values")
        return value
