"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    environment: str = ""
    accuracy: int = 0


class SquircleResponse(BaseModel):
    path: str
    svg: str
    view_box: list[float] = Field(default_factory=list)
    vertex_count: int = 0
    bbox: list[float] = Field(default_factory=list)
    winding: str = "degenerate"
    area: float = 0.0
