"""POST /api/squircle — generate a superellipse outline."""

from __future__ import annotations

import dataclasses
import logging

from fastapi import APIRouter, Depends

from squircle.dependencies import get_generator_config
from squircle.engine.config import GeneratorConfig
from squircle.engine.generator import generate_path
from squircle.models.requests import SquircleRequest
from squircle.models.responses import SquircleResponse
from squircle.svg.parser import describe_path
from squircle.svg.serializer import default_view_box, wrap_path
from squircle.utils.geometry import Point

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/squircle", response_model=SquircleResponse)
async def generate(
    req: SquircleRequest,
    base_config: GeneratorConfig = Depends(get_generator_config),
) -> SquircleResponse:
    config = base_config
    if req.accuracy is not None:
        config = dataclasses.replace(base_config, accuracy=req.accuracy)

    exponent = Point(*req.exponent) if isinstance(req.exponent, list) else req.exponent
    size = Point(*req.size)
    center = Point(*req.center) if req.center is not None else None

    path = generate_path(exponent, size, center, req.rotation, req.clockwise, config=config)

    view_box = default_view_box(size, center, req.stroke_width)
    svg = wrap_path(path, view_box, fill=req.fill, stroke=req.stroke, stroke_width=req.stroke_width)

    summary = describe_path(path)
    logger.info(
        "Generated squircle: %d vertices, %s, area %.4f",
        summary.vertex_count,
        summary.winding,
        summary.area,
    )

    origin, extent = view_box
    return SquircleResponse(
        path=path,
        svg=svg,
        view_box=[origin.x, origin.y, extent.x, extent.y],
        vertex_count=summary.vertex_count,
        bbox=list(summary.bbox),
        winding=summary.winding,
        area=summary.area,
    )
