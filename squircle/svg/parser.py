"""Path inspection — facade over svgpathtools + shapely.

Turns a generated ``d`` string back into vertices so the outline can be
measured (bounding box, winding, area) without rasterizing it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray
from shapely.geometry import Polygon
from svgpathtools import Arc, parse_path

from squircle.utils.geometry import bbox, winding_direction

logger = logging.getLogger(__name__)

# Arcs only appear in the exact ellipse case (two half-turn arcs).
_ARC_SAMPLES = 32

# y-up orientation of the shoelace sign, read with y growing downward
_SCREEN_WINDING = {1: "CW", -1: "CCW", 0: "degenerate"}


@dataclass
class PathSummary:
    """Measurements of a single closed outline."""

    vertex_count: int = 0
    # Bounding box: (xmin, ymin, xmax, ymax)
    bbox: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    # Screen winding (y grows downward): "CW", "CCW" or "degenerate"
    winding: str = "degenerate"
    area: float = 0.0


def path_vertices(path_data: str, arc_samples: int = _ARC_SAMPLES) -> NDArray[np.float64]:
    """Nx2 array of the outline's vertices in drawing order.

    Line segments contribute their start point; arcs are sampled with
    ``arc_samples`` points each. The closing segment is not repeated.
    """
    try:
        path = parse_path(path_data)
    except Exception as e:
        logger.warning("Failed to parse path: %s", e)
        return np.empty((0, 2))

    points: list[tuple[float, float]] = []
    for seg in path:
        if isinstance(seg, Arc):
            for t in np.linspace(0, 1, arc_samples, endpoint=False):
                pt = seg.point(t)
                points.append((pt.real, pt.imag))
        else:
            points.append((seg.start.real, seg.start.imag))

    if not points:
        return np.empty((0, 2))
    return np.array(points, dtype=np.float64)


def describe_path(path_data: str, arc_samples: int = _ARC_SAMPLES) -> PathSummary:
    pts = path_vertices(path_data, arc_samples)
    if len(pts) < 3:
        return PathSummary(vertex_count=len(pts), bbox=bbox(pts))

    winding = _SCREEN_WINDING[winding_direction(pts)]

    poly = Polygon(pts)
    if not poly.is_valid:
        poly = poly.buffer(0)

    return PathSummary(
        vertex_count=len(pts),
        bbox=bbox(pts),
        winding=winding,
        area=float(poly.area),
    )
