"""Wrap generated path data into a standalone SVG document."""

from __future__ import annotations

import math
from xml.sax.saxutils import escape, quoteattr

from squircle.utils.formatting import format_number
from squircle.utils.geometry import Point

DEFAULT_STROKE_WIDTH = 0.1


def default_view_box(
    size: Point | None = None,
    center: Point | None = None,
    stroke_width: float = DEFAULT_STROKE_WIDTH,
) -> tuple[Point, Point]:
    """(origin, extent) of a view box that fits the shape at any rotation.

    The shape's diagonal is at most sqrt(2) times its larger side, so the box
    is the bounding box scaled by sqrt(2) around the center, plus the stroke.
    """
    if size is None:
        size = Point(1, 1)
    if center is None:
        center = Point(size.x / 2, size.y / 2)

    origin = Point(
        -math.sqrt(2) * size.x / 2 + center.x - stroke_width,
        -math.sqrt(2) * size.y / 2 + center.y - stroke_width,
    )
    extent = Point(
        math.sqrt(2) * size.x + 2 * stroke_width,
        math.sqrt(2) * size.y + 2 * stroke_width,
    )
    return origin, extent


def wrap_path(
    path_data: str,
    view_box: tuple[Point, Point],
    fill: str = "transparent",
    stroke: str = "black",
    stroke_width: float = DEFAULT_STROKE_WIDTH,
    title: str = "",
) -> str:
    """Generate SVG markup holding a single path element."""
    origin, extent = view_box
    lines = [f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="{origin} {extent}">']

    if title:
        lines.append(f"    <title>{escape(title)}</title>")

    lines.append(
        f"    <path fill={quoteattr(fill)} stroke={quoteattr(stroke)} "
        f'stroke-width="{format_number(stroke_width)}" d="{path_data}" />'
    )
    lines.append("</svg>")
    return "\n".join(lines)
