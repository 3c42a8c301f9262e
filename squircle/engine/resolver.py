"""Shape frame resolution — anchors shared by every evaluator.

Corners and edge midpoints are computed once per call, rotated and
translated into place. Counter-clockwise frames list both sequences in
reverse, which moves the first corner but keeps the top edge midpoint as the
last edge anchor, so sampled curves always start from the top.
"""

from __future__ import annotations

from dataclasses import dataclass

from squircle.utils.geometry import Point, add, rotate


@dataclass(frozen=True)
class ShapeFrame:
    size: Point
    center: Point
    rotation: float
    clockwise: bool
    # Bounding-box corners, clockwise from top-left (reversed when CCW)
    bounding_box: tuple[Point, Point, Point, Point]
    # Edge midpoints, clockwise from top (reversed when CCW)
    edge_centers: tuple[Point, Point, Point, Point]

    @property
    def anchor(self) -> Point:
        """Start point of sampled curves: the top edge midpoint."""
        return self.edge_centers[0] if self.clockwise else self.edge_centers[3]

    @property
    def half_size(self) -> Point:
        return Point(self.size.x / 2, self.size.y / 2)


def resolve_frame(
    size: Point | None = None,
    center: Point | None = None,
    rotation: float = 0.0,
    clockwise: bool = True,
) -> ShapeFrame:
    if size is None:
        size = Point(1, 1)
    if center is None:
        center = Point(size.x / 2, size.y / 2)

    hx = size.x / 2
    hy = size.y / 2

    corners = [
        Point(-hx, -hy),
        Point(hx, -hy),
        Point(hx, hy),
        Point(-hx, hy),
    ]
    midpoints = [
        Point(0, -hy),
        Point(hx, 0),
        Point(0, hy),
        Point(-hx, 0),
    ]
    corners = [add(rotate(p, rotation), center) for p in corners]
    midpoints = [add(rotate(p, rotation), center) for p in midpoints]

    if not clockwise:
        corners.reverse()
        midpoints.reverse()

    return ShapeFrame(
        size=size,
        center=center,
        rotation=rotation,
        clockwise=clockwise,
        bounding_box=tuple(corners),
        edge_centers=tuple(midpoints),
    )
