"""Tests for shape frame resolution."""

import math

import pytest

from squircle.engine.resolver import resolve_frame
from squircle.utils.geometry import Point


def test_defaults_unit_square_at_half_size():
    frame = resolve_frame()
    assert frame.size == Point(1, 1)
    assert frame.center == Point(0.5, 0.5)
    assert frame.rotation == 0.0
    assert frame.clockwise is True


def test_center_defaults_to_half_of_size():
    frame = resolve_frame(Point(10, 4))
    assert frame.center == Point(5, 2)
    assert frame.half_size == Point(5, 2)


def test_corners_and_midpoints_clockwise_from_top(origin):
    frame = resolve_frame(Point(2, 2), origin)
    assert frame.bounding_box == (Point(-1, -1), Point(1, -1), Point(1, 1), Point(-1, 1))
    assert frame.edge_centers == (Point(0, -1), Point(1, 0), Point(0, 1), Point(-1, 0))
    assert frame.anchor == Point(0, -1)


def test_counter_clockwise_reverses_both_sequences(origin):
    cw = resolve_frame(Point(2, 2), origin)
    ccw = resolve_frame(Point(2, 2), origin, clockwise=False)
    assert ccw.bounding_box == cw.bounding_box[::-1]
    assert ccw.edge_centers == cw.edge_centers[::-1]
    # sampled curves still start at the top
    assert ccw.anchor == cw.anchor


def test_rotation_and_translation():
    frame = resolve_frame(Point(2, 4), Point(10, 20), math.pi / 2)
    top = frame.edge_centers[0]
    # top offset (0, -2) turns clockwise to (2, 0)
    assert top.x == pytest.approx(12)
    assert top.y == pytest.approx(20)
    first_corner = frame.bounding_box[0]
    assert first_corner.x == pytest.approx(12)
    assert first_corner.y == pytest.approx(19)
