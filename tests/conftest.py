"""Shared test fixtures."""

from __future__ import annotations

import math

import pytest

from squircle.engine.generator import get_accuracy, set_accuracy
from squircle.utils.geometry import Point


# Exact outputs of the closed-form shapes

SQUARE_AT_ORIGIN = "M-1 -1 L1 -1 1 1 -1 1Z"

UNIT_DIAMOND = "M0.5 0 L1 0.5 0.5 1 0 0.5Z"
UNIT_DIAMOND_CCW = "M0 0.5 L0.5 1 1 0.5 0.5 0Z"

CIRCLE_AT_ORIGIN = "M0 -1A1 1 0 0 1 0 1 1 1 0 0 1 0 -1"
UNIT_CIRCLE_CCW = "M0 0.5A0.5 0.5 0 0 0 1 0.5 0.5 0.5 0 0 0 0 0.5"


# Shapes exercised by the property tests: (exponent, size, center, rotation)
SHAPES = [
    (0.5, Point(1, 1), None, 0.0),
    (1.5, Point(4, 2), Point(0, 0), math.pi / 7),
    (3, Point(2, 2), Point(1, 1), 0.0),
    (4, Point(2, 2), Point(1, 1), math.pi / 4),
    (6, Point(10, 15), Point(2, 4), -0.3),
    (Point(2, 0.5), Point(20, 10), None, 0.0),
    (Point(0.5, 2), Point(8, 8), Point(0, 0), 1.0),
    (Point(0.5, 2), Point(4, 2), Point(0, 0), 0.0),
    (Point(1, 3), Point(6, 2), Point(1, 1), 0.2),
    (Point(5, 1), Point(10, 10), Point(2, 4), math.pi / 11),
    (Point(2, 3), Point(6, 4), Point(-1, 2), 0.4),
]


@pytest.fixture(autouse=True)
def restore_accuracy():
    original = get_accuracy()
    yield
    set_accuracy(original)


@pytest.fixture
def origin() -> Point:
    return Point(0, 0)
