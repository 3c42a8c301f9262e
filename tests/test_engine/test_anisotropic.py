"""Tests for hybridial (per-axis exponent) paths."""

import logging
import math

import numpy as np
import pytest

from squircle.engine.config import GeneratorConfig
from squircle.engine.exponent import Anisotropic
from squircle.engine.generator import generate_path, set_accuracy
from squircle.svg.parser import path_vertices
from squircle.utils.geometry import Point


def test_eye_shape_quadrant_walk():
    path = generate_path(Point(2, 0.5), Point(20, 10))
    assert path.startswith("M10 0L")
    assert path.endswith(" Z")
    # 25 samples per quadrant plus the anchor
    assert len(path_vertices(path)) == 101


def test_quadrant_walk_points_lie_on_curve(origin):
    pts = path_vertices(generate_path(Point(2, 0.5), Point(2, 2), origin))
    values = np.abs(pts[:, 0]) ** 2 + np.abs(pts[:, 1]) ** 0.5
    np.testing.assert_allclose(values, 1.0, atol=1e-9)


def test_quadrant_walk_is_uniform_in_x(origin):
    set_accuracy(40)
    pts = path_vertices(generate_path(Point(3, 1), Point(2, 2), origin))
    # first run: x = 0.1, 0.2, ..., 0.9 above the center
    np.testing.assert_allclose(pts[1:10, 0], np.arange(1, 10) * 0.1)
    assert np.all(pts[1:10, 1] < 0)


def _sorted_rows(pts):
    return np.array(sorted(map(tuple, np.round(pts, 9))))


def test_swapped_exponents_render_rotated_shape(origin):
    swapped = path_vertices(generate_path(Point(0.5, 2), Point(2, 2), origin))
    rotated = path_vertices(generate_path(Point(2, 0.5), Point(2, 2), origin, math.pi / 2))
    # same samples; only the anchors differ
    np.testing.assert_allclose(_sorted_rows(swapped[1:]), _sorted_rows(rotated[1:]), atol=1e-9)


def test_swapped_walk_starts_next_to_anchor(origin):
    pts = path_vertices(generate_path(Point(0.5, 2), Point(2, 2), origin))
    np.testing.assert_allclose(pts[0], [0, -1])
    assert np.hypot(*(pts[1] - pts[0])) < 0.05
    # clockwise on screen: heads right from the top
    assert pts[1, 0] > 0
    steps = np.hypot(*np.diff(pts, axis=0).T)
    assert steps.max() < 0.2


def test_swapped_exponents_keep_non_square_box(origin):
    pts = path_vertices(generate_path(Point(0.5, 2), Point(4, 2), origin))
    assert np.abs(pts[:, 0]).max() <= 2 + 1e-9
    assert np.abs(pts[:, 1]).max() <= 1 + 1e-9
    assert np.abs(pts[:, 0]).max() > 1.9
    values = np.abs(pts[:, 0] / 2) ** 0.5 + np.abs(pts[:, 1]) ** 2
    np.testing.assert_allclose(values, 1.0, atol=1e-9)


def test_swapped_exponents_keep_their_axes(origin):
    pts = path_vertices(generate_path(Point(0.5, 2), Point(2, 2), origin))
    values = np.abs(pts[:, 0]) ** 0.5 + np.abs(pts[:, 1]) ** 2
    np.testing.assert_allclose(values, 1.0, atol=1e-9)


def test_angular_branch_sample_count():
    path = generate_path(Point(2, 3))
    assert path.startswith("M0.5 0L")
    assert path.endswith(" Z")
    assert len(path_vertices(path)) == 101


def test_angular_branch_points_lie_on_curve(origin):
    config = GeneratorConfig(newton_iterations=60)
    pts = path_vertices(generate_path(Point(2, 3), Point(2, 2), origin, config=config))
    values = np.abs(pts[:, 0]) ** 2 + np.abs(pts[:, 1]) ** 3
    np.testing.assert_allclose(values, 1.0, rtol=1e-9)


def test_threshold_is_configurable(origin):
    walk = GeneratorConfig(explicit_threshold=5)
    pts = path_vertices(generate_path(Point(2, 3), Point(2, 2), origin, config=walk))
    # the explicit walk is exact, unlike five Newton steps near the axes
    values = np.abs(pts[:, 0]) ** 2 + np.abs(pts[:, 1]) ** 3
    np.testing.assert_allclose(values, 1.0, atol=1e-9)


def test_tiny_accuracy_yields_closed_empty_path(caplog):
    set_accuracy(3)
    with caplog.at_level(logging.WARNING, logger="squircle.engine.anisotropic"):
        path = generate_path(Point(2, 0.5), Point(20, 10))
    assert path == "M10 0Z"
    assert "no samples" in caplog.text


def test_accuracy_four_quadrant_walk(origin):
    set_accuracy(4)
    pts = path_vertices(generate_path(Point(2, 0.5), Point(2, 2), origin))
    np.testing.assert_allclose(pts, [[0, -1], [1, 0], [-1, 0]], atol=1e-12)


@pytest.mark.parametrize("exponent", [Point(2, 0.5), Point(0.5, 2), Point(1, 4), Point(2, 3)])
def test_reversed_winding_reverses_vertices(exponent):
    cw = path_vertices(generate_path(exponent, Point(4, 3), Point(1, 1), 0.3))
    ccw = path_vertices(generate_path(exponent, Point(4, 3), Point(1, 1), 0.3, False))
    np.testing.assert_allclose(ccw, np.roll(cw[::-1], 1, axis=0), atol=1e-9)


def test_anisotropic_variant_is_accepted():
    assert generate_path(Anisotropic(2, 0.5)) == generate_path(Point(2, 0.5))


@pytest.mark.parametrize("accuracy", [0, -4])
@pytest.mark.parametrize("exponent", [Point(2, 0.5), Point(0.5, 2), Point(2, 3)])
def test_non_positive_accuracy_yields_closed_empty_path(accuracy, exponent):
    path = generate_path(exponent, Point(20, 10), config=GeneratorConfig(accuracy=accuracy))
    assert path == "M10 0Z"
