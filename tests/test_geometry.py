"""Unit tests for bounds, edges and the view box."""

import math
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from fsmap.layout.box import Bounds
from fsmap.layout.position import Edge
from fsmap.view.camera import ViewBox


def test_empty_bounds():
    bounds = Bounds.empty()

    assert bounds.is_empty
    assert bounds.width == 0.0
    assert bounds.padded(100.0).is_empty
    assert bounds.merge(Bounds.empty()).is_empty


def test_include_and_merge():
    left = Bounds.empty().include(-5.0, 2.0).include(1.0, -3.0)
    right = Bounds.from_point(10.0, 4.0)

    assert (left.min_x, left.max_x, left.min_y, left.max_y) == (-5.0, 1.0, -3.0, 2.0)

    merged = left.merge(right)
    assert (merged.min_x, merged.max_x, merged.min_y, merged.max_y) == (-5.0, 10.0, -3.0, 4.0)
    assert Bounds.empty().merge(right) == right
    assert left.merge(Bounds.empty()) == left


def test_include_returns_new_box():
    original = Bounds.from_point(0.0, 0.0)
    grown = original.include(5.0, 5.0)

    assert original == Bounds(0.0, 0.0, 0.0, 0.0)
    assert grown.width == 5.0


def test_padded():
    bounds = Bounds(0.0, 10.0, 0.0, 20.0).padded(100.0)

    assert bounds.as_rect() == (-100.0, -100.0, 210.0, 220.0)
    assert bounds.center == (5.0, 10.0)


def test_edge_curve_endpoints_and_control():
    edge = Edge(0.0, 0.0, 100.0, 40.0, droop=250.0)

    assert edge.control_point == (50.0, -230.0)
    assert edge.point_at(0.0) == (0.0, 0.0)
    assert edge.point_at(1.0) == (100.0, 40.0)
    # The curve bends upward toward the control point
    assert edge.point_at(0.5)[1] < 20.0


def test_view_box_fit():
    view = ViewBox()
    assert view.rect == (-1500.0, -1000.0, 3000.0, 2000.0)

    assert view.fit(Bounds(-200.0, 800.0, 0.0, 500.0))
    assert view.rect == (-200.0, 0.0, 1000.0, 500.0)
    assert view.zoom == pytest.approx(1.0)

    assert not view.fit(Bounds.empty())
    assert view.rect == (-200.0, 0.0, 1000.0, 500.0)


def test_zoom_keeps_anchor_fixed():
    view = ViewBox()
    view.fit(Bounds(0.0, 1000.0, 0.0, 1000.0))

    x, y, w, h = view.rect
    rel = ((250.0 - x) / w, (750.0 - y) / h)

    view.wheel(250.0, 750.0, 120)

    x, y, w, h = view.rect
    assert w == pytest.approx(1000.0 / 1.1)
    assert ((250.0 - x) / w, (750.0 - y) / h) == pytest.approx(rel)
    assert view.zoom == pytest.approx(1.1)


def test_zoom_is_clamped():
    view = ViewBox(min_zoom=0.1, max_zoom=5.0)
    view.fit(Bounds(0.0, 1000.0, 0.0, 1000.0))

    for _ in range(100):
        view.wheel(500.0, 500.0, 120)
    assert view.zoom == pytest.approx(5.0)

    for _ in range(200):
        view.wheel(500.0, 500.0, -120)
    assert view.zoom == pytest.approx(0.1)
    assert math.isfinite(view.rect[2])


def test_pan_moves_content():
    view = ViewBox()
    view.fit(Bounds(0.0, 100.0, 0.0, 100.0))

    view.pan(10.0, -5.0)

    assert view.rect == (-10.0, 5.0, 100.0, 100.0)
    assert view.zoom == pytest.approx(1.0)


def test_fit_after_manual_zoom_resets_reference():
    view = ViewBox()
    view.fit(Bounds(0.0, 100.0, 0.0, 100.0))
    view.wheel(50.0, 50.0, 120)
    view.pan(30.0, 30.0)

    view.fit(Bounds(0.0, 400.0, 0.0, 200.0))

    assert view.rect == (0.0, 0.0, 400.0, 200.0)
    assert view.zoom == pytest.approx(1.0)
