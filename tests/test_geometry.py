"""Tests for Qt-agnostic geometry helpers."""
from retrodesk.geometry import (
    Point,
    Rect,
    Size,
    Viewport,
    clamp_rect,
    clamp_size,
    fits_within,
    in_resize_grip,
)


def test_viewport_usable_excludes_taskbar():
    assert Viewport(800, 600, 40).usable == Size(800, 560)


def test_viewport_usable_is_never_negative():
    assert Viewport(800, 30, 40).usable == Size(800, 0)


def test_point_subtraction_gives_delta():
    assert Point(150, 90) - Point(100, 100) == Point(50, -10)


def test_clamp_rect_leaves_fitting_rect_alone():
    rect = Rect(100, 100, 400, 300)
    assert clamp_rect(rect, Size(800, 560)) == rect


def test_clamp_rect_pulls_back_from_far_edges():
    out = clamp_rect(Rect(700, 500, 400, 300), Size(800, 560))
    assert out == Rect(400, 260, 400, 300)


def test_clamp_rect_pulls_back_from_origin():
    out = clamp_rect(Rect(-50, -20, 400, 300), Size(800, 560))
    assert out == Rect(0, 0, 400, 300)


def test_clamp_rect_never_changes_size_when_bounds_too_small():
    out = clamp_rect(Rect(30, 40, 400, 300), Size(200, 100))
    assert out == Rect(0, 0, 400, 300)


def test_clamp_rect_is_idempotent():
    bounds_list = [Size(800, 560), Size(200, 100), Size(400, 300)]
    rects = [
        Rect(-10, -10, 100, 100),
        Rect(900, 900, 400, 300),
        Rect(50, 50, 500, 500),
        Rect(0, 0, 400, 300),
    ]
    for bounds in bounds_list:
        for rect in rects:
            once = clamp_rect(rect, bounds)
            assert clamp_rect(once, bounds) == once


def test_clamp_size_bounds_both_ways_and_keeps_position():
    bounds = Size(800, 560)
    minimum = Size(400, 300)
    assert clamp_size(Rect(10, 20, 1200, 900), bounds, minimum) == Rect(10, 20, 800, 560)
    assert clamp_size(Rect(10, 20, 100, 50), bounds, minimum) == Rect(10, 20, 400, 300)


def test_clamp_size_minimum_wins_in_degenerate_bounds():
    out = clamp_size(Rect(0, 0, 500, 500), Size(300, 200), Size(400, 300))
    assert out == Rect(0, 0, 400, 300)


def test_fits_within():
    bounds = Size(800, 560)
    assert fits_within(Rect(0, 0, 800, 560), bounds)
    assert not fits_within(Rect(1, 0, 800, 560), bounds)
    assert not fits_within(Rect(-1, 0, 10, 10), bounds)


def test_in_resize_grip_only_bottom_right():
    assert in_resize_grip(395, 295, 400, 300)
    assert not in_resize_grip(10, 295, 400, 300)
    assert not in_resize_grip(395, 10, 400, 300)
