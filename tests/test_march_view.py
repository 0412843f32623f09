import math

import pytest

from glrhi.march_view import (
    MarchView,
    Point,
    RulerLine,
    label_position,
    ruler_step,
)


def _apply(matrix, x, y):
    vec = (x, y, 0.0, 1.0)
    return tuple(sum(matrix[r * 4 + c] * vec[c] for c in range(4)) for r in range(4))


def _click_ndc(view, point):
    tx, ty = view.translation
    out = _apply(view.projection(), point.x * view.scale + tx, point.y * view.scale + ty)
    return out[0], out[1]


def _bottom_ticks(view):
    return [line for line in view.ruler_lines if line.start.y == -1.0 and line.end.y != line.start.y]


def test_default_cross_points():
    view = MarchView()
    assert view.cross_points == [
        Point(-0.9, 0.0), Point(0.9, 0.0), Point(0.0, -0.9), Point(0.0, 0.9)
    ]


def test_resize_rejects_empty_size():
    view = MarchView()
    with pytest.raises(ValueError):
        view.resize(0, 100)
    with pytest.raises(ValueError):
        view.resize(100, -1)


def test_ruler_step_bounds_tick_count():
    for width in (0.37, 1.0, 15.0, 99.0, 200.0, 2000.0, 3000.0, 123456.0):
        step = ruler_step(width)
        ticks = width / step
        assert 10.0 <= ticks <= 50.0
        exponent = math.log10(step / 2.0) if ticks * 2 > 20 and round(math.log10(step)) != math.log10(step) else math.log10(step)
        assert abs(exponent - round(exponent)) < 1e-9


def test_ruler_step_rejects_non_positive():
    with pytest.raises(ValueError):
        ruler_step(0.0)


def test_left_click_at_centre_is_origin():
    view = MarchView(200, 100)
    point = view.left_click(100, 50)
    assert point == Point(0.0, 0.0)
    assert view.line_points == [point]


def test_left_click_projects_back_to_click():
    view = MarchView(800, 600)
    view.wheel(120, 300, 120)
    view.middle_press(10, 10)
    view.middle_drag(60, 30)
    for px, py in ((0, 0), (800, 600), (321, 77)):
        point = view.left_click(px, py)
        ndc_x, ndc_y = _click_ndc(view, point)
        assert ndc_x == pytest.approx(px / 800 * 2 - 1, abs=1e-9)
        assert ndc_y == pytest.approx(1 - py / 600 * 2, abs=1e-9)
    assert len(view.line_points) == 3


def test_projection_maps_corner_to_unit():
    view = MarchView(400, 300)
    out = _apply(view.projection(), 1000.0 * view.aspect, 1000.0)
    assert out[0] == pytest.approx(1.0)
    assert out[1] == pytest.approx(1.0)
    assert out[3] == pytest.approx(1.0)


def test_wheel_changes_scale():
    view = MarchView(100, 100)
    view.wheel(50, 50, 120)
    assert view.scale == pytest.approx(1.1)
    view.wheel(50, 50, -120)
    assert view.scale == pytest.approx(1.1 * 0.9)


def test_drag_round_trip_restores_translation():
    view = MarchView(800, 400)
    view.middle_press(100, 100)
    view.middle_drag(150, 80)
    moved = view.translation
    assert moved[0] > 0 and moved[1] > 0
    view.middle_drag(100, 100)
    assert view.translation[0] == pytest.approx(0.0, abs=1e-9)
    assert view.translation[1] == pytest.approx(0.0, abs=1e-9)
    assert view.last_pos == (100, 100)


def test_ruler_ticks_stay_in_ndc():
    view = MarchView(640, 480)
    view.wheel(10, 400, 120)
    view.middle_press(0, 0)
    view.middle_drag(33, -21)
    assert view.ruler_lines
    for line in view.ruler_lines:
        assert -1.0 <= line.start.x <= 1.0
        assert -1.0 <= line.start.y <= 1.0
        if line.start.y == line.end.y:
            assert line.start.x == -1.0
            assert line.end.x == pytest.approx(-0.9)
        else:
            assert line.start.y == -1.0
            assert line.end.y == pytest.approx(-0.9)
            assert line.start.x == line.end.x


def test_bottom_ticks_match_world_values_when_untransformed():
    view = MarchView(100, 100)
    ticks = _bottom_ticks(view)
    step = ruler_step(2000.0 * view.aspect / view.scale)
    values = [t.world_value for t in ticks]
    assert values == sorted(values)
    for a, b in zip(values, values[1:]):
        assert b - a == pytest.approx(step)
    for tick in ticks:
        assert tick.start.x == pytest.approx(tick.world_value / 1000.0)


def test_ruler_points_pair_up_lines():
    view = MarchView(300, 200)
    points = view.ruler_points()
    assert len(points) == 2 * len(view.ruler_lines)
    assert points[0::2] == [line.start for line in view.ruler_lines]
    assert points[1::2] == [line.end for line in view.ruler_lines]


def test_label_position_bottom_tick():
    line = RulerLine(Point(0.0, -1.0), Point(0.0, -0.9), 12.0)
    assert label_position(line, 200, 100) == (90.0, 95.0, "12.0")


def test_label_position_left_tick():
    line = RulerLine(Point(-1.0, 0.0), Point(-0.9, 0.0), -3.25)
    x, y, text = label_position(line, 200, 100)
    assert (x, y) == (5.0, 50.0)
    assert text == "-3.2" or text == "-3.3"