import pytest

from glrhi.march_camera import MarchCamera

VIEW = (200, 100)


def _apply(matrix, point):
    x, y = point
    return (
        matrix[0] * x + matrix[1] * y + matrix[2],
        matrix[3] * x + matrix[4] * y + matrix[5],
    )


def test_default_matrix_is_identity():
    cam = MarchCamera()
    assert cam.matrix == (1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0)
    assert cam.enable_trans is True


def test_empty_view_gives_origin():
    cam = MarchCamera()
    assert cam.screen_to_world((10.0, 10.0), (0, 100)) == (0.0, 0.0)


def test_update_matrix_ignores_empty_view():
    cam = MarchCamera()
    cam.zoom = 3.0
    cam.update_matrix((100, 0))
    assert cam.matrix[0] == 1.0


def test_zoom_to_range_centres_range():
    cam = MarchCamera()
    cam.zoom_to_range(0.0, 0.0, 4.0, 2.0, VIEW)
    centre = cam.screen_to_world((100.0, 50.0), VIEW)
    assert centre == pytest.approx((2.0, 1.0))


def test_matrix_inverts_screen_to_world():
    cam = MarchCamera()
    cam.zoom_to_range(-3.0, 1.0, 5.0, 7.0, VIEW)
    screen = (37.0, 81.0)
    world = cam.screen_to_world(screen, VIEW)
    ndc = _apply(cam.matrix, world)
    expected_ndc = (2.0 * screen[0] / VIEW[0] - 1.0, 1.0 - 2.0 * screen[1] / VIEW[1])
    assert ndc == pytest.approx(expected_ndc)


def test_scale_keeps_point_under_cursor():
    cam = MarchCamera()
    cursor = (150.0, 20.0)
    before = cam.screen_to_world(cursor, VIEW)
    cam.scale(cursor, 1.1, VIEW)
    assert cam.zoom == pytest.approx(1.1)
    assert cam.screen_to_world(cursor, VIEW) == pytest.approx(before)


def test_translate_moves_world_with_cursor():
    cam = MarchCamera()
    start = (60.0, 40.0)
    delta = (15.0, -8.0)
    grabbed = cam.screen_to_world(start, VIEW)
    cam.translate(delta, VIEW)
    moved = (start[0] + delta[0], start[1] + delta[1])
    assert cam.screen_to_world(moved, VIEW) == pytest.approx(grabbed)


def test_disabled_camera_ignores_pan_and_zoom():
    cam = MarchCamera()
    cam.enable_trans = False
    cam.translate((10.0, 10.0), VIEW)
    cam.scale((5.0, 5.0), 2.0, VIEW)
    assert (cam.zoom, cam.trans_x, cam.trans_y) == (1.0, 0.0, 0.0)