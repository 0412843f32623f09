from glrhi.brush import Brush
from glrhi.render_common import (
    InstanceLineData,
    InstanceTexData,
    InstanceTriangleData,
    PolylineData,
    RectF,
    RenderSnap,
    TextureData,
    TriangleData,
)


def test_polyline_default_brush_is_opaque_black():
    data = PolylineData()
    assert data.brush == Brush(0.0, 0.0, 0.0, 1.0, 0.0)


def test_polyline_line_count_follows_count_list():
    data = PolylineData(verts=[0.0] * 15, count=[2, 3])
    assert data.line_count() == 2
    assert sum(data.count) * 3 == len(data.verts)


def test_polyline_defaults_are_not_shared():
    first = PolylineData()
    second = PolylineData()
    first.verts.append(1.0)
    first.brush.red = 0.5
    assert second.verts == []
    assert second.brush.red == 0.0


def test_triangle_count_ignores_partial_triangle():
    data = TriangleData(verts=[0.0] * 9, indices=[0, 1, 2, 0, 1])
    assert data.triangle_count() == 1


def test_triangle_default_brush_is_white():
    assert TriangleData().brush == Brush()


def test_texture_data_keeps_fields():
    data = TextureData(verts=[0.0, 0.0, 0.0, 0.0], indices=[0, 1, 2], tex=7)
    assert data.tex == 7
    assert data.indices == [0, 1, 2]


def test_instance_tex_data_fields():
    inst = InstanceTexData(x=0.1, y=0.2, width=0.3, height=0.4, texture_layer=2, alpha=0.5)
    assert inst.texture_layer == 2
    assert inst.alpha == 0.5


def test_instance_line_flatten_order():
    line = InstanceLineData(
        pos1=(1.0, 2.0, 3.0),
        pos2=(4.0, 5.0, 6.0),
        color=(0.1, 0.2, 0.3, 0.4),
        width=0.002,
        depth=0.7,
    )
    flat = line.flatten()
    assert flat[:3] == [1.0, 2.0, 3.0]
    assert flat[3:6] == [4.0, 5.0, 6.0]
    assert flat[6:10] == [0.1, 0.2, 0.3, 0.4]
    assert flat[10:] == [0.002, 0.7]


def test_instance_triangle_flatten_order():
    tri = InstanceTriangleData(
        pos1=(1.0, 1.0, 0.0),
        pos2=(2.0, 2.0, 0.0),
        pos3=(3.0, 3.0, 0.0),
        color=(0.5, 0.6, 0.7, 0.8),
        depth=0.25,
    )
    flat = tri.flatten()
    assert flat[:9] == [1.0, 1.0, 0.0, 2.0, 2.0, 0.0, 3.0, 3.0, 0.0]
    assert flat[9:13] == [0.5, 0.6, 0.7, 0.8]
    assert flat[-1] == 0.25


def test_rect_edges_consistent_with_size():
    rect = RectF(-3.0, 5.0, 8.0, -2.5)
    assert rect.left == -3.0
    assert rect.top == 5.0
    assert rect.right - rect.left == rect.width
    assert rect.bottom - rect.top == rect.height


def test_render_snap_holds_rect():
    rect = RectF(0.0, 1.0, 2.0, 3.0)
    snap = RenderSnap(image=b"pixels", world_rect=rect)
    assert snap.world_rect == rect
    assert snap.image == b"pixels"