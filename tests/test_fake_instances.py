import pytest

from glrhi.fake_base import seed
from glrhi.fake_instances import InstanceLineFakeData, InstanceTriangleFakeData
from glrhi.render_common import InstanceLineData, InstanceTriangleData


def test_line_default_count():
    gen = InstanceLineFakeData()
    seed(1)
    gen.gen_lines()
    assert len(gen.instance_data) == 100
    assert all(isinstance(d, InstanceLineData) for d in gen.instance_data)


def test_line_fields_within_bounds():
    gen = InstanceLineFakeData()
    gen.set_range(-3.0, 3.0, 0.0, 2.0)
    seed(2)
    gen.gen_lines(50, 0.01, 0.05)
    for line in gen.instance_data:
        for x, y, z in (line.pos1, line.pos2):
            assert -3.0 <= x < 3.0
            assert 0.0 <= y < 2.0
            assert z == 0.0
        assert 0.01 <= line.width < 0.05
        assert 0.0 <= line.depth < 1.0
        assert all(0.0 <= c < 1.0 for c in line.color[:3])
        assert 0.8 <= line.color[3] < 1.0


def test_line_fixed_width():
    gen = InstanceLineFakeData()
    seed(3)
    gen.gen_lines(10, 0.002, 0.002)
    assert all(line.width == 0.002 for line in gen.instance_data)


def test_line_regenerate_and_clear():
    gen = InstanceLineFakeData()
    seed(4)
    gen.gen_lines(7)
    gen.gen_lines(3)
    assert len(gen.instance_data) == 3
    gen.clear()
    assert gen.instance_data == []


def test_triangle_default_count():
    gen = InstanceTriangleFakeData()
    seed(5)
    gen.gen_triangles()
    assert len(gen.instance_data) == 100
    assert all(isinstance(d, InstanceTriangleData) for d in gen.instance_data)


def test_triangle_geometry():
    gen = InstanceTriangleFakeData()
    seed(6)
    gen.gen_triangles(40, 0.02, 0.2)
    for tri in gen.instance_data:
        size = (tri.pos1[1] - tri.pos2[1]) / 1.5
        assert 0.02 - 1e-9 <= size <= 0.2 + 1e-9
        assert tri.pos2[1] == pytest.approx(tri.pos3[1])
        assert tri.pos3[0] - tri.pos1[0] == pytest.approx(size * 0.866)
        assert tri.pos1[0] - tri.pos2[0] == pytest.approx(size * 0.866)
        assert tri.pos1[2] == tri.pos2[2] == tri.pos3[2] == 0.0
        center_y = tri.pos1[1] - size
        assert -1.0 <= tri.pos1[0] < 1.0
        assert -1.0 <= center_y < 1.0 + 1e-9
        assert 0.0 <= tri.depth < 1.0
        assert 0.8 <= tri.color[3] < 1.0


def test_triangle_reproducible_with_seed():
    gen = InstanceTriangleFakeData()
    seed(8)
    gen.gen_triangles(5)
    first = [t.flatten() for t in gen.instance_data]
    seed(8)
    gen.gen_triangles(5)
    assert [t.flatten() for t in gen.instance_data] == first


def test_triangle_clear():
    gen = InstanceTriangleFakeData()
    seed(9)
    gen.gen_triangles(4)
    gen.clear()
    assert gen.instance_data == []