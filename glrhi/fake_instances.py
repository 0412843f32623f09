"""Random instance records for instanced line and triangle drawing."""

from __future__ import annotations

from glrhi.fake_base import FakeDataGenerator, random_color, random_float
from glrhi.render_common import InstanceLineData, InstanceTriangleData


class InstanceLineFakeData(FakeDataGenerator):
    """Generates random instanced line segments."""

    def __init__(self) -> None:
        super().__init__()
        self.instance_data: list[InstanceLineData] = []

    def gen_lines(
        self, line_count: int = 100, min_width: float = 0.001, max_width: float = 0.003
    ) -> None:
        """Replace the data with ``line_count`` random segments."""
        self.clear()
        self.instance_data = [
            self._gen_single_line(min_width, max_width) for _ in range(line_count)
        ]

    def clear(self) -> None:
        """Discard all generated segments."""
        self.instance_data = []

    def _gen_single_line(self, min_width: float, max_width: float) -> InstanceLineData:
        start_x = random_float(self.x_min, self.x_max)
        start_y = random_float(self.y_min, self.y_max)
        end_x = random_float(self.x_min, self.x_max)
        end_y = random_float(self.y_min, self.y_max)
        color = random_color()
        return InstanceLineData(
            pos1=(start_x, start_y, 0.0),
            pos2=(end_x, end_y, 0.0),
            color=color.rgba(),
            width=random_float(min_width, max_width),
            depth=random_float(0.0, 1.0),
        )


class InstanceTriangleFakeData(FakeDataGenerator):
    """Generates random upright instanced triangles."""

    def __init__(self) -> None:
        super().__init__()
        self.instance_data: list[InstanceTriangleData] = []

    def gen_triangles(
        self, triangle_count: int = 100, min_size: float = 0.01, max_size: float = 0.1
    ) -> None:
        """Replace the data with ``triangle_count`` random triangles."""
        self.clear()
        self.instance_data = [
            self._gen_single_triangle(min_size, max_size)
            for _ in range(triangle_count)
        ]

    def clear(self) -> None:
        """Discard all generated triangles."""
        self.instance_data = []

    def _gen_single_triangle(
        self, min_size: float, max_size: float
    ) -> InstanceTriangleData:
        cx = random_float(self.x_min, self.x_max)
        cy = random_float(self.y_min, self.y_max)
        size = random_float(min_size, max_size)
        color = random_color()
        return InstanceTriangleData(
            pos1=(cx, cy + size, 0.0),
            pos2=(cx - size * 0.866, cy - size * 0.5, 0.0),
            pos3=(cx + size * 0.866, cy - size * 0.5, 0.0),
            color=color.rgba(),
            depth=random_float(0.0, 1.0),
        )