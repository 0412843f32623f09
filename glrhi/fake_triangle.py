"""Random small equilateral triangles with indices."""

from __future__ import annotations

import math

from glrhi.fake_base import FakeDataGenerator, random_float

_TWO_PI = 6.283185307
_THIRD_TURN = 2.094395102
_TWO_THIRDS_TURN = 4.188790205


class FakeTriangleData(FakeDataGenerator):
    """Generates triangles as x, y, depth vertices plus triangle indices."""

    def __init__(self) -> None:
        super().__init__()
        self.set_range(-1.0, 1.0, -1.0, 1.0)
        self.vertices: list[float] = []
        self.indices: list[int] = []

    def generate_triangles(self, n_triangle: int) -> None:
        """Replace the data with ``n_triangle`` triangles.

        A count of zero or less leaves the current data untouched.
        """
        if n_triangle <= 0:
            return
        self.clear()
        for _ in range(n_triangle):
            self._generate_single_triangle()

    def clear(self) -> None:
        """Discard all generated triangles."""
        self.vertices = []
        self.indices = []

    def _generate_single_triangle(self) -> None:
        span = min(self.x_max - self.x_min, self.y_max - self.y_min)
        min_size = span * 0.01
        max_size = span * 0.05
        size = random_float(min_size, max_size)

        cx = random_float(self.x_min + max_size, self.x_max - max_size)
        cy = random_float(self.y_min + max_size, self.y_max - max_size)
        depth = 0.0

        offset = random_float(0.0, _TWO_PI)
        for angle in (offset, offset + _THIRD_TURN, offset + _TWO_THIRDS_TURN):
            self.vertices.extend(
                (cx + size * math.cos(angle), cy + size * math.sin(angle), depth)
            )

        vertex_count = len(self.vertices) // 3
        self.indices.extend(range(vertex_count - 3, vertex_count))