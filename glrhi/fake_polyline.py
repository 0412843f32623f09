"""Random polylines that wander around their starting point."""

from __future__ import annotations

import math

from glrhi.fake_base import FakeDataGenerator, random_float, random_int

MAX_POINTS = 5000


class FakePolyLineData(FakeDataGenerator):
    """Generates polylines as x, y, z triples with per-line point counts."""

    def __init__(self) -> None:
        super().__init__()
        self.vertices: list[float] = []
        self.line_infos: list[int] = []

    def generate_lines(
        self, line_count: int = 1, min_points: int = 2, max_points: int = MAX_POINTS
    ) -> None:
        """Replace the data with ``line_count`` random polylines.

        Point counts are drawn from ``[min_points, max_points]`` after the
        bounds are limited to at least 2 and at most 5000 points.
        """
        min_points = max(min_points, 2)
        max_points = min(max_points, MAX_POINTS)
        min_points = min(min_points, max_points)

        self.clear()
        for _ in range(line_count):
            self._generate_single_line(random_int(min_points, max_points))

    def clear(self) -> None:
        """Discard all generated polylines."""
        self.vertices = []
        self.line_infos = []

    def _generate_single_line(self, point_count: int) -> None:
        cx = random_float(self.x_min, self.x_max)
        cy = random_float(self.y_min, self.y_max)
        max_radius = min(
            (self.x_max - self.x_min) * 0.4, (self.y_max - self.y_min) * 0.4
        )

        points = [(cx, cy)]
        x, y = cx, cy
        for _ in range(1, point_count):
            dist = math.hypot(x - cx, y - cy)
            prev_angle = math.atan2(y - cy, x - cx)

            angle_offset = random_float(-math.pi / 6.0, math.pi / 6.0)
            move = random_float(max_radius * 0.02, max_radius * 0.1)

            # Near the edge, steer back towards the centre.
            if dist > max_radius * 0.8:
                angle_offset -= prev_angle - math.atan2(cy - y, cx - x)
                angle_offset *= 0.5

            new_angle = prev_angle + angle_offset
            new_dist = dist + move * (random_float(-0.5, 1.5) - 0.5)
            new_dist = max(0.0, min(max_radius, new_dist))

            x = cx + new_dist * math.cos(new_angle)
            y = cy + new_dist * math.sin(new_angle)
            points.append((x, y))

        self.vertices.extend(
            coord for px, py in points for coord in (px, py, 0.0)
        )
        self.line_infos.append(point_count)