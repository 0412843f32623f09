"""A pan-and-zoom 2D drawing view with rulers along its left and bottom edges.

The view keeps a polyline that grows with each left click, a fixed cross
through the origin of normalised device space, and ruler ticks whose spacing
follows the zoom. It holds the state and geometry only; drawing is left to
whatever presents it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

ORTHO_SIZE = 1000.0
RULER_TICK = 0.1
ZOOM_IN = 1.1
ZOOM_OUT = 0.9
DRAG_SPEED = 2.0


@dataclass(frozen=True)
class Point:
    """A 2D point."""

    x: float
    y: float


@dataclass(frozen=True)
class RulerLine:
    """One ruler tick in normalised device coordinates and the world value it marks."""

    start: Point
    end: Point
    world_value: float


def ruler_step(view_width: float) -> float:
    """Return the world distance between ruler ticks for a view this wide.

    The step is a power of ten no larger than a tenth of the width, doubled
    when that would give more than twenty ticks across the view.
    """
    if view_width <= 0:
        raise ValueError("view width must be positive")
    step = 10.0 ** math.floor(math.log10(view_width / 10.0))
    if view_width / step > 20:
        step *= 2.0
    return step


def label_position(line: RulerLine, width: int, height: int) -> tuple[float, float, str]:
    """Return the pixel position and text of the label for a ruler tick.

    Ticks on the left ruler (horizontal ticks) are labelled to their right;
    ticks on the bottom ruler are labelled above and to the left.
    """
    screen_x = (line.start.x + 1.0) / 2.0 * width
    screen_y = (1.0 - line.start.y) / 2.0 * height
    text = f"{line.world_value:.1f}"
    if line.start.y == line.end.y:
        return (screen_x + 5, screen_y, text)
    return (screen_x - 10, screen_y - 5, text)


class MarchView:
    """State of the drawing view: size, zoom, pan, drawn points and rulers."""

    def __init__(self, width: int = 640, height: int = 480) -> None:
        self.scale = 1.0
        self.translation = (0.0, 0.0)
        self.last_pos = (0, 0)
        self.line_points: list[Point] = []
        self.cross_points: list[Point] = [
            Point(-0.9, 0.0),
            Point(0.9, 0.0),
            Point(0.0, -0.9),
            Point(0.0, 0.9),
        ]
        self.ruler_lines: list[RulerLine] = []
        self.width = 0
        self.height = 0
        self.resize(width, height)

    @property
    def aspect(self) -> float:
        """Width divided by height."""
        return self.width / self.height

    def resize(self, width: int, height: int) -> None:
        """Set the pixel size of the view and rebuild the rulers."""
        if width <= 0 or height <= 0:
            raise ValueError(f"view size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.update_ruler()

    def projection(self) -> tuple[float, ...]:
        """Return the row-major 4x4 orthographic projection for the current size."""
        right = ORTHO_SIZE * self.aspect
        top = ORTHO_SIZE
        near, far = -1.0, 1.0
        return (
            1.0 / right, 0.0, 0.0, 0.0,
            0.0, 1.0 / top, 0.0, 0.0,
            0.0, 0.0, -2.0 / (far - near), -(far + near) / (far - near),
            0.0, 0.0, 0.0, 1.0,
        )

    def left_click(self, x: float, y: float) -> Point:
        """Append the world point under pixel ``(x, y)`` to the polyline and return it."""
        ndc_x = x / self.width * 2.0 - 1.0
        ndc_y = -(y / self.height * 2.0 - 1.0)
        tx, ty = self.translation
        point = Point(
            (ndc_x * ORTHO_SIZE * self.aspect - tx) / self.scale,
            (ndc_y * ORTHO_SIZE - ty) / self.scale,
        )
        self.line_points.append(point)
        return point

    def middle_press(self, x: int, y: int) -> None:
        """Start a pan at pixel ``(x, y)``."""
        self.last_pos = (x, y)

    def middle_drag(self, x: int, y: int) -> None:
        """Pan by the pixel distance moved since the last press or drag."""
        dx_px = x - self.last_pos[0]
        dy_px = y - self.last_pos[1]
        dx = dx_px * DRAG_SPEED * self.aspect / self.width
        dy = -dy_px * DRAG_SPEED / self.height
        tx, ty = self.translation
        self.translation = (tx + dx * ORTHO_SIZE, ty + dy * ORTHO_SIZE)
        self.last_pos = (x, y)
        self.update_ruler()

    def wheel(self, x: float, y: float, angle_delta: int) -> None:
        """Zoom in for a positive wheel delta, out otherwise, around pixel ``(x, y)``."""
        factor = ZOOM_IN if angle_delta > 0 else ZOOM_OUT
        tx, ty = self.translation
        mouse_x = (
            (x / self.width * 2.0 - 1.0) * ORTHO_SIZE * self.aspect / self.scale - tx
        )
        mouse_y = -(y / self.height * 2.0 - 1.0) * ORTHO_SIZE / self.scale - ty

        self.scale *= factor
        self.translation = (
            tx - mouse_x * (factor - 1.0) * self.scale,
            ty - mouse_y * (factor - 1.0) * self.scale,
        )
        self.update_ruler()

    def update_ruler(self) -> None:
        """Rebuild the ruler ticks for the visible world area."""
        view_width = ORTHO_SIZE * self.aspect * 2.0 / self.scale
        view_height = ORTHO_SIZE * 2.0 / self.scale
        tx, ty = self.translation
        left = -view_width / 2.0 + tx
        right = view_width / 2.0 + tx
        bottom = -view_height / 2.0 + ty
        top = view_height / 2.0 + ty
        step = ruler_step(view_width)

        def to_ndc(world_x: float, world_y: float) -> tuple[float, float]:
            return (
                (world_x - left) / (right - left) * 2.0 - 1.0,
                (world_y - bottom) / (top - bottom) * 2.0 - 1.0,
            )

        lines: list[RulerLine] = []
        for x in self._ticks(left, right, step):
            ndc_x, _ = to_ndc(x, bottom)
            if -1.0 <= ndc_x <= 1.0:
                lines.append(
                    RulerLine(Point(ndc_x, -1.0), Point(ndc_x, -1.0 + RULER_TICK), x)
                )
        for y in self._ticks(bottom, top, step):
            _, ndc_y = to_ndc(left, y)
            if -1.0 <= ndc_y <= 1.0:
                lines.append(
                    RulerLine(Point(-1.0, ndc_y), Point(-1.0 + RULER_TICK, ndc_y), y)
                )
        self.ruler_lines = lines

    def ruler_points(self) -> list[Point]:
        """Return the ruler ticks as consecutive start and end points."""
        return [point for line in self.ruler_lines for point in (line.start, line.end)]

    @staticmethod
    def _ticks(low: float, high: float, step: float):
        start = math.floor(low / step) * step
        index = 0
        while (value := start + index * step) <= high:
            yield value
            index += 1