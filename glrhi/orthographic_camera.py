"""An orthographic camera with projection, view and model matrices."""

from __future__ import annotations

import math
from collections.abc import Sequence

Size = tuple[int, int]
PointF = tuple[float, float]

_IDENTITY = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


def multiply_matrices(a: Sequence[float], b: Sequence[float]) -> list[float]:
    """Multiply two 4x4 row-major matrices, returning ``a @ b``."""
    return [
        sum(a[row * 4 + k] * b[k * 4 + col] for k in range(4))
        for row in range(4)
        for col in range(4)
    ]


def _is_empty(view_size: Size) -> bool:
    width, height = view_size
    return width <= 0 or height <= 0


class OrthographicCamera:
    """Pan and zoom camera over an orthographic projection.

    All matrices are 4x4, stored row by row, with translation in the last column.
    """

    def __init__(self) -> None:
        self.enable_trans = True
        self.left = -1.0
        self.right = 1.0
        self.bottom = -1.0
        self.top = 1.0
        self.near_plane = -1.0
        self.far_plane = 1.0
        self.zoom = 1.0
        self.trans_x = 0.0
        self.trans_y = 0.0
        self._model = list(_IDENTITY)
        self._projection = [0.0] * 16
        self._view = [0.0] * 16
        self._mvp = [0.0] * 16
        self._calculate_projection()
        self._calculate_view()
        self._calculate_mvp()

    @property
    def projection_matrix(self) -> tuple[float, ...]:
        return tuple(self._projection)

    @property
    def view_matrix(self) -> tuple[float, ...]:
        return tuple(self._view)

    @property
    def model_matrix(self) -> tuple[float, ...]:
        return tuple(self._model)

    @property
    def model_view_projection_matrix(self) -> tuple[float, ...]:
        return tuple(self._mvp)

    def set_orthographic(
        self,
        left: float,
        right: float,
        bottom: float,
        top: float,
        near_plane: float = -1.0,
        far_plane: float = 1.0,
    ) -> None:
        """Set the projection volume."""
        self.left, self.right = left, right
        self.bottom, self.top = bottom, top
        self.near_plane, self.far_plane = near_plane, far_plane
        self._calculate_projection()
        self._calculate_mvp()

    def update_matrix(self, view_size: Size) -> None:
        """Rebuild the view and combined matrices."""
        if _is_empty(view_size):
            return
        self._calculate_view()
        self._calculate_mvp()

    def screen_to_world(self, screen_pos: PointF, view_size: Size) -> PointF:
        """Convert a pixel position to world coordinates."""
        if _is_empty(view_size):
            return (0.0, 0.0)
        width, height = view_size
        ndc_x = 2.0 * screen_pos[0] / width - 1.0
        ndc_y = 1.0 - 2.0 * screen_pos[1] / height
        world_x = ndc_x / (self._projection[0] * self.zoom) - self.trans_x
        world_y = ndc_y / (self._projection[5] * self.zoom) - self.trans_y
        return (world_x, world_y)

    def zoom_to_range(
        self, min_x: float, min_y: float, max_x: float, max_y: float, view_size: Size
    ) -> None:
        """Fit and centre the given world rectangle in the view.

        Raises ValueError when the rectangle has neither width nor height.
        """
        if _is_empty(view_size):
            return
        world_w = max_x - min_x
        world_h = max_y - min_y
        if world_w == 0 and world_h == 0:
            raise ValueError("range has neither width nor height")
        width, height = view_size
        aspect = width / height
        if world_h == 0:
            ratio = math.copysign(math.inf, world_w)
        else:
            ratio = world_w / world_h
        if ratio > aspect:
            self.zoom = 2.0 / world_w
        else:
            self.zoom = 2.0 / world_h
        self.trans_x = -(min_x + world_w / 2.0)
        self.trans_y = -(min_y + world_h / 2.0)
        self.update_matrix(view_size)

    def translate(self, delta: PointF, view_size: Size) -> None:
        """Pan by a pixel offset."""
        if not self.enable_trans or _is_empty(view_size):
            return
        width, height = view_size
        self.trans_x += delta[0] / (self.zoom * width / 2.0)
        self.trans_y += -delta[1] / (self.zoom * height / 2.0)
        self.update_matrix(view_size)

    def scale(self, screen_pos: PointF, scale_factor: float, view_size: Size) -> None:
        """Zoom by ``scale_factor`` around the cursor position."""
        if not self.enable_trans or _is_empty(view_size):
            return
        before = self.screen_to_world(screen_pos, view_size)
        self.zoom *= scale_factor
        after = self.screen_to_world(screen_pos, view_size)
        self.trans_x += before[0] - after[0]
        self.trans_y += before[1] - after[1]
        self.update_matrix(view_size)

    def set_model_matrix(self, model_matrix: Sequence[float] | None) -> None:
        """Replace the model matrix; ``None`` leaves it unchanged."""
        if model_matrix is None:
            return
        values = [float(v) for v in model_matrix]
        if len(values) != 16:
            raise ValueError(f"model matrix needs 16 values, got {len(values)}")
        self._model = values
        self._calculate_mvp()

    def _calculate_projection(self) -> None:
        width = self.right - self.left
        height = self.top - self.bottom
        depth = self.far_plane - self.near_plane
        self._projection = [
            2.0 / width, 0.0, 0.0, -(self.right + self.left) / width,
            0.0, 2.0 / height, 0.0, -(self.top + self.bottom) / height,
            0.0, 0.0, -2.0 / depth, -(self.far_plane + self.near_plane) / depth,
            0.0, 0.0, 0.0, 1.0,
        ]

    def _calculate_view(self) -> None:
        s = self.zoom
        self._view = [
            s, 0.0, 0.0, s * self.trans_x,
            0.0, s, 0.0, s * self.trans_y,
            0.0, 0.0, 1.0, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ]

    def _calculate_mvp(self) -> None:
        self._mvp = multiply_matrices(
            self._projection, multiply_matrices(self._view, self._model)
        )