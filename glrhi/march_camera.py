"""A 2D camera kept as a 3x3 row-major matrix of scale and translation."""

from __future__ import annotations

Size = tuple[int, int]
PointF = tuple[float, float]


def _is_empty(view_size: Size) -> bool:
    width, height = view_size
    return width <= 0 or height <= 0


class MarchCamera:
    """Pan and zoom camera mapping world coordinates to normalised device space."""

    def __init__(self) -> None:
        self.enable_trans = True
        self.zoom = 1.0
        self.trans_x = 0.0
        self.trans_y = 0.0
        self._matrix = [1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0]

    @property
    def matrix(self) -> tuple[float, ...]:
        """The nine matrix entries, row by row."""
        return tuple(self._matrix)

    def update_matrix(self, view_size: Size) -> None:
        """Rebuild the matrix for a view of the given pixel size."""
        if _is_empty(view_size):
            return
        width, height = view_size
        aspect = width / height
        sx = self.zoom
        sy = self.zoom * aspect
        self._matrix = [
            sx, 0.0, self.trans_x * sx,
            0.0, sy, self.trans_y * sy,
            0.0, 0.0, 1.0,
        ]

    def screen_to_world(self, screen_pos: PointF, view_size: Size) -> PointF:
        """Convert a pixel position to world coordinates."""
        if _is_empty(view_size) or abs(self.zoom) < 1e-6:
            return (0.0, 0.0)
        width, height = view_size
        aspect = width / height
        ndc_x = 2.0 * screen_pos[0] / width - 1.0
        ndc_y = 1.0 - 2.0 * screen_pos[1] / height
        sx = self.zoom
        sy = self.zoom * aspect
        return (ndc_x / sx - self.trans_x, ndc_y / sy - self.trans_y)

    def zoom_to_range(
        self, min_x: float, min_y: float, max_x: float, max_y: float, view_size: Size
    ) -> None:
        """Fit and centre the given world rectangle in the view."""
        if _is_empty(view_size):
            return
        width, height = view_size
        span_w = abs(max_x - min_x)
        span_h = abs(max_y - min_y)
        span_w = span_w if span_w > 1e-6 else 1.0
        span_h = span_h if span_h > 1e-6 else 1.0
        view_w = 2.0
        view_h = 2.0 * height / width
        self.zoom = min(view_w / span_w, view_h / span_h)
        self.trans_x = -(min_x + max_x) * 0.5
        self.trans_y = -(min_y + max_y) * 0.5
        self.update_matrix(view_size)

    def translate(self, delta: PointF, view_size: Size) -> None:
        """Pan by a pixel offset."""
        if not self.enable_trans or _is_empty(view_size):
            return
        width, height = view_size
        aspect = width / height
        ndc_dx = 2.0 * delta[0] / width
        ndc_dy = -2.0 * delta[1] / height
        self.trans_x += ndc_dx / self.zoom
        self.trans_y += ndc_dy / (self.zoom * aspect)
        self.update_matrix(view_size)

    def scale(self, screen_pos: PointF, scale_factor: float, view_size: Size) -> None:
        """Zoom by ``scale_factor`` keeping the world point under the cursor fixed."""
        if not self.enable_trans or _is_empty(view_size):
            return
        before = self.screen_to_world(screen_pos, view_size)
        self.zoom *= scale_factor
        after = self.screen_to_world(screen_pos, view_size)
        self.trans_x += after[0] - before[0]
        self.trans_y += after[1] - before[1]
        self.update_matrix(view_size)