"""Plain data records passed between the data generators and the renderers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from glrhi.brush import Brush

Vec3 = tuple[float, float, float]
Vec4 = tuple[float, float, float, float]


@dataclass
class RectF:
    """An axis-aligned rectangle given by its top-left corner and its size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass
class RenderSnap:
    """A rendered image together with the world area it shows."""

    image: Any
    world_rect: RectF


def _line_brush() -> Brush:
    return Brush(0.0, 0.0, 0.0, 1.0, 0.0)


@dataclass
class PolylineData:
    """A batch of polylines sharing one brush.

    ``verts`` holds x, y, len triples; ``count`` holds the number of
    vertices of each polyline in turn.
    """

    verts: list[float] = field(default_factory=list)
    count: list[int] = field(default_factory=list)
    brush: Brush = field(default_factory=_line_brush)

    def line_count(self) -> int:
        """Return the number of polylines in the batch."""
        return len(self.count)


@dataclass
class TriangleData:
    """Indexed triangles (x, y, len per vertex) sharing one brush."""

    verts: list[float] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    brush: Brush = field(default_factory=Brush)

    def triangle_count(self) -> int:
        """Return the number of whole triangles described by the indices."""
        return len(self.indices) // 3


@dataclass
class TextureData:
    """Indexed textured geometry: x, y, u, v per vertex, plus a texture id."""

    verts: list[float] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    tex: int = 0
    brush: Brush = field(default_factory=Brush)


@dataclass
class InstanceTexData:
    """One instance of a quad drawn from a layer of a texture array."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    texture_layer: int = 0
    alpha: float = 1.0


@dataclass
class InstanceLineData:
    """One instanced line segment."""

    pos1: Vec3 = (0.0, 0.0, 0.0)
    pos2: Vec3 = (0.0, 0.0, 0.0)
    color: Vec4 = (1.0, 1.0, 1.0, 1.0)
    width: float = 0.0
    depth: float = 0.0

    def flatten(self) -> list[float]:
        """Return the fields as the float sequence of one instance record."""
        return [*self.pos1, *self.pos2, *self.color, self.width, self.depth]


@dataclass
class InstanceTriangleData:
    """One instanced triangle."""

    pos1: Vec3 = (0.0, 0.0, 0.0)
    pos2: Vec3 = (0.0, 0.0, 0.0)
    pos3: Vec3 = (0.0, 0.0, 0.0)
    color: Vec4 = (1.0, 1.0, 1.0, 1.0)
    depth: float = 0.0

    def flatten(self) -> list[float]:
        """Return the fields as the float sequence of one instance record."""
        return [*self.pos1, *self.pos2, *self.pos3, *self.color, self.depth]