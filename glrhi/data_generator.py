"""Ready-made sets of test data for each kind of renderer."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from glrhi.brush import Brush
from glrhi.fake_base import random_float
from glrhi.fake_polyline import FakePolyLineData
from glrhi.fake_texture import FakeTextureData, UploadFn
from glrhi.fake_triangle import FakeTriangleData
from glrhi.render_common import (
    InstanceTexData,
    PolylineData,
    TextureData,
    TriangleData,
)
from glrhi.texture_loader import PathLike, build_texture_array

logger = logging.getLogger(__name__)

_LINE_BATCHES = 20
_LINES_PER_BATCH = 10
_LINE_MIN_POINTS = 2
_LINE_MAX_POINTS = 15

_TRIANGLE_BATCHES = 10
_TRIANGLES_PER_BATCH = 10

_RANDOM_TEXTURES = 10

_INSTANCE_COUNT = 20
_INSTANCE_SIZE = 0.2

# Overlapping red, green, blue and yellow triangles at distinct depths.
_BLEND_TEST_TRIANGLES = (
    ((1.0, 0.0, 0.0), (-0.4, 0.4, -0.5, 0.2, 0.4, -0.5, -0.4, -0.4, -0.5)),
    ((0.0, 1.0, 0.0), (-0.2, 0.4, -0.6, 0.4, 0.4, -0.6, 0.4, -0.4, -0.6)),
    ((0.0, 0.0, 1.0), (-0.4, 0.0, -0.7, 0.2, 0.0, -0.7, -0.4, -0.6, -0.7)),
    ((1.0, 1.0, 0.0), (-0.2, 0.0, -0.8, 0.4, 0.0, -0.8, 0.4, -0.6, -0.8)),
)


class DataGenerator:
    """Builds batches of random polylines, triangles and textures."""

    def gen_line_data(self) -> list[PolylineData]:
        """Return 20 batches of 10 random polylines, each batch with its own brush."""
        fake = FakePolyLineData()
        batches = []
        for _ in range(_LINE_BATCHES):
            fake.set_range(-1.0, 1.0, -1.0, 1.0)
            fake.generate_lines(_LINES_PER_BATCH, _LINE_MIN_POINTS, _LINE_MAX_POINTS)
            red = random_float(0.0, 1.0)
            green = random_float(0.0, 1.0)
            blue = random_float(0.0, 1.0)
            alpha = random_float(0.1, 1.0)
            depth = random_float(-1.0, 1.0)
            batches.append(
                PolylineData(
                    verts=list(fake.vertices),
                    count=list(fake.line_infos),
                    brush=Brush(red, green, blue, alpha, depth),
                )
            )
        return batches

    def gen_triangle_data(self) -> list[TriangleData]:
        """Return the default triangle set, the blend test triangles."""
        return self.gen_blend_test_triangle_data()

    def gen_blend_test_triangle_data(self) -> list[TriangleData]:
        """Return four overlapping coloured triangles with random alpha and depth."""
        triangles = []
        for (red, green, blue), verts in _BLEND_TEST_TRIANGLES:
            alpha = random_float(0.2, 1.0)
            depth = random_float(-1.0, 1.0)
            triangles.append(
                TriangleData(
                    verts=list(verts),
                    indices=[0, 1, 2],
                    brush=Brush(red, green, blue, alpha, depth),
                )
            )
        return triangles

    def gen_random_triangle_data(self) -> list[TriangleData]:
        """Return 10 batches of 10 small random triangles, each with its own brush."""
        batches = []
        for _ in range(_TRIANGLE_BATCHES):
            fake = FakeTriangleData()
            fake.set_range(-1.0, 1.0, -1.0, 1.0)
            fake.generate_triangles(_TRIANGLES_PER_BATCH)
            red = random_float(0.0, 1.0)
            green = random_float(0.0, 1.0)
            blue = random_float(0.0, 1.0)
            alpha = random_float(0.3, 1.0)
            depth = random_float(-1.0, 1.0)
            batches.append(
                TriangleData(
                    verts=list(fake.vertices),
                    indices=list(fake.indices),
                    brush=Brush(red, green, blue, alpha, depth),
                )
            )
        return batches

    def gen_random_texture_data(self, upload: UploadFn | None) -> list[TextureData]:
        """Return 10 textured quads over procedurally painted images.

        Each image goes through ``upload`` (width, height, RGBA bytes), which
        returns the texture id. Without ``upload`` nothing is generated.
        """
        if upload is None:
            logger.warning("no texture upload function available")
            return []
        fake = FakeTextureData()
        fake.set_range(-1.0, 1.0, -1.0, 1.0)
        fake.set_texture_size_range(32, 256, 32, 256)
        fake.generate_textures(_RANDOM_TEXTURES, upload)
        return list(fake.texture_datas)

    def gen_instance_texture_data(
        self, image_paths: Sequence[PathLike], width: int = 256, height: int = 256
    ) -> tuple[list[bytes], list[InstanceTexData]]:
        """Build a texture array from ``image_paths`` and 20 random instances of it.

        Returns the RGBA layers (one per path, magenta where a file failed to
        load) and the instances, which cycle through the layers in order.
        Raises ValueError when there are no paths or the size is not positive.
        """
        layers = build_texture_array(image_paths, width, height)
        layer_count = len(layers)
        instances = []
        for index in range(_INSTANCE_COUNT):
            x = random_float(-0.9, 0.9)
            y = random_float(-0.9, 0.9)
            inst_width = _INSTANCE_SIZE * random_float(0.8, 1.2)
            inst_height = _INSTANCE_SIZE * random_float(0.8, 1.2)
            alpha = random_float(0.2, 0.8)
            instances.append(
                InstanceTexData(
                    x=x,
                    y=y,
                    width=inst_width,
                    height=inst_height,
                    texture_layer=index % layer_count,
                    alpha=alpha,
                )
            )
        return layers, instances