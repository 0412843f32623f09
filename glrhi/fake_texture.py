"""Random textured quads backed by procedurally generated RGBA images."""

from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum

from glrhi.brush import Brush
from glrhi.fake_base import FakeDataGenerator, random_float, random_int
from glrhi.render_common import TextureData

MIN_TEXTURE_SIZE = 16
CHANNELS = 4

UploadFn = Callable[[int, int, bytes], int]
DeleteFn = Callable[[int], None]

_QUAD_INDICES = (0, 1, 2, 0, 2, 3)


class PatternType(IntEnum):
    """The kinds of image the generator can paint."""

    SOLID = 0
    CHECKERBOARD = 1
    NOISE = 2
    GRADIENT = 3


def _random_channel() -> int:
    return random_int(50, 255)


class FakeTextureData(FakeDataGenerator):
    """Generates random RGBA images and textured quads placed inside the range.

    Images are handed to an ``upload`` callable, which receives the width,
    height and RGBA bytes and returns the texture id to record.
    """

    def __init__(self) -> None:
        super().__init__()
        self.set_range(-1.0, 1.0, -1.0, 1.0)
        self.min_width = 32
        self.max_width = 256
        self.min_height = 32
        self.max_height = 256
        self.texture_datas: list[TextureData] = []
        self.texture_ids: list[int] = []

    def set_texture_size_range(
        self, min_width: int, max_width: int, min_height: int, max_height: int
    ) -> None:
        """Set the pixel size range; minimums are at least 16 and maximums at least the minimums."""
        self.min_width = max(MIN_TEXTURE_SIZE, min_width)
        self.max_width = max(self.min_width, max_width)
        self.min_height = max(MIN_TEXTURE_SIZE, min_height)
        self.max_height = max(self.min_height, max_height)

    def generate_random_image_data(self, width: int, height: int) -> bytes:
        """Paint a random RGBA image of the given size, one of the pattern types."""
        pattern = PatternType(random_int(0, 3))
        if pattern is PatternType.SOLID:
            return self._solid(width, height)
        if pattern is PatternType.CHECKERBOARD:
            return self._checkerboard(width, height)
        if pattern is PatternType.NOISE:
            return self._noise(width, height)
        return self._gradient(width, height)

    def generate_textures(self, count: int, upload: UploadFn | None) -> None:
        """Replace the data with ``count`` random textured quads.

        Nothing happens when ``count`` is not positive or ``upload`` is missing.
        """
        if count <= 0 or upload is None:
            return
        self.texture_datas = []
        self.texture_ids = []
        for _ in range(count):
            self._generate_single_texture(upload)

    def clear_texture(self, delete: DeleteFn | None) -> None:
        """Release every recorded texture id through ``delete`` and drop all data."""
        if delete is not None:
            for texture_id in self.texture_ids:
                if texture_id > 0:
                    delete(texture_id)
        self.texture_ids = []
        self.texture_datas = []

    def clear(self) -> None:
        """Drop the quad records; texture ids stay so they can still be released."""
        self.texture_datas = []

    def _generate_single_texture(self, upload: UploadFn) -> None:
        width = random_int(self.min_width, self.max_width)
        height = random_int(self.min_height, self.max_height)
        image = self.generate_random_image_data(width, height)
        texture_id = upload(width, height, image)

        img_width = random_float(0.1, 0.4)
        img_height = img_width * (height / width)

        center_x = random_float(self.x_min + img_width / 2, self.x_max - img_width / 2)
        center_y = random_float(
            self.y_min + img_height / 2, self.y_max - img_height / 2
        )

        left = center_x - img_width / 2
        right = center_x + img_width / 2
        bottom = center_y - img_height / 2
        top = center_y + img_height / 2

        red = random_float(0.5, 1.0)
        green = random_float(0.5, 1.0)
        blue = random_float(0.5, 1.0)
        alpha = random_float(0.5, 1.0)
        depth = random_float(-1.0, 1.0)

        self.texture_datas.append(
            TextureData(
                verts=[
                    left, bottom, 0.0, 0.0,
                    right, bottom, 1.0, 0.0,
                    right, top, 1.0, 1.0,
                    left, top, 0.0, 1.0,
                ],
                indices=list(_QUAD_INDICES),
                tex=texture_id,
                brush=Brush(red, green, blue, alpha, depth, 0),
            )
        )
        self.texture_ids.append(texture_id)

    @staticmethod
    def _solid(width: int, height: int) -> bytes:
        red, green, blue = _random_channel(), _random_channel(), _random_channel()
        alpha = random_int(128, 255)
        return bytes((red, green, blue, alpha)) * (width * height)

    @staticmethod
    def _checkerboard(width: int, height: int) -> bytes:
        cell = random_int(4, 16)
        first = bytes((_random_channel(), _random_channel(), _random_channel(), 255))
        second = bytes((_random_channel(), _random_channel(), _random_channel(), 255))
        return b"".join(
            first if (x // cell + y // cell) % 2 == 0 else second
            for y in range(height)
            for x in range(width)
        )

    @staticmethod
    def _noise(width: int, height: int) -> bytes:
        data = bytearray()
        for _ in range(width * height):
            data += bytes(
                (random_int(0, 255), random_int(0, 255), random_int(0, 255), 255)
            )
        return bytes(data)

    @staticmethod
    def _gradient(width: int, height: int) -> bytes:
        start = (_random_channel(), _random_channel(), _random_channel())
        end = (_random_channel(), _random_channel(), _random_channel())
        rows = []
        for y in range(height):
            ratio = y / height
            pixel = bytes(
                int(a + ratio * (b - a)) for a, b in zip(start, end)
            ) + b"\xff"
            rows.append(pixel * width)
        return b"".join(rows)