"""Image loading for textures and texture arrays."""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from PIL import Image

logger = logging.getLogger(__name__)

PathLike = str | os.PathLike

_CHANNELS = {"L": 1, "LA": 2, "RGB": 3, "RGBA": 4}
_PLACEHOLDER_PIXEL = bytes((255, 0, 255, 255))


class TextureLoadError(Exception):
    """An image file is missing or cannot be decoded."""


@dataclass
class ImageData:
    """Decoded pixels, row by row, ``channels`` bytes per pixel unless stated."""

    data: bytes = b""
    width: int = 0
    height: int = 0
    channels: int = 0

    def is_valid(self) -> bool:
        """True when there are pixels and a positive size."""
        return bool(self.data) and self.width > 0 and self.height > 0


def _native_mode(image: Image.Image) -> str:
    mode = image.mode
    if mode in ("1", "L", "I", "I;16", "F"):
        return "L"
    if mode in ("LA", "La"):
        return "LA"
    if mode in ("RGBA", "RGBa", "PA") or (
        mode == "P" and "transparency" in image.info
    ):
        return "RGBA"
    return "RGB"


def _open(path: PathLike) -> Image.Image:
    if not Path(path).is_file():
        raise TextureLoadError(f"image file does not exist: {path}")
    try:
        with Image.open(path) as image:
            image.load()
            return image.copy()
    except (OSError, ValueError) as exc:
        raise TextureLoadError(f"cannot decode image {path}: {exc}") from exc


def _flip(image: Image.Image) -> Image.Image:
    return image.transpose(Image.Transpose.FLIP_TOP_BOTTOM)


def load_image(path: PathLike, flip_y: bool = True) -> ImageData:
    """Load an image keeping its own channel count (1, 2, 3 or 4).

    With ``flip_y`` the first row of the result is the bottom row of the image.
    """
    image = _open(path)
    mode = _native_mode(image)
    image = image.convert(mode)
    if flip_y:
        image = _flip(image)
    return ImageData(image.tobytes(), image.width, image.height, _CHANNELS[mode])


def load_and_resize_image(
    path: PathLike, target_width: int, target_height: int, flip_y: bool = True
) -> ImageData:
    """Load an image as RGBA, resized bilinearly to the target size if needed.

    ``channels`` reports the channel count stored in the file; ``data``
    always holds four bytes per pixel.
    """
    image = _open(path)
    channels = _CHANNELS[_native_mode(image)]
    image = image.convert("RGBA")
    if flip_y:
        image = _flip(image)
    if image.size != (target_width, target_height):
        image = image.resize(
            (target_width, target_height), Image.Resampling.BILINEAR
        )
    return ImageData(image.tobytes(), target_width, target_height, channels)


def error_placeholder(width: int, height: int) -> bytes:
    """An opaque magenta RGBA image used where a layer failed to load."""
    return _PLACEHOLDER_PIXEL * (width * height)


def build_texture_array(
    image_paths: Sequence[PathLike], width: int, height: int
) -> list[bytes]:
    """Load every path as one RGBA layer of the given size, flipped vertically.

    Layers that fail to load are replaced by the magenta placeholder.
    Raises ValueError when there are no paths or the size is not positive.
    """
    if not image_paths or width <= 0 or height <= 0:
        raise ValueError("texture array needs image paths and a positive size")
    placeholder = error_placeholder(width, height)
    layers = []
    for index, path in enumerate(image_paths):
        try:
            image = load_and_resize_image(path, width, height, flip_y=True)
        except TextureLoadError as exc:
            logger.warning("failed to load texture for array layer %d: %s", index, exc)
            layers.append(placeholder)
            continue
        layers.append(image.data if image.is_valid() else placeholder)
    return layers