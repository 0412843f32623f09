"""Shared random source and base class for the test data generators."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod

from glrhi.color import Color

_rng = random.Random()


def seed(value: int | float | str | bytes | None) -> None:
    """Reseed the random source shared by all generators."""
    _rng.seed(value)


def random_float(low: float, high: float) -> float:
    """Return a float in ``[low, high)``; ``low`` itself when the range is empty."""
    if low >= high:
        return low
    return low + (high - low) * _rng.random()


def random_int(low: int, high: int) -> int:
    """Return an integer in ``[low, high]``; ``low`` itself when ``low >= high``."""
    if low >= high:
        return low
    return _rng.randint(low, high)


def random_color() -> Color:
    """Return a random colour with a fairly opaque alpha (0.8-1.0)."""
    red = random_float(0.0, 1.0)
    green = random_float(0.0, 1.0)
    blue = random_float(0.0, 1.0)
    alpha = random_float(0.8, 1.0)
    return Color(red, green, blue, alpha)


class FakeDataGenerator(ABC):
    """Base class for generators of random geometry within an XY range.

    Creating a generator reseeds the shared random source from system
    entropy; call :func:`seed` afterwards for reproducible output.
    """

    def __init__(self) -> None:
        self.x_min = -1.0
        self.x_max = 1.0
        self.y_min = -1.0
        self.y_max = 1.0
        _rng.seed()

    def set_range(self, x_min: float, x_max: float, y_min: float, y_max: float) -> None:
        """Set the coordinate range the generated data is drawn from."""
        self.x_min = x_min
        self.x_max = x_max
        self.y_min = y_min
        self.y_max = y_max

    @abstractmethod
    def clear(self) -> None:
        """Discard all generated data."""