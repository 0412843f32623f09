"""Render brushes: a colour together with a depth and a type tag."""

from __future__ import annotations

from glrhi.color import EPSILON, Color


class Brush:
    """Colour, depth and type information used when drawing a primitive."""

    __slots__ = ("color", "depth", "type")
    __hash__ = None  # mutable, compared with a tolerance

    def __init__(
        self,
        red: float = 1.0,
        green: float = 1.0,
        blue: float = 1.0,
        alpha: float = 1.0,
        depth: float = 0.0,
        type: int = 0,
    ) -> None:
        self.color = Color(red, green, blue, alpha)
        self.depth = depth
        self.type = type

    def __repr__(self) -> str:
        return (
            f"Brush(red={self.red!r}, green={self.green!r}, blue={self.blue!r}, "
            f"alpha={self.alpha!r}, depth={self.depth!r}, type={self.type!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Brush):
            return NotImplemented
        return (
            self.color == other.color
            and abs(self.depth - other.depth) < EPSILON
            and self.type == other.type
        )

    def __copy__(self) -> Brush:
        return Brush(*self.color.rgba(), depth=self.depth, type=self.type)

    copy = __copy__

    @property
    def red(self) -> float:
        return self.color.red

    @red.setter
    def red(self, value: float) -> None:
        self.color.red = value

    @property
    def green(self) -> float:
        return self.color.green

    @green.setter
    def green(self, value: float) -> None:
        self.color.green = value

    @property
    def blue(self) -> float:
        return self.color.blue

    @blue.setter
    def blue(self, value: float) -> None:
        self.color.blue = value

    @property
    def alpha(self) -> float:
        return self.color.alpha

    @alpha.setter
    def alpha(self, value: float) -> None:
        self.color.alpha = value

    def set(self, red: float, green: float, blue: float, alpha: float = 1.0) -> None:
        """Replace all four colour channels."""
        self.color.set(red, green, blue, alpha)

    def set_rgb(self, red: float, green: float, blue: float) -> None:
        """Replace the colour channels, keeping the current alpha."""
        self.color.set_rgb(red, green, blue)

    def rgb(self) -> tuple[float, float, float]:
        """Return the red, green and blue channels."""
        return self.color.rgb()

    def rgba(self) -> tuple[float, float, float, float]:
        """Return all four colour channels."""
        return self.color.rgba()

    def clamp(self) -> None:
        """Limit every colour channel to the range 0.0-1.0 in place."""
        self.color.clamp()

    def blend(self, other: Brush, factor: float) -> Brush:
        """Mix colours with ``other``; depth and type are kept from this brush."""
        mixed = self.color.blend(other.color, factor)
        return Brush(*mixed.rgba(), depth=self.depth, type=self.type)