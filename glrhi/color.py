"""RGBA colour values with tolerant comparison, clamping and blending."""

from __future__ import annotations

from dataclasses import dataclass

EPSILON = 1e-6


def _clamp_unit(value: float) -> float:
    return max(0.0, min(1.0, value))


@dataclass(eq=False)
class Color:
    """An RGBA colour whose channels are nominally in the range 0.0-1.0."""

    red: float = 1.0
    green: float = 1.0
    blue: float = 1.0
    alpha: float = 1.0

    __hash__ = None  # mutable, compared with a tolerance

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return all(
            abs(mine - theirs) < EPSILON
            for mine, theirs in zip(self.rgba(), other.rgba())
        )

    def set(self, red: float, green: float, blue: float, alpha: float = 1.0) -> None:
        """Replace all four channels."""
        self.red, self.green, self.blue, self.alpha = red, green, blue, alpha

    def set_rgb(self, red: float, green: float, blue: float) -> None:
        """Replace the colour channels, keeping the current alpha."""
        self.red, self.green, self.blue = red, green, blue

    def rgb(self) -> tuple[float, float, float]:
        """Return the red, green and blue channels."""
        return (self.red, self.green, self.blue)

    def rgba(self) -> tuple[float, float, float, float]:
        """Return all four channels."""
        return (self.red, self.green, self.blue, self.alpha)

    def clamp(self) -> None:
        """Limit every channel to the range 0.0-1.0 in place."""
        self.set(*(_clamp_unit(channel) for channel in self.rgba()))

    def blend(self, other: Color, factor: float) -> Color:
        """Mix with ``other``: 0 keeps this colour, 1 gives ``other``.

        The factor is clamped to the range 0.0-1.0.
        """
        factor = _clamp_unit(factor)
        inverse = 1.0 - factor
        return Color(
            *(
                mine * inverse + theirs * factor
                for mine, theirs in zip(self.rgba(), other.rgba())
            )
        )