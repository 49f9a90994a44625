"""Color component.

The single foreground colour of an identicon, taken from the leading bytes of
the digest.
"""

from dataclasses import dataclass

from identicon.types import RGB


@dataclass(frozen=True)
class Color:
    """RGB colour with 8-bit channels.

    Attributes:
        red: Red channel (0-255).
        green: Green channel (0-255).
        blue: Blue channel (0-255).
    """

    red: int
    green: int
    blue: int

    def as_tuple(self) -> RGB:
        """Return the ``(r, g, b)`` tuple Pillow expects as a fill."""
        return (self.red, self.green, self.blue)
