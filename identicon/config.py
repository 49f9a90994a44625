"""Rendering configuration.

Only presentation knobs live here. Grid geometry is fixed in
:mod:`identicon.types` because the cell maths depends on it.
"""

from dataclasses import dataclass

from identicon.types import RGB, WHITE, InvalidInputError


@dataclass(frozen=True)
class RenderConfig:
    """Options for drawing an identicon.

    Attributes:
        background: Fill for unpainted cells.
    """

    background: RGB = WHITE


DEFAULT_CONFIG = RenderConfig()


def parse_hex_color(value: str) -> RGB:
    """Parse ``"#rrggbb"`` (leading ``#`` optional) into an RGB tuple.

    Raises:
        InvalidInputError: If ``value`` is not six hex digits.
    """
    digits = value[1:] if value.startswith("#") else value
    if len(digits) != 6:
        raise InvalidInputError(f"Expected a #rrggbb colour, got {value!r}")
    try:
        return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
    except ValueError as e:
        raise InvalidInputError(f"Expected a #rrggbb colour, got {value!r}") from e
