"""Color system.

The first three digest bytes become the foreground colour. The same bytes
also seed the first grid row; that overlap is kept so images stay identical
to previously generated ones.
"""

from dataclasses import replace
from typing import Sequence

from identicon.components import Color
from identicon.state import Identicon
from identicon.types import InvalidInputError


def pick_color(hex: Sequence[int]) -> Color:
    """Return ``Color(hex[0], hex[1], hex[2])``.

    Raises:
        InvalidInputError: If fewer than three bytes are given.
    """
    if len(hex) < 3:
        raise InvalidInputError(f"Need at least 3 bytes to pick a color, got {len(hex)}")
    return Color(red=hex[0], green=hex[1], blue=hex[2])


def color_system(identicon: Identicon) -> Identicon:
    if identicon.hex is None:
        raise InvalidInputError("Identicon has no hash; run hash_system first")
    return replace(identicon, color=pick_color(identicon.hex))
