"""Immutable identicon record.

This module defines the frozen :class:`Identicon` record threaded through the
generation pipeline. Every system is a pure function that takes an
``Identicon`` and returns a *new* one with one more field filled in; nothing
is mutated in place, so a record handed to one stage can safely be kept by
another.

Design notes:

* Fields that a stage has not produced yet are ``None``. Systems that need
  an earlier field raise :class:`identicon.types.InvalidInputError` when it
  is missing instead of guessing.
* Sequences are ``pyrsistent`` vectors or tuples so that no stage can append
  to a value another stage still holds.

See :mod:`identicon.pipeline` for the order in which systems run.
"""

from dataclasses import dataclass
from typing import Any, Optional, Tuple
from pyrsistent import pmap
from pyrsistent.typing import PMap, PVector

from identicon.components import Color, GridCell, Rectangle
from identicon.types import HashBytes

Grid = PVector[GridCell]
PixelMap = Tuple[Rectangle, ...]


@dataclass(frozen=True)
class Identicon:
    """Pipeline snapshot for one input string.

    Attributes:
        source (str): Input string the identicon is derived from.
        hex (HashBytes | None): 16 digest bytes.
        color (Color | None): Foreground colour picked from the digest.
        grid (Grid | None): Mirrored cells; after filtering only even cells.
        pixel_map (PixelMap | None): Canvas rectangles for surviving cells.
    """

    source: str
    hex: Optional[HashBytes] = None
    color: Optional[Color] = None
    grid: Optional[Grid] = None
    pixel_map: Optional[PixelMap] = None

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse view of the fields computed so far.

        Returns:
            PMap[str, Any]: Field name to value for every field that is not
            ``None``. Used for debug logging between stages.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if value is None:
                continue
            description = description.set(field, value)
        return description
