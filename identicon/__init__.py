"""Deterministic identicons.

Derives a symmetric 5x5 pattern and a colour from the MD5 digest of a string
and draws it as a 250x250 image. Every stage is a pure function over
immutable values; see :mod:`identicon.pipeline` for how they are chained.
"""

from identicon.pipeline import generate, main
from identicon.renderer import IdenticonRenderer, draw, render
from identicon.state import Identicon

__all__ = ["Identicon", "IdenticonRenderer", "draw", "generate", "main", "render"]
