"""Rendering subpackage.

Turns the pixel map of an :class:`identicon.state.Identicon` into a Pillow
image. The renderer focuses on:

* A fixed 250x250 RGB canvas with a configurable background.
* Half-open rectangle fills so adjacent cells never overlap.
* A NumPy view of the result for callers that want the raw buffer.

See :mod:`identicon.renderer.raster` for the drawing routines.
"""

from .raster import IdenticonRenderer, draw, render, to_array

__all__ = ["IdenticonRenderer", "draw", "render", "to_array"]
