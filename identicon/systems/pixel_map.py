"""Pixel map system.

Places every surviving cell on the canvas. A cell's ``index`` is read as a
row-major position in a ``GRID_WIDTH`` column grid and scaled by
``CELL_SIZE``.
"""

from dataclasses import replace
from typing import Iterable

from identicon.components import GridCell, Point, Rectangle
from identicon.state import Identicon, PixelMap
from identicon.types import CELL_SIZE, GRID_CELLS, GRID_WIDTH, InvalidInputError


def cell_rectangle(cell: GridCell) -> Rectangle:
    """Return the canvas square covered by ``cell``.

    Raises:
        InvalidInputError: If the index lies outside the grid.
    """
    if not 0 <= cell.index < GRID_CELLS:
        raise InvalidInputError(
            f"Cell index {cell.index} outside grid of {GRID_CELLS} cells"
        )
    column, row = cell.index % GRID_WIDTH, cell.index // GRID_WIDTH
    horizontal, vertical = column * CELL_SIZE, row * CELL_SIZE
    return Rectangle(
        top_left=Point(horizontal, vertical),
        bottom_right=Point(horizontal + CELL_SIZE, vertical + CELL_SIZE),
    )


def build_pixel_map(cells: Iterable[GridCell]) -> PixelMap:
    """Return one rectangle per cell, in cell order."""
    return tuple(cell_rectangle(cell) for cell in cells)


def pixel_map_system(identicon: Identicon) -> Identicon:
    if identicon.grid is None:
        raise InvalidInputError("Identicon has no grid; run grid_system first")
    return replace(identicon, pixel_map=build_pixel_map(identicon.grid))
