"""Cell filter system.

Odd valued cells stay unpainted and are dropped from the grid entirely. The
survivors keep their original ``index`` so they can still be placed on the
canvas.
"""

from dataclasses import replace
from typing import Iterable
from pyrsistent import pvector

from identicon.components import GridCell
from identicon.state import Grid, Identicon
from identicon.types import InvalidInputError


def filter_odd_cells(grid: Iterable[GridCell]) -> Grid:
    """Return the even valued cells of ``grid`` in their original order.

    The result may be empty; that is a valid (blank) identicon.
    """
    return pvector(cell for cell in grid if cell.is_even)


def filter_system(identicon: Identicon) -> Identicon:
    if identicon.grid is None:
        raise InvalidInputError("Identicon has no grid; run grid_system first")
    return replace(identicon, grid=filter_odd_cells(identicon.grid))
