"""Common type aliases, geometry constants and the domain error.

The canvas geometry is fixed: a ``GRID_WIDTH`` x ``GRID_WIDTH`` grid of
``CELL_SIZE`` pixel squares. Changing one constant requires changing the
others consistently (``CELL_SIZE * GRID_WIDTH == CANVAS_SIZE``).
"""

from typing import Tuple
from pyrsistent.typing import PVector

HASH_LENGTH = 16
GROUP_SIZE = 3
GRID_WIDTH = 5
GRID_CELLS = GRID_WIDTH * GRID_WIDTH
CELL_SIZE = 50
CANVAS_SIZE = CELL_SIZE * GRID_WIDTH

# Bytes consumed by the grid; the remainder of the digest is discarded.
GRID_BYTES = GROUP_SIZE * GRID_WIDTH

HashBytes = PVector[int]
RGB = Tuple[int, int, int]

WHITE: RGB = (255, 255, 255)


class InvalidInputError(ValueError):
    """Raised when a stage receives malformed intermediate data.

    These are programmer errors (a stage called out of pipeline order or with
    hand-built values), never runtime conditions of the normal pipeline.
    """
