"""Grid system.

Builds the horizontally symmetric 5x5 grid from the digest:

1. Keep the first ``GRID_BYTES`` (15) bytes; the 16th is discarded.
2. Chunk them into ``GRID_WIDTH`` rows of ``GROUP_SIZE`` bytes.
3. Mirror each row ``[a, b, c] -> [a, b, c, b, a]``.
4. Flatten row by row and number every value with its position.

The visual pattern depends on this exact ordering; rows and values within a
row are never reordered.
"""

from dataclasses import replace
from typing import List, Sequence
from pyrsistent import pvector
from pyrsistent.typing import PVector

from identicon.components import GridCell
from identicon.state import Grid, Identicon
from identicon.types import GRID_BYTES, GROUP_SIZE, InvalidInputError


def mirror_row(row: Sequence[int]) -> PVector[int]:
    """Reflect ``row`` around its last element.

    ``[a, b, *rest]`` becomes ``[a, b, *rest, b, a]``, so a three value group
    yields a five value palindrome centred on its third value.

    Raises:
        InvalidInputError: If ``row`` has fewer than two values.
    """
    if len(row) < 2:
        raise InvalidInputError(f"Row needs at least 2 values to mirror, got {len(row)}")
    first, second = row[0], row[1]
    return pvector(list(row) + [second, first])


def chunk(values: Sequence[int], size: int) -> List[Sequence[int]]:
    """Split ``values`` into consecutive groups of ``size``, dropping a short tail."""
    return [values[i : i + size] for i in range(0, len(values) - size + 1, size)]


def build_grid(hex: Sequence[int]) -> Grid:
    """Return the 25 mirrored, indexed cells derived from ``hex``.

    Args:
        hex (Sequence[int]): Digest bytes; only the first 15 are read.

    Returns:
        Grid: Cells ``(value, index)`` with indices ``0..24`` in order.

    Raises:
        InvalidInputError: If fewer than 15 bytes are given.
    """
    if len(hex) < GRID_BYTES:
        raise InvalidInputError(
            f"Need at least {GRID_BYTES} bytes to build a grid, got {len(hex)}"
        )
    values: List[int] = []
    for group in chunk(hex[:GRID_BYTES], GROUP_SIZE):
        values.extend(mirror_row(group))
    return pvector(GridCell(value=value, index=index) for index, value in enumerate(values))


def grid_system(identicon: Identicon) -> Identicon:
    if identicon.hex is None:
        raise InvalidInputError("Identicon has no hash; run hash_system first")
    return replace(identicon, grid=build_grid(identicon.hex))
