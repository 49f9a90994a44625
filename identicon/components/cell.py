"""Grid cell component."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GridCell:
    """One square of the logical 5x5 grid.

    Attributes:
        value: Digest byte mirrored into this square; its parity decides
            whether the square is painted.
        index: Row-major position in the full grid (0 at top left). Kept
            unchanged by filtering so pixel mapping can still place the cell.
    """

    value: int
    index: int

    @property
    def is_even(self) -> bool:
        return self.value % 2 == 0
