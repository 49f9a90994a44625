"""Point and Rectangle components.

Integer canvas coordinates. A rectangle covers the half-open ranges
``[top_left.x, bottom_right.x)`` and ``[top_left.y, bottom_right.y)``.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Point:
    """Canvas coordinate.

    Attributes:
        x: Horizontal pixel offset (0 at left).
        y: Vertical pixel offset (0 at top).
    """

    x: int
    y: int


@dataclass(frozen=True)
class Rectangle:
    top_left: Point
    bottom_right: Point

    @property
    def width(self) -> int:
        return self.bottom_right.x - self.top_left.x

    @property
    def height(self) -> int:
        return self.bottom_right.y - self.top_left.y

    def inclusive_box(self) -> Tuple[int, int, int, int]:
        """Return the ``(x0, y0, x1, y1)`` box for ``ImageDraw.rectangle``.

        Pillow includes both corners, so the exclusive bottom right edge is
        pulled in by one pixel.
        """
        return (
            self.top_left.x,
            self.top_left.y,
            self.bottom_right.x - 1,
            self.bottom_right.y - 1,
        )
