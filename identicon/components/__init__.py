"""Value components.

Immutable dataclasses passed between pipeline stages: the picked
:class:`Color`, the :class:`GridCell` squares of the logical grid and the
:class:`Rectangle` canvas regions built from them. Stages never modify a
component; they build new ones.
"""

from .cell import GridCell
from .color import Color
from .rectangle import Point, Rectangle

__all__ = [
    "Color",
    "GridCell",
    "Point",
    "Rectangle",
]
