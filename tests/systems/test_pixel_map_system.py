from typing import Tuple

import pytest

from identicon.components import GridCell, Point, Rectangle
from identicon.state import Identicon
from identicon.systems.pixel_map import (
    build_pixel_map,
    cell_rectangle,
    pixel_map_system,
)
from identicon.types import CANVAS_SIZE, CELL_SIZE, InvalidInputError
from tests.test_utils import IDENTICON_EVEN_INDICES, make_grid


@pytest.mark.parametrize(
    "index, top_left",
    [
        (0, (0, 0)),
        (4, (200, 0)),
        (5, (0, 50)),
        (6, (50, 50)),
        (12, (100, 100)),
        (24, (200, 200)),
    ],
)
def test_cell_rectangle(index: int, top_left: Tuple[int, int]) -> None:
    rect = cell_rectangle(GridCell(value=0, index=index))
    x, y = top_left
    assert rect == Rectangle(Point(x, y), Point(x + CELL_SIZE, y + CELL_SIZE))


@pytest.mark.parametrize("index", range(25))
def test_cell_rectangle_within_canvas(index: int) -> None:
    rect = cell_rectangle(GridCell(value=0, index=index))
    assert rect.top_left.x == (index % 5) * CELL_SIZE
    assert rect.top_left.y == (index // 5) * CELL_SIZE
    assert 0 <= rect.top_left.x < CANVAS_SIZE
    assert 0 <= rect.top_left.y < CANVAS_SIZE
    assert rect.bottom_right.x <= CANVAS_SIZE
    assert rect.bottom_right.y <= CANVAS_SIZE


@pytest.mark.parametrize("index", [-1, 25, 100])
def test_cell_rectangle_rejects_out_of_grid_index(index: int) -> None:
    with pytest.raises(InvalidInputError):
        cell_rectangle(GridCell(value=0, index=index))


def test_build_pixel_map_preserves_cell_order() -> None:
    cells = make_grid([(0, 24), (0, 0)])
    assert build_pixel_map(cells) == (
        Rectangle(Point(200, 200), Point(250, 250)),
        Rectangle(Point(0, 0), Point(50, 50)),
    )


def test_build_pixel_map_empty() -> None:
    assert build_pixel_map([]) == ()


def test_pixel_map_system() -> None:
    grid = make_grid([(0, i) for i in IDENTICON_EVEN_INDICES])
    new_state = pixel_map_system(Identicon(source="identicon", grid=grid))
    assert new_state.pixel_map is not None
    assert len(new_state.pixel_map) == len(IDENTICON_EVEN_INDICES)
    assert new_state.pixel_map[0] == Rectangle(Point(50, 50), Point(100, 100))


def test_pixel_map_system_requires_grid() -> None:
    with pytest.raises(InvalidInputError):
        pixel_map_system(Identicon(source="identicon"))
