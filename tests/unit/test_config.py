from typing import Tuple

import pytest

from identicon.config import DEFAULT_CONFIG, RenderConfig, parse_hex_color
from identicon.types import CANVAS_SIZE, CELL_SIZE, GRID_WIDTH, WHITE, InvalidInputError


def test_default_config() -> None:
    assert DEFAULT_CONFIG == RenderConfig(background=WHITE)


def test_geometry_is_consistent() -> None:
    assert CELL_SIZE * GRID_WIDTH == CANVAS_SIZE == 250


@pytest.mark.parametrize(
    "value, expected",
    [
        ("#ffffff", (255, 255, 255)),
        ("000000", (0, 0, 0)),
        ("#AD2B41", (173, 43, 65)),
    ],
)
def test_parse_hex_color(value: str, expected: Tuple[int, int, int]) -> None:
    assert parse_hex_color(value) == expected


@pytest.mark.parametrize("value", ["", "#fff", "#gggggg", "#1234567", "red"])
def test_parse_hex_color_rejects_bad_values(value: str) -> None:
    with pytest.raises(InvalidInputError):
        parse_hex_color(value)
