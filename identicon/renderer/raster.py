"""Rasterizer.

Paints the pixel map onto a fixed ``CANVAS_SIZE`` square with Pillow. One
colour is used for every rectangle; overlapping rectangles are painted in
sequence order, so later ones win.
"""

from typing import Iterable

import numpy as np
import numpy.typing as npt
from PIL import Image, ImageDraw

from identicon.components import Color, Rectangle
from identicon.config import DEFAULT_CONFIG, RenderConfig
from identicon.state import Identicon
from identicon.types import CANVAS_SIZE, RGB, WHITE, InvalidInputError

UInt8Array = npt.NDArray[np.uint8]


def draw(
    color: Color,
    rectangles: Iterable[Rectangle],
    background: RGB = WHITE,
) -> Image.Image:
    """Return a new RGB canvas with every rectangle filled in ``color``.

    Each pixel inside ``[top_left, bottom_right)`` on both axes is set; the
    bottom and right edges belong to the neighbouring cell. Rectangles with
    no width or height cover no pixels and are skipped.
    """
    img = Image.new("RGB", (CANVAS_SIZE, CANVAS_SIZE), background)
    canvas = ImageDraw.Draw(img)
    fill = color.as_tuple()
    for rectangle in rectangles:
        if rectangle.width <= 0 or rectangle.height <= 0:
            continue
        canvas.rectangle(rectangle.inclusive_box(), fill=fill)
    return img


def render(identicon: Identicon, config: RenderConfig = DEFAULT_CONFIG) -> Image.Image:
    """Draw a fully generated identicon.

    Raises:
        InvalidInputError: If the colour or pixel map has not been computed.
    """
    if identicon.color is None or identicon.pixel_map is None:
        raise InvalidInputError(
            f"Identicon for {identicon.source!r} is incomplete: {sorted(identicon.description.keys())}"
        )
    return draw(identicon.color, identicon.pixel_map, background=config.background)


def to_array(img: Image.Image) -> UInt8Array:
    """Return the pixel buffer as an ``(H, W, 3)`` uint8 array."""
    return np.asarray(img.convert("RGB"), dtype=np.uint8)


class IdenticonRenderer:
    config: RenderConfig

    def __init__(self, config: RenderConfig = DEFAULT_CONFIG):
        self.config = config

    def render(self, identicon: Identicon) -> Image.Image:
        return render(identicon, config=self.config)

    def render_array(self, identicon: Identicon) -> UInt8Array:
        return to_array(self.render(identicon))
