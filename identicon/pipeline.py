"""Identicon generation pipeline.

This module wires the systems together in the order each one depends on and
exposes :func:`generate`, which returns a fully populated, immutable
:class:`identicon.state.Identicon`, and :func:`main`, which also renders and
saves it.

Ordering:

1. ``hash_system`` digests the input string.
2. ``color_system`` picks the colour from the first three bytes.
3. ``grid_system`` builds the 25 mirrored cells from the first 15 bytes.
4. ``filter_system`` drops odd valued cells.
5. ``pixel_map_system`` places the survivors on the canvas.
"""

import logging
from typing import Callable, List

from identicon.config import DEFAULT_CONFIG, RenderConfig
from identicon.renderer.raster import render
from identicon.state import Identicon
from identicon.systems.color import color_system
from identicon.systems.filter import filter_system
from identicon.systems.grid import grid_system
from identicon.systems.hash import hash_system
from identicon.systems.pixel_map import pixel_map_system
from identicon.utils.image import save_image

logger = logging.getLogger(__name__)

System = Callable[[Identicon], Identicon]

SYSTEMS: List[System] = [
    hash_system,
    color_system,
    grid_system,
    filter_system,
    pixel_map_system,
]


def generate(source: str) -> Identicon:
    """Run every system over a fresh record for ``source``.

    Args:
        source (str): Any string, including the empty string.

    Returns:
        Identicon: Record with ``hex``, ``color``, filtered ``grid`` and
            ``pixel_map`` set.
    """
    identicon = Identicon(source=source)
    for system in SYSTEMS:
        identicon = system(identicon)
        logger.debug("%s: %s", system.__name__, identicon.description)
    return identicon


def main(
    source: str, directory: str = ".", config: RenderConfig = DEFAULT_CONFIG
) -> str:
    """Generate, draw and save the identicon for ``source``.

    Returns:
        str: Path of the written image (``<directory>/<source>.png``).

    Raises:
        OSError: If the file cannot be written.
    """
    identicon = generate(source)
    img = render(identicon, config)
    return save_image(img, source, directory)
