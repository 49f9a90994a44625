"""Encoding and file output helpers.

These sit outside the pure pipeline: they serialize a rendered image as PNG
and write it to disk. Filesystem and encoder errors propagate unchanged.
"""

import io
import logging
import os

from PIL import Image

logger = logging.getLogger(__name__)


def encode_png(img: Image.Image) -> bytes:
    """Serialize ``img`` to PNG bytes."""
    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()


def filename_for(source: str, directory: str = ".") -> str:
    """Return ``<directory>/<source>.png``."""
    return os.path.join(directory, f"{source}.png")


def save_image(img: Image.Image, source: str, directory: str = ".") -> str:
    """Write ``img`` as ``<directory>/<source>.png`` and return the path."""
    path = filename_for(source, directory)
    data = encode_png(img)
    with open(path, "wb") as f:
        f.write(data)
    logger.info("Wrote %d bytes to %s", len(data), path)
    return path
