"""Hash system.

Turns the input string into the digest every later stage reads from. MD5 is
used only as a stable pattern seed; bit-identical output with other
identicon generators depends on it.
"""

import hashlib
from dataclasses import replace
from pyrsistent import pvector

from identicon.state import Identicon
from identicon.types import HashBytes


def hash_input(source: str) -> HashBytes:
    """Return the MD5 digest of ``source`` as 16 ints in digest order.

    Args:
        source (str): Any string, including the empty string. Encoded as
            UTF-8 before hashing; surrogate escapes (as produced when
            decoding non-UTF-8 ``argv``) map back to their raw bytes.

    Returns:
        HashBytes: Immutable vector of 16 values in ``[0, 255]``.
    """
    digest = hashlib.md5(source.encode("utf-8", "surrogateescape")).digest()
    return pvector(digest)


def hash_system(identicon: Identicon) -> Identicon:
    """Store the digest of ``identicon.source`` in ``hex``."""
    return replace(identicon, hex=hash_input(identicon.source))
