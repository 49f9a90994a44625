import hashlib

import pytest

from identicon.state import Identicon
from identicon.systems.hash import hash_input, hash_system
from identicon.types import HASH_LENGTH
from tests.test_utils import EMPTY_HEX, IDENTICON_HEX


def test_hash_input_known_vector() -> None:
    assert list(hash_input("identicon")) == IDENTICON_HEX


def test_hash_input_empty_string() -> None:
    """Empty input is valid and yields the digest of no bytes."""
    assert list(hash_input("")) == EMPTY_HEX
    assert bytes(hash_input("")) == hashlib.md5(b"").digest()


@pytest.mark.parametrize(
    "source", ["", "a", "identicon", "hello world", "ünïcødé", "x" * 10_000]
)
def test_hash_input_fixed_length(source: str) -> None:
    hex = hash_input(source)
    assert len(hex) == HASH_LENGTH
    assert all(0 <= b <= 255 for b in hex)


def test_hash_input_deterministic() -> None:
    assert hash_input("banana") == hash_input("banana")
    assert hash_input("banana") != hash_input("bananas")


def test_hash_input_encodes_utf8() -> None:
    assert bytes(hash_input("é")) == hashlib.md5("é".encode("utf-8")).digest()


def test_hash_system_sets_hex_only() -> None:
    state = Identicon(source="identicon")
    new_state = hash_system(state)
    assert list(new_state.hex or []) == IDENTICON_HEX
    assert new_state.color is None
    assert new_state.grid is None
    # original record untouched
    assert state.hex is None


@pytest.mark.parametrize(
    "source, raw",
    [
        ("\udcff", b"\xff"),
        ("caf\udce9", b"caf\xe9"),
    ],
)
def test_hash_input_surrogate_escapes_hash_raw_bytes(source: str, raw: bytes) -> None:
    """Strings decoded from non-UTF-8 bytes hash as the original bytes."""
    hex = hash_input(source)
    assert bytes(hex) == hashlib.md5(raw).digest()
    assert len(hex) == HASH_LENGTH
