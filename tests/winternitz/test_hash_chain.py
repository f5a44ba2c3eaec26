"""Tests for the hash chain primitive."""

import hashlib

import pytest
from hypothesis import given
from hypothesis import strategies as st

from winternitz.hash_chain import hash_chain, message_digest


def test_zero_steps_returns_input_unchanged() -> None:
    """Zero steps is the identity, whatever the input length."""
    assert hash_chain(b"", 0) == b""
    assert hash_chain(b"abc", 0) == b"abc"
    assert hash_chain(bytearray(b"\x01" * 32), 0) == b"\x01" * 32


def test_single_step_is_sha256() -> None:
    data = b"\x42" * 32
    assert hash_chain(data, 1) == hashlib.sha256(data).digest()


def test_steps_are_applied_in_sequence() -> None:
    data = b"seed"
    expected = data
    for _ in range(5):
        expected = hashlib.sha256(expected).digest()
    assert hash_chain(data, 5) == expected


def test_output_is_digest_sized() -> None:
    assert len(hash_chain(b"", 3)) == 32


def test_negative_steps_are_rejected() -> None:
    with pytest.raises(ValueError, match="backwards"):
        hash_chain(b"\x00" * 32, -1)


@given(
    start=st.binary(min_size=0, max_size=64),
    first=st.integers(min_value=0, max_value=20),
    second=st.integers(min_value=0, max_value=20),
)
def test_walks_compose(start: bytes, first: int, second: int) -> None:
    """Walking `a` then `b` steps lands where walking `a + b` steps does."""
    assert hash_chain(hash_chain(start, first), second) == hash_chain(start, first + second)


@given(start=st.binary(min_size=32, max_size=32), steps=st.integers(min_value=0, max_value=10))
def test_is_deterministic(start: bytes, steps: int) -> None:
    assert hash_chain(start, steps) == hash_chain(start, steps)


def test_message_digest_is_sha256() -> None:
    assert message_digest(b"test") == hashlib.sha256(b"test").digest()
    assert len(message_digest(b"")) == 32
