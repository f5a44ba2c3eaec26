"""Tests for the fixed-length chain digest type."""

import pytest
from pydantic import BaseModel

from winternitz.types import ChainDigest


def test_exact_length_is_enforced() -> None:
    assert len(ChainDigest(b"\x01" * 32)) == 32
    with pytest.raises(ValueError, match="expects exactly 32 bytes, got 31"):
        ChainDigest(b"\x01" * 31)
    with pytest.raises(ValueError):
        ChainDigest(b"\x01" * 33)


@pytest.mark.parametrize(
    "value",
    [
        pytest.param(b"\xab" * 32, id="bytes"),
        pytest.param(bytearray(b"\xab" * 32), id="bytearray"),
        pytest.param("ab" * 32, id="hex"),
        pytest.param("0x" + "ab" * 32, id="prefixed hex"),
        pytest.param([0xAB] * 32, id="int list"),
    ],
)
def test_coercion(value: object) -> None:
    assert ChainDigest(value) == b"\xab" * 32


def test_zero() -> None:
    assert ChainDigest.zero() == b"\x00" * 32


def test_repr_and_hex() -> None:
    digest = ChainDigest(b"\x0f" * 32)
    assert digest.hex() == "0f" * 32
    assert repr(digest) == f"ChainDigest({'0f' * 32})"


def test_equal_values_hash_alike() -> None:
    assert len({ChainDigest(b"\x01" * 32), ChainDigest(b"\x01" * 32)}) == 1


def test_pydantic_field_round_trips_through_json() -> None:
    class Holder(BaseModel):
        digest: ChainDigest

    holder = Holder(digest=ChainDigest(b"\x10" * 32))
    assert holder.model_dump(mode="json") == {"digest": "10" * 32}
    assert Holder(digest=b"\x10" * 32).digest == holder.digest
