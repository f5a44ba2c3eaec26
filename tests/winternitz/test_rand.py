"""Tests for the seed generator and entropy sources."""

import pytest

from winternitz.constants import PROD_CONFIG, TEST_CONFIG, WotsConfig
from winternitz.interface import WinternitzScheme
from winternitz.rand import PROD_RAND, TEST_RAND, Rand, deterministic_source
from winternitz.types import ChainDigest, EntropyFailureError


def test_seed_is_digest_sized() -> None:
    seed = PROD_RAND.seed()
    assert isinstance(seed, ChainDigest)
    assert len(seed) == PROD_CONFIG.DIGEST_LENGTH


def test_seeds_cover_every_chain() -> None:
    seeds = TEST_RAND.seeds()
    assert len(seeds) == TEST_CONFIG.CHAIN_COUNT


def test_seeds_are_random() -> None:
    """
    Fresh seeds must all differ and must not be a single repeated byte.

    Either would be astronomically unlikely from a secure source.
    """
    seeds = TEST_RAND.seeds()
    assert len(set(seeds)) == len(seeds)
    assert all(len(set(seed)) > 1 for seed in seeds)


def test_deterministic_source_is_reproducible() -> None:
    first = Rand(config=TEST_CONFIG, source=deterministic_source(b"seed"))
    second = Rand(config=TEST_CONFIG, source=deterministic_source(b"seed"))
    assert first.seeds() == second.seeds()


def test_deterministic_source_depends_on_seed() -> None:
    first = Rand(config=TEST_CONFIG, source=deterministic_source(b"seed-a"))
    second = Rand(config=TEST_CONFIG, source=deterministic_source(b"seed-b"))
    assert first.seed() != second.seed()


def test_deterministic_source_never_repeats_within_a_stream() -> None:
    rand = Rand(config=TEST_CONFIG, source=deterministic_source(b"seed"))
    seeds = rand.seeds()
    assert len(set(seeds)) == len(seeds)


def test_deterministic_source_serves_any_length() -> None:
    source = deterministic_source(b"seed")
    assert len(source(0)) == 0
    assert len(source(7)) == 7
    assert len(source(100)) == 100


def test_source_failure_becomes_entropy_failure() -> None:
    def broken(num_bytes: int) -> bytes:
        raise OSError("no entropy available")

    rand = Rand(config=TEST_CONFIG, source=broken)
    with pytest.raises(EntropyFailureError, match="no entropy available") as exc_info:
        rand.seed()
    assert isinstance(exc_info.value.__cause__, OSError)


def test_short_output_is_rejected() -> None:
    rand = Rand(config=TEST_CONFIG, source=lambda num_bytes: b"\x01" * (num_bytes - 1))
    with pytest.raises(EntropyFailureError, match="31 bytes"):
        rand.seed()


def test_non_bytes_output_is_rejected() -> None:
    rand = Rand(config=TEST_CONFIG, source=lambda num_bytes: "x" * num_bytes)
    with pytest.raises(EntropyFailureError, match="str"):
        rand.seed()


def test_construction_propagates_entropy_failure() -> None:
    def broken(num_bytes: int) -> bytes:
        raise NotImplementedError("platform has no CSPRNG")

    with pytest.raises(EntropyFailureError):
        WinternitzScheme.new(4, source=broken)


def test_rand_rejects_subclass_config() -> None:
    class CustomConfig(WotsConfig):
        pass

    custom_config = CustomConfig(W=PROD_CONFIG.W)

    with pytest.raises(TypeError, match="config must be exactly WotsConfig"):
        Rand(config=custom_config)
