"""Entropy source for Winternitz key generation."""

from __future__ import annotations

import hashlib
import secrets
from typing import Callable

from pydantic import model_validator

from ._validation import enforce_strict_types
from .constants import PROD_CONFIG, TEST_CONFIG, WotsConfig
from .types import ChainDigest, EntropyFailureError, StrictBaseModel

EntropySource = Callable[[int], bytes]
"""A callable returning exactly the requested number of random bytes."""


def deterministic_source(seed: bytes) -> EntropySource:
    """
    Builds a reproducible entropy source from a fixed seed.

    The n-th request is answered with bytes of `SHA-256(seed || n)` (extended
    with further counters when more than 32 bytes are asked for). Two sources
    built from the same seed produce the same key pair.

    Only for tests and published test vectors: anyone who knows `seed` can
    rebuild the private key.
    """
    counter = 0

    def source(num_bytes: int) -> bytes:
        nonlocal counter
        out = b""
        while len(out) < num_bytes:
            out += hashlib.sha256(seed + counter.to_bytes(8, "big")).digest()
            counter += 1
        return out[:num_bytes]

    return source


class Rand(StrictBaseModel):
    """An instance of the seed generator for a given config."""

    config: WotsConfig
    """Configuration parameters for the generator."""

    source: EntropySource = secrets.token_bytes
    """Where random bytes come from. Defaults to the OS CSPRNG."""

    @model_validator(mode="after")
    def enforce_strict_types(self) -> "Rand":
        """Reject subclasses to prevent type confusion attacks."""
        enforce_strict_types(self, config=WotsConfig)
        return self

    def seed(self) -> ChainDigest:
        """
        Draws one fresh chain seed of digest length.

        Raises:
            EntropyFailureError: If the source fails or returns malformed data.
        """
        length = self.config.DIGEST_LENGTH
        try:
            data = self.source(length)
        except (OSError, NotImplementedError) as exc:
            raise EntropyFailureError(f"Entropy source failed: {exc}") from exc

        if not isinstance(data, (bytes, bytearray)) or len(data) != length:
            if isinstance(data, (bytes, bytearray)):
                got = f"{len(data)} bytes"
            else:
                got = type(data).__name__
            raise EntropyFailureError(f"Entropy source returned {got}, expected {length} bytes")
        return ChainDigest(data)

    def seeds(self) -> list[ChainDigest]:
        """Draws one seed per chain, in chain order."""
        return [self.seed() for _ in range(self.config.CHAIN_COUNT)]


PROD_RAND = Rand(config=PROD_CONFIG)
"""An instance configured for production-level parameters."""

TEST_RAND = Rand(config=TEST_CONFIG)
"""A lightweight instance for test environments."""
