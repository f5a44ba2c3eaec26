"""
Maps a message to one block value per hash chain.

Each byte of the SHA-256 digest is read as a digit and tells the signer how
far along the matching chain to reveal. The byte is clamped to the chain
length instead of being re-expressed in base `2**w`, so for `w < 8` all
byte values at or above `2**w - 1` land on the chain endpoint.

Chains past the end of the digest (the reserved chain, and for `w < 8` every
chain from index 32 on) always get block value 0. No checksum is computed.
"""

from __future__ import annotations

from pydantic import model_validator

from ._validation import enforce_strict_types
from .constants import PROD_CONFIG, TEST_CONFIG, WotsConfig
from .hash_chain import message_digest
from .types import StrictBaseModel


class MessageEncoder(StrictBaseModel):
    """Derives block values for a given config."""

    config: WotsConfig
    """Configuration parameters for the encoder."""

    @model_validator(mode="after")
    def enforce_strict_types(self) -> "MessageEncoder":
        """Reject subclasses to prevent type confusion attacks."""
        enforce_strict_types(self, config=WotsConfig)
        return self

    def block_values(self, digest: bytes) -> list[int]:
        """
        Computes the per-chain block values for a message digest.

        Args:
            digest: The SHA-256 digest of the message.

        Returns:
            `CHAIN_COUNT` integers, each in `[0, CHAIN_LENGTH]`.
        """
        chain_length = self.config.CHAIN_LENGTH
        return [
            min(digest[i], chain_length) if i < len(digest) else 0
            for i in range(self.config.CHAIN_COUNT)
        ]

    def encode(self, message: bytes) -> list[int]:
        """Hashes `message` and returns its block values."""
        return self.block_values(message_digest(message))


PROD_MESSAGE_ENCODER = MessageEncoder(config=PROD_CONFIG)
"""An instance configured for production-level parameters."""

TEST_MESSAGE_ENCODER = MessageEncoder(config=TEST_CONFIG)
"""A lightweight instance for test environments."""
