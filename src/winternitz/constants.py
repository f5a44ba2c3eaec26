"""
Defines the parameters and configuration presets for the Winternitz scheme.

A single number, the Winternitz parameter `w`, drives everything else:

- the number of hash chains `n = DIGEST_BITS // w + 1`,
- the length of every chain `L = 2**w - 1`.

Larger `w` means fewer chains (shorter signatures and keys) but longer chains
(more hashing per operation).
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from typing_extensions import Final

from .config import WOTS_ENV
from .types import InvalidParameterError

DIGEST_LENGTH: Final = 32
"""Output size of SHA-256 in bytes. Also the size of every seed."""

DIGEST_BITS: Final = DIGEST_LENGTH * 8
"""Output size of SHA-256 in bits."""

CHAIN_ARITHMETIC_BITS: Final = 64
"""Width of the unsigned integer used for chain-length arithmetic."""

MAX_WINTERNITZ_PARAMETER: Final = CHAIN_ARITHMETIC_BITS - 1
"""Largest `w` for which `1 << w` still fits the chain-length arithmetic width."""

PARAMETER_PREFIX_LENGTH: Final = 1
"""Size in bytes of the parameter prefix in the canonical key/signature layout."""


class WotsConfig(BaseModel):
    """A model holding the configuration constants for a Winternitz preset."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    W: int
    """The Winternitz parameter."""

    @field_validator("W", mode="before")
    @classmethod
    def _check_parameter(cls, value: Any) -> int:
        """
        Reject parameters that would make chain arithmetic meaningless.

        Runs before type coercion so that every bad value surfaces as
        `InvalidParameterError`, never as a pydantic `ValidationError`.
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidParameterError(value, "must be an integer")
        if value < 1:
            raise InvalidParameterError(value, "must be at least 1")
        if value > MAX_WINTERNITZ_PARAMETER:
            raise InvalidParameterError(
                value,
                f"1 << {value} overflows {CHAIN_ARITHMETIC_BITS}-bit chain arithmetic "
                f"(maximum is {MAX_WINTERNITZ_PARAMETER})",
            )
        return value

    @property
    def DIGEST_BITS(self) -> int:  # noqa: N802
        """Bits of message digest the chains have to cover."""
        return DIGEST_BITS

    @property
    def DIGEST_LENGTH(self) -> int:  # noqa: N802
        """Byte length of every chain value."""
        return DIGEST_LENGTH

    @property
    def CHAIN_COUNT(self) -> int:  # noqa: N802
        """
        The number of hash chains, `n`.

        One more than the digest needs. The extra chain never carries
        message information and always signs the block value 0.
        """
        return DIGEST_BITS // self.W + 1

    @property
    def CHAIN_LENGTH(self) -> int:  # noqa: N802
        """The number of links from a seed to its endpoint, `L = 2**w - 1`."""
        return (1 << self.W) - 1

    @property
    def PUBLIC_KEY_LENGTH(self) -> int:  # noqa: N802
        """Size of a public key in the canonical byte layout."""
        return PARAMETER_PREFIX_LENGTH + self.CHAIN_COUNT * DIGEST_LENGTH

    @property
    def SIGNATURE_LENGTH(self) -> int:  # noqa: N802
        """Size of a signature in the canonical byte layout."""
        return PARAMETER_PREFIX_LENGTH + self.CHAIN_COUNT * DIGEST_LENGTH


PROD_CONFIG: Final = WotsConfig(W=8)
"""Byte-sized digits: 33 chains of 255 links."""

TEST_CONFIG: Final = WotsConfig(W=4)
"""A lightweight preset for tests: 65 chains of 15 links."""

DEFAULT_CONFIG: Final = TEST_CONFIG if WOTS_ENV == "test" else PROD_CONFIG
"""The preset selected by the `WOTS_ENV` environment variable."""
