"""
Key and signature containers for the Winternitz one-time signature scheme.

`PublicKey` and `Signature` are immutable pydantic models: an ordered tuple of
chain values plus the Winternitz parameter they were produced under.

Both share one canonical byte layout:

    +-----------+---------------+---------------+-----+-------------------+
    | w (1 byte)| chain 0 (32 B)| chain 1 (32 B)| ... | chain n-1 (32 B)  |
    +-----------+---------------+---------------+-----+-------------------+

The chain count `n` is not stored: it follows from `w` and the digest size.

`PrivateKey` is deliberately not a pydantic model. Its seeds live in mutable
buffers so they can be zeroed, and it never serializes itself.
"""

from __future__ import annotations

from typing import Iterator, Sequence, overload

from pydantic import model_validator
from typing_extensions import Self

from .constants import DIGEST_LENGTH, PARAMETER_PREFIX_LENGTH, WotsConfig
from .types import (
    ChainDigest,
    DecodeError,
    InvalidParameterError,
    KeyErasedError,
    StrictBaseModel,
)


class ChainValues(StrictBaseModel):
    """
    An ordered vector of one value per hash chain.

    Position `i` always belongs to chain `i`; order is part of the meaning.
    """

    parameter: int
    """The Winternitz parameter `w` these values were computed under."""

    chains: tuple[ChainDigest, ...]
    """One 32-byte value per chain, in chain order."""

    @model_validator(mode="after")
    def _check_chain_count(self) -> Self:
        """The number of values must match the chain count implied by `w`."""
        expected = self.config.CHAIN_COUNT
        if len(self.chains) != expected:
            raise ValueError(
                f"{type(self).__name__} with w={self.parameter} requires exactly "
                f"{expected} chain values, got {len(self.chains)}"
            )
        return self

    @property
    def config(self) -> WotsConfig:
        """The configuration matching `parameter`."""
        return WotsConfig(W=self.parameter)

    def __len__(self) -> int:
        """Return the number of chain values."""
        return len(self.chains)

    def __iter__(self) -> Iterator[ChainDigest]:  # type: ignore[override]
        """Iterate over chain values in chain order."""
        return iter(self.chains)

    @overload
    def __getitem__(self, index: int) -> ChainDigest: ...
    @overload
    def __getitem__(self, index: slice) -> Sequence[ChainDigest]: ...

    def __getitem__(self, index: int | slice) -> ChainDigest | Sequence[ChainDigest]:
        """Access chain value(s) by index or slice."""
        return self.chains[index]

    def to_bytes(self) -> bytes:
        """Encode as the parameter byte followed by every chain value."""
        return bytes([self.parameter]) + b"".join(self.chains)

    @classmethod
    def from_bytes(cls, data: bytes) -> Self:
        """
        Decode the canonical byte layout.

        Raises:
            DecodeError: If the parameter byte is invalid or the length does
                not match the chain count it implies.
        """
        type_name = cls.__name__
        if len(data) < PARAMETER_PREFIX_LENGTH:
            raise DecodeError(type_name, "missing parameter byte", offset=0)

        try:
            config = WotsConfig(W=data[0])
        except InvalidParameterError as exc:
            raise DecodeError(type_name, exc.message, offset=0) from exc

        body = data[PARAMETER_PREFIX_LENGTH:]
        expected = config.CHAIN_COUNT * DIGEST_LENGTH
        if len(body) != expected:
            raise DecodeError(
                type_name,
                f"expected {expected} bytes of chain values for w={config.W}, got {len(body)}",
                offset=PARAMETER_PREFIX_LENGTH,
            )

        chains = tuple(
            ChainDigest(body[i : i + DIGEST_LENGTH]) for i in range(0, expected, DIGEST_LENGTH)
        )
        return cls(parameter=config.W, chains=chains)


class PublicKey(ChainValues):
    """
    The public half of a key pair: the endpoint of every hash chain.

    `chains[i]` is the seed of chain `i` hashed `2**w - 1` times. Safe to
    publish; it is all a verifier needs.
    """


class Signature(ChainValues):
    """
    A one-time signature: one intermediate link per hash chain.

    `chains[i]` sits `block_value[i]` links into chain `i`, where the block
    values come from the SHA-256 digest of the signed message.
    """

    def verify(self, public_key: PublicKey, message: bytes) -> bool:
        """
        Verify this signature against a public key.

        This is a convenience method that delegates to `verify_signature()`.
        """
        from .interface import verify_signature

        return verify_signature(public_key, message, self)


class PrivateKey:
    """
    The private half of a key pair. **MUST BE KEPT CONFIDENTIAL.**

    Holds one random seed per chain in mutable buffers. `wipe()` overwrites
    them with zeros; afterwards every access raises `KeyErasedError`.
    Usable as a context manager that wipes on exit.
    """

    __slots__ = ("_seeds",)

    def __init__(self, seeds: Sequence[bytes]) -> None:
        for index, seed in enumerate(seeds):
            if len(seed) != DIGEST_LENGTH:
                raise ValueError(
                    f"Seed {index} must be exactly {DIGEST_LENGTH} bytes, got {len(seed)}"
                )
        self._seeds: list[bytearray] | None = [bytearray(seed) for seed in seeds]

    def _buffers(self) -> list[bytearray]:
        if self._seeds is None:
            raise KeyErasedError("Private key material has been erased.")
        return self._seeds

    @property
    def wiped(self) -> bool:
        """Whether the seed material has been erased."""
        return self._seeds is None

    def __len__(self) -> int:
        return len(self._buffers())

    def __getitem__(self, index: int) -> bytes:
        """Return a read-only copy of seed `index`."""
        return bytes(self._buffers()[index])

    def __iter__(self) -> Iterator[bytes]:
        return (bytes(seed) for seed in self._buffers())

    def wipe(self) -> None:
        """Zero every seed buffer and drop it. Idempotent."""
        if self._seeds is None:
            return
        for seed in self._seeds:
            seed[:] = bytes(len(seed))
        self._seeds = None

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.wipe()

    def __repr__(self) -> str:
        if self._seeds is None:
            return "PrivateKey(<wiped>)"
        return f"PrivateKey(<{len(self._seeds)} seeds redacted>)"
