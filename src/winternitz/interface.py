"""
Defines the core interface for the Winternitz one-time signature scheme.

The high-level operations: key generation (construction),
`sign`, `verify` and the public key accessor.

This constitutes the public API of the signature scheme.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from typing_extensions import Self

from .constants import DEFAULT_CONFIG, WotsConfig
from .containers import PrivateKey, PublicKey, Signature
from .encoding import MessageEncoder
from .hash_chain import hash_chain, message_digest
from .rand import EntropySource, Rand
from .types import ChainDigest, KeyAlreadyUsedError, KeyErasedError

logger = logging.getLogger(__name__)


def verify_signature(
    public_key: PublicKey,
    message: bytes,
    signature: Signature | Sequence[bytes],
) -> bool:
    r"""
    Verifies a Winternitz signature against a public key and message.

    This is a **deterministic** algorithm and never raises: anything malformed
    resolves to `False`.

    ### Verification Algorithm

    1.  **Shape Check**: The signature must carry exactly one 32-byte value per
        chain. A shorter signature is rejected outright rather than having only
        its first few chains checked.

    2.  **Re-encode Message**: Recompute the block values $x_i$ from
        `SHA-256(message)`, exactly as the signer did.

    3.  **Complete the Chains**: Signature value $y_i$ sits $x_i$ links into
        chain $i$. Hash it the remaining $L - x_i$ times. Because block values
        are clamped to $L$, that distance is never negative.

    4.  **Compare**: The signature is valid iff every completed chain equals
        the corresponding public key endpoint. The first mismatch stops the
        walk.

    Args:
        public_key: The public key to verify against.
        message: The message that was supposedly signed.
        signature: A `Signature`, or any ordered sequence of byte strings.

    Returns:
        `True` if the signature is valid, `False` otherwise.
    """
    config = public_key.config

    if not isinstance(message, (bytes, bytearray, memoryview)):
        logger.debug("Signature rejected: message is %s, not bytes", type(message).__name__)
        return False

    if isinstance(signature, Signature) and signature.parameter != public_key.parameter:
        logger.debug(
            "Signature rejected: made with w=%d, public key uses w=%d",
            signature.parameter,
            public_key.parameter,
        )
        return False

    try:
        components = list(signature)
    except TypeError:
        logger.debug("Signature rejected: not a sequence")
        return False

    if len(components) != config.CHAIN_COUNT:
        logger.debug(
            "Signature rejected: expected %d components, got %d",
            config.CHAIN_COUNT,
            len(components),
        )
        return False

    for index, component in enumerate(components):
        if not isinstance(component, (bytes, bytearray)) or len(component) != config.DIGEST_LENGTH:
            logger.debug("Signature rejected: component %d is not a 32-byte value", index)
            return False

    block_values = MessageEncoder(config=config).encode(message)

    for chain_index, (component, block_value) in enumerate(zip(components, block_values)):
        remaining = config.CHAIN_LENGTH - block_value
        end_digest = hash_chain(component, remaining)
        if end_digest != public_key[chain_index]:
            logger.debug("Signature rejected: chain %d does not reach its endpoint", chain_index)
            return False

    return True


class WinternitzScheme:
    """
    A Winternitz key pair together with the operations that use it.

    Construction generates both keys. The instance may sign exactly one
    message: the first successful `sign` erases the private key and remembers
    the signature. Asking again for the same message returns that signature;
    asking for any other message raises `KeyAlreadyUsedError`.
    """

    def __init__(self, config: WotsConfig = DEFAULT_CONFIG, rand: Rand | None = None):
        """
        Generates a fresh key pair for `config`.

        ### Key Generation Algorithm

        1.  **Draw Seeds**: Take `CHAIN_COUNT` independent 32-byte seeds from the
            entropy source. These are the private key.

        2.  **Walk the Chains**: Hash every seed `CHAIN_LENGTH` times. The
            endpoints, in the same order, are the public key.

        Args:
            config: The parameter set. Use `WinternitzScheme.new(w)` to build
                one from a bare parameter.
            rand: Seed generator. Defaults to the OS CSPRNG for `config`.

        Raises:
            EntropyFailureError: If the entropy source cannot supply seeds.
        """
        if rand is None:
            rand = Rand(config=config)
        elif rand.config != config:
            raise ValueError("rand must be configured for the same parameter set as the scheme")

        self.config = config
        self.encoder = MessageEncoder(config=config)

        seeds = rand.seeds()
        endpoints = [ChainDigest(hash_chain(seed, config.CHAIN_LENGTH)) for seed in seeds]

        self._private_key = PrivateKey(seeds)
        self._public_key = PublicKey(parameter=config.W, chains=tuple(endpoints))
        self._signed_digest: bytes | None = None
        self._signature: Signature | None = None

        logger.debug(
            "Generated Winternitz key pair: w=%d, %d chains of %d links",
            config.W,
            config.CHAIN_COUNT,
            config.CHAIN_LENGTH,
        )

    @classmethod
    def new(cls, w: Any, source: EntropySource | None = None) -> Self:
        """
        Builds a scheme from a bare Winternitz parameter.

        Raises:
            InvalidParameterError: If `w` is zero, negative, not an integer,
                or so large that `1 << w` overflows chain arithmetic.
            EntropyFailureError: If the entropy source cannot supply seeds.
        """
        config = WotsConfig(W=w)
        rand = Rand(config=config) if source is None else Rand(config=config, source=source)
        return cls(config, rand)

    @property
    def public_key(self) -> PublicKey:
        """The public key: one chain endpoint per chain, in chain order."""
        return self._public_key

    @property
    def private_key(self) -> PrivateKey:
        """The private key. Wiped once a signature has been produced."""
        return self._private_key

    @property
    def used(self) -> bool:
        """Whether this key pair has already produced its one signature."""
        return self._signature is not None

    def sign(self, message: bytes) -> Signature:
        """
        Produces the one-time signature for `message`.

        This is a **deterministic** algorithm: no randomness is consumed.

        **CRITICAL SECURITY WARNING**: Revealing links for two different
        messages lets an attacker walk any chain forward from the lower of the
        two links and forge signatures. The scheme therefore refuses to sign a
        second, different message.

        ### Signing Algorithm

        1.  **Hash**: `digest = SHA-256(message)`.
        2.  **Block Values**: Chain `i` gets `min(digest[i], L)`, or 0 past the
            end of the digest.
        3.  **Reveal**: Hash seed `i` block-value times. The results, in chain
            order, are the signature.
        4.  **Consume**: Erase the private key and remember the digest.

        Args:
            message: The message to be signed.

        Returns:
            The resulting `Signature`.

        Raises:
            KeyAlreadyUsedError: If a different message was signed before.
            KeyErasedError: If the private key was wiped before any signing.
        """
        digest = message_digest(message)

        if self._signature is not None:
            if digest == self._signed_digest:
                return self._signature
            logger.warning("Refusing to sign a second message with a one-time key")
            raise KeyAlreadyUsedError(
                "This one-time key has already signed a different message."
            )

        if self._private_key.wiped:
            raise KeyErasedError("Cannot sign: private key material has been erased.")

        block_values = self.encoder.block_values(digest)
        components = tuple(
            ChainDigest(hash_chain(seed, steps))
            for seed, steps in zip(self._private_key, block_values)
        )
        signature = Signature(parameter=self.config.W, chains=components)

        self._signed_digest = digest
        self._signature = signature
        self._private_key.wipe()

        logger.debug("Signed message with w=%d; private key erased", self.config.W)
        return signature

    def verify(self, message: bytes, signature: Signature | Sequence[bytes]) -> bool:
        """
        Verifies `signature` over `message` against this scheme's public key.

        Delegates to `verify_signature()`. Never raises.
        """
        return verify_signature(self._public_key, message, signature)

    def wipe(self) -> None:
        """Erase the private key without signing anything."""
        self._private_key.wipe()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.wipe()
