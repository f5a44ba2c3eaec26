"""
Defines the hash chain primitive the whole scheme is built on.

### Hash Chains

A hash chain starts at a secret seed and applies a one-way hash function
over and over:

    seed -> H(seed) -> H(H(seed)) -> ... -> H^L(seed)

Walking forward is cheap, walking backward means inverting SHA-256.
Key generation walks every chain to its end, signing reveals an
intermediate link, and verification walks that link the remaining
distance. Nothing here is domain-separated or keyed: every step is a plain
SHA-256 of the previous 32 bytes.
"""

from __future__ import annotations

import hashlib


def message_digest(message: bytes) -> bytes:
    """Hashes an arbitrary message into the 32-byte digest that drives signing."""
    return hashlib.sha256(message).digest()


def hash_chain(start: bytes, num_steps: int) -> bytes:
    """
    Applies SHA-256 `num_steps` times in sequence.

    The input may be any byte string; every output after the first step is
    32 bytes. With `num_steps == 0` the input is returned unchanged.

    Args:
        start: The value to begin hashing from.
        num_steps: How many times to apply the hash function.

    Returns:
        The value `num_steps` links further down the chain.

    Raises:
        ValueError: If `num_steps` is negative.
    """
    if num_steps < 0:
        raise ValueError(f"Cannot walk a hash chain backwards ({num_steps} steps).")

    current = bytes(start)
    for _ in range(num_steps):
        current = hashlib.sha256(current).digest()
    return current
