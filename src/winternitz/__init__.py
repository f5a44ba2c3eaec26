"""
This package provides a Python specification for the Winternitz one-time
signature scheme (WOTS) over SHA-256.

It exposes the core data structures and the main interface functions.
"""

from .constants import DEFAULT_CONFIG, PROD_CONFIG, TEST_CONFIG, WotsConfig
from .containers import PrivateKey, PublicKey, Signature
from .hash_chain import hash_chain
from .interface import WinternitzScheme, verify_signature
from .rand import Rand, deterministic_source
from .types import (
    DecodeError,
    EntropyFailureError,
    InvalidParameterError,
    KeyAlreadyUsedError,
    KeyErasedError,
    WotsError,
)

__all__ = [
    "WinternitzScheme",
    "verify_signature",
    "hash_chain",
    "PublicKey",
    "PrivateKey",
    "Signature",
    "WotsConfig",
    "Rand",
    "deterministic_source",
    "PROD_CONFIG",
    "TEST_CONFIG",
    "DEFAULT_CONFIG",
    "WotsError",
    "InvalidParameterError",
    "EntropyFailureError",
    "KeyAlreadyUsedError",
    "KeyErasedError",
    "DecodeError",
]
