"""Reusable type definitions for the Winternitz one-time signature package."""

from .base import CamelModel, StrictBaseModel
from .byte_arrays import BaseBytes, ChainDigest
from .exceptions import (
    DecodeError,
    EntropyFailureError,
    InvalidParameterError,
    KeyAlreadyUsedError,
    KeyErasedError,
    WotsError,
)

__all__ = [
    # Core types
    "BaseBytes",
    "ChainDigest",
    "CamelModel",
    "StrictBaseModel",
    # Exceptions
    "WotsError",
    "InvalidParameterError",
    "EntropyFailureError",
    "KeyAlreadyUsedError",
    "KeyErasedError",
    "DecodeError",
]
