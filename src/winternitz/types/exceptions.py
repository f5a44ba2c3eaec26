"""Exception hierarchy for the Winternitz one-time signature scheme."""

from __future__ import annotations

from typing import Any


class WotsError(Exception):
    """
    Base exception for all Winternitz-related errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class InvalidParameterError(WotsError):
    """
    Raised when the Winternitz parameter `w` cannot configure a scheme.

    Deliberately not a `ValueError`, so pydantic validators let it through
    unwrapped instead of folding it into a `ValidationError`.

    Attributes:
        parameter: The rejected value.
        detail: Why it was rejected.
    """

    def __init__(self, parameter: Any, detail: str) -> None:
        self.parameter = parameter
        self.detail = detail

        value_repr = repr(parameter)
        if len(value_repr) > 50:
            value_repr = value_repr[:47] + "..."

        super().__init__(f"Invalid Winternitz parameter {value_repr}: {detail}")


class EntropyFailureError(WotsError):
    """
    Raised when the entropy source cannot supply seed material.

    Key generation cannot proceed without entropy. Nothing is retried here;
    callers may retry construction themselves.
    """


class KeyAlreadyUsedError(WotsError):
    """Raised when a one-time key is asked to sign a second, different message."""


class KeyErasedError(WotsError):
    """Raised when signing is attempted after the private key was wiped."""


class DecodeError(WotsError):
    """
    Raised when decoding the canonical byte layout fails.

    Attributes:
        type_name: The type being decoded.
        detail: Description of what went wrong.
        offset: The byte offset where the error occurred (if known).
    """

    def __init__(
        self,
        type_name: str,
        detail: str,
        *,
        offset: int | None = None,
    ) -> None:
        self.type_name = type_name
        self.detail = detail
        self.offset = offset

        msg = f"Failed to decode {type_name}: {detail}"
        if offset is not None:
            msg = f"{msg} (at byte offset {offset})"

        super().__init__(msg)
