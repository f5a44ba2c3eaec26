"""Shared fixtures for the Winternitz tests."""

from typing import Callable

import pytest

from winternitz.interface import WinternitzScheme
from winternitz.rand import deterministic_source


@pytest.fixture
def make_scheme() -> Callable[..., WinternitzScheme]:
    """
    Build schemes with reproducible keys.

    The same `(w, seed)` always yields the same key pair.
    """

    def factory(w: int, seed: bytes = b"winternitz-test-seed") -> WinternitzScheme:
        return WinternitzScheme.new(w, source=deterministic_source(seed))

    return factory
