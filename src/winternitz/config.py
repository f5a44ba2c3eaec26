"""
Global configuration for the Winternitz package.

This module contains environment-specific settings read once at import time.
"""

import os

_SUPPORTED_WOTS_ENVS: list[str] = ["prod", "test"]

WOTS_ENV = os.environ.get("WOTS_ENV", "prod").lower()
"""The environment flag ('prod' or 'test'). Selects the default parameter preset."""

if WOTS_ENV not in _SUPPORTED_WOTS_ENVS:
    raise ValueError(
        f"Invalid WOTS_ENV environment variable: '{WOTS_ENV}'. "
        f"Supported values: {_SUPPORTED_WOTS_ENVS}"
    )
