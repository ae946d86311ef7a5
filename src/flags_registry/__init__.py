# ruff: noqa: RUF022
"""
Named boolean flags packed into a single arbitrary-width bitmask.

Public entrypoints:
- :class:`flags_registry.registry.FlagsRegistry`
- :class:`flags_registry.flag.Flag`

A registry assigns one bit per name; every `Flag` it produces is validated
against those bits and never changes after construction.
"""

from __future__ import annotations

import logging

from . import bitmasks, codec, constants
from .errors import (
    FlagNotFoundError,
    FlagsRegistryError,
    NegativeFlagValueError,
    UnknownFlagsError,
    UnparseableFlagValueError,
)
from .flag import Flag
from .registry import FlagsRegistry
from .types import FlagKey, RegistryView
from .validation import validate_bitmask

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core
    "FlagsRegistry",
    "Flag",
    # Types
    "FlagKey",
    "RegistryView",
    # Errors
    "FlagsRegistryError",
    "FlagNotFoundError",
    "NegativeFlagValueError",
    "UnknownFlagsError",
    "UnparseableFlagValueError",
    # Validation
    "validate_bitmask",
    # Bitmasks
    "bitmasks",
    # Codec
    "codec",
    # Constants
    "constants",
]
