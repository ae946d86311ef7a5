"""
Conversion of raw caller input into integer bitmasks.

The result is not validated against any registry here; callers pass it on to
`Flag`, which performs the negative/unknown-bit checks.
"""

from __future__ import annotations

import logging
import math

from . import constants as const
from .errors import UnparseableFlagValueError

logger = logging.getLogger(__name__)

RawFlagValue = int | float | str


def parse_int(value: int | float) -> int:
    """
    Adopt an already-integral number as a bitmask.

    Arbitrary-precision `int`s are returned as is. Finite floats with no
    fractional part (e.g. `12.0`) are converted; anything else is rejected.
    """
    if isinstance(value, bool):
        raise UnparseableFlagValueError(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            logger.debug("rejecting non-integral float %r", value)
            raise UnparseableFlagValueError(value)
        return int(value)
    raise UnparseableFlagValueError(value)


def parse_text(text: str, radix: int = const.DEFAULT_RADIX) -> int:
    """
    Parse `text` as an integer literal in `radix` (2-36).

    Digits come first, then letters, case-insensitive. Surrounding whitespace
    and a leading sign are accepted, as are the `0b`/`0o`/`0x` prefixes when
    they match the radix.
    """
    if isinstance(radix, bool) or not isinstance(radix, int):
        raise UnparseableFlagValueError(text, radix)
    if not const.MIN_RADIX <= radix <= const.MAX_RADIX:
        raise UnparseableFlagValueError(text, radix)
    if not isinstance(text, str):
        raise UnparseableFlagValueError(text, radix)

    try:
        return int(text, radix)
    except ValueError as e:
        logger.debug("cannot parse %r in radix %s", text, radix)
        raise UnparseableFlagValueError(text, radix) from e


def parse_raw(value: RawFlagValue, radix: int | None = None) -> int:
    """Dispatch on the kind of `value`; `radix` only applies to text."""
    if isinstance(value, str):
        return parse_text(value, const.DEFAULT_RADIX if radix is None else radix)
    if radix is not None:
        raise TypeError(
            f"radix is only supported for str values, got {type(value).__name__}"
        )
    return parse_int(value)
