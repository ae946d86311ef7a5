"""Flags registry constants."""

from typing import Final

# ---------------------------------------------------------------------------
# Alias formatting
# ---------------------------------------------------------------------------
EMPTY_FLAG_ALIAS: Final[str] = "EMPTY_FLAG"
ALIAS_SEPARATOR: Final[str] = "+"
ALIAS_TEMPLATE: Final[str] = "[{}]"

FLAG_STR_TEMPLATE: Final[str] = "Flag({alias}: {value})"


# ---------------------------------------------------------------------------
# Text parsing
# ---------------------------------------------------------------------------
MIN_RADIX: Final[int] = 2
MAX_RADIX: Final[int] = 36  # digits 0-9 then letters a-z
DEFAULT_RADIX: Final[int] = 10


# ---------------------------------------------------------------------------
# Bit assignment
# ---------------------------------------------------------------------------
FIRST_BIT_POSITION: Final[int] = 0  # first registered name gets 1 << 0
EMPTY_BITMASK: Final[int] = 0
