from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Generic

from . import bitmasks, codec
from . import constants as const
from .errors import FlagNotFoundError
from .flag import Flag
from .types import TFlag

logger = logging.getLogger(__name__)


class FlagsRegistry(Generic[TFlag]):
    """
    Maps flag names to unique bits and builds `Flag` values over them.

    The i-th distinct name (first occurrence wins) gets the bit `1 << i`.
    Python ints are unbounded, so any number of flags fits.

    Construct using either:
    - `FlagsRegistry(["READ", "WRITE"])`
    - `FlagsRegistry.from_names("READ", "WRITE")`

    A registry never changes after construction and can be shared freely.
    """

    __slots__ = ("_flags", "_known_mask")

    def __init__(self, names: Iterable[TFlag] = ()) -> None:
        flags: dict[TFlag, int] = {}
        for name in names:
            if name not in flags:
                flags[name] = bitmasks.bit_at(const.FIRST_BIT_POSITION + len(flags))

        self._flags: Mapping[TFlag, int] = MappingProxyType(flags)
        self._known_mask = bitmasks.union(flags.values())
        logger.debug("registered %d flags", len(flags))

    @classmethod
    def from_names(cls, *names: TFlag) -> FlagsRegistry[TFlag]:
        return cls(names)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    @property
    def flags(self) -> Mapping[TFlag, int]:
        """Read-only name -> bit mapping, in assignment order."""
        return self._flags

    @property
    def known_mask(self) -> int:
        """Union of every registered bit."""
        return self._known_mask

    def get(self, name: TFlag) -> int | None:
        """Return the bit for `name`, or None if it is not registered."""
        return self._flags.get(name)

    def require(self, name: TFlag) -> int:
        """Return the bit for `name`; raises FlagNotFoundError if it is not registered."""
        bit = self._flags.get(name)
        if bit is None:
            raise FlagNotFoundError(name)
        return bit

    def keys(self) -> Iterator[TFlag]:
        return iter(self._flags.keys())

    def values(self) -> Iterator[int]:
        return iter(self._flags.values())

    def entries(self) -> Iterator[tuple[TFlag, int]]:
        return iter(self._flags.items())

    # ------------------------------------------------------------------
    # Flag factories
    # ------------------------------------------------------------------

    def empty(self) -> Flag[TFlag]:
        return Flag(self, const.EMPTY_BITMASK)

    def combine(self, *names: TFlag) -> Flag[TFlag]:
        """
        Build a flag with every name in `names` set.

        Every name is looked up before the flag is built, so an unknown one
        raises FlagNotFoundError and nothing is returned.
        """
        value = const.EMPTY_BITMASK
        for name in names:
            value = bitmasks.set_bits(bits=value, mask=self.require(name))
        return Flag(self, value)

    def parse(self, value: codec.RawFlagValue, radix: int | None = None) -> Flag[TFlag]:
        """
        Build a flag from a raw number or text.

        - `int`: used as the bitmask directly (any size)
        - integral `float`: converted to `int`
        - `str`: parsed in `radix` (2-36, default 10)

        Raises UnparseableFlagValueError for input that is not an integer,
        then validates like any other flag (NegativeFlagValueError,
        UnknownFlagsError).
        """
        return Flag(self, codec.parse_raw(value, radix))

    def parse_int(self, value: int | float) -> Flag[TFlag]:
        return Flag(self, codec.parse_int(value))

    def parse_text(self, text: str, radix: int = const.DEFAULT_RADIX) -> Flag[TFlag]:
        return Flag(self, codec.parse_text(text, radix))

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._flags)

    def __iter__(self) -> Iterator[TFlag]:
        return self.keys()

    def __contains__(self, name: object) -> bool:
        return name in self._flags

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._flags)!r})"
