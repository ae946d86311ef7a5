from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Generic

from . import bitmasks
from . import constants as const
from .types import RegistryView, TFlag
from .validation import validate_bitmask


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Flag(Generic[TFlag]):
    """
    An immutable combination of flags from a registry.

    Usually obtained from the registry (`empty()`, `combine(...)`, `parse(...)`)
    rather than built directly. Construction always validates the bitmask:
    - NegativeFlagValueError if `value < 0`
    - UnknownFlagsError if `value` has a bit the registry does not know

    `add` and `remove` never modify the instance. They return a new flag, or
    the very same instance when the bitmask would not change, so `is` can be
    used as a no-op check.
    """

    registry: RegistryView[TFlag]
    value: int
    _alias: str | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        validate_bitmask(self.value, known_mask=self.registry.known_mask)

    def is_empty(self) -> bool:
        return self.value == const.EMPTY_BITMASK

    def has(self, name: TFlag) -> bool:
        """
        Test whether `name` is set.

        Unknown names are simply not set: this never raises.
        """
        bit = self.registry.get(name)
        if bit is None:
            return False
        return bitmasks.contains(bits=self.value, mask=bit)

    def add(self, *names: TFlag) -> Flag[TFlag]:
        """
        Return a flag with every name in `names` set.

        Raises FlagNotFoundError for any unknown name, whether or not the
        other names are already set. Returns `self` if nothing changes.
        """
        value = self.value
        for name in names:
            bit = self.registry.require(name)
            if not bitmasks.contains(bits=value, mask=bit):
                value = bitmasks.set_bits(bits=value, mask=bit)
        return self._with_value(value)

    def remove(self, *names: TFlag) -> Flag[TFlag]:
        """
        Return a flag with every name in `names` cleared.

        Raises FlagNotFoundError for any unknown name, even one that could
        never have been set. Returns `self` if nothing changes.
        """
        value = self.value
        for name in names:
            bit = self.registry.require(name)
            if bitmasks.contains(bits=value, mask=bit):
                value = bitmasks.clear_bits(bits=value, mask=bit)
        return self._with_value(value)

    def names(self) -> Iterator[TFlag]:
        """Yield the active names in registry order."""
        for name, bit in self.registry.entries():
            if bitmasks.contains(bits=self.value, mask=bit):
                yield name

    @property
    def alias(self) -> str:
        """
        Human-readable label, computed on first access and cached.

        - `EMPTY_FLAG` for an empty flag
        - `[READ]` for a single flag
        - `[READ+WRITE]` for several flags
        """
        alias = self._alias
        if alias is None:
            if self.is_empty():
                alias = const.EMPTY_FLAG_ALIAS
            else:
                alias = const.ALIAS_TEMPLATE.format(
                    const.ALIAS_SEPARATOR.join(self.names())
                )
            # frozen dataclass; the cache is the only field written after init
            object.__setattr__(self, "_alias", alias)
        return alias

    def _with_value(self, value: int) -> Flag[TFlag]:
        if value == self.value:
            return self
        return Flag(self.registry, value)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)  # type: ignore[arg-type]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Flag):
            return NotImplemented
        return self.registry is other.registry and self.value == other.value

    def __hash__(self) -> int:
        return hash((id(self.registry), self.value))

    def __str__(self) -> str:
        return const.FLAG_STR_TEMPLATE.format(alias=self.alias, value=self.value)

    __repr__ = __str__
