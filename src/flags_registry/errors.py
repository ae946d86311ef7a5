from __future__ import annotations


class FlagsRegistryError(Exception):
    """Base class for all flags registry errors."""


class NegativeFlagValueError(FlagsRegistryError, ValueError):
    """Raised when a bitmask smaller than zero is used to build a flag."""

    def __init__(self, value: int) -> None:
        super().__init__(f"Flag value cannot be negative: {value}")
        self.value = value


class UnknownFlagsError(FlagsRegistryError, ValueError):
    """
    Raised when a bitmask has bits set outside the union of all bits known
    to the registry.
    """

    def __init__(self, value: int, unknown_bits: int) -> None:
        super().__init__("Flag value contains unknown flags")
        self.value = value
        self.unknown_bits = unknown_bits


class FlagNotFoundError(FlagsRegistryError, LookupError):
    """Raised when `combine`, `add` or `remove` is given a name the registry does not know."""

    def __init__(self, name: object) -> None:
        super().__init__(f"Flag with key {name} is not found.")
        self.name = name


class UnparseableFlagValueError(FlagsRegistryError, ValueError):
    """Raised when raw input cannot be interpreted as an integer bitmask."""

    def __init__(self, raw: object, radix: int | None = None) -> None:
        if radix is None:
            msg = f"Cannot parse {raw!r} as a flag value"
        else:
            msg = f"Cannot parse {raw!r} as a flag value in radix {radix}"
        super().__init__(msg)
        self.raw = raw
        self.radix = radix
