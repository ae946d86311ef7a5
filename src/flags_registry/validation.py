from . import bitmasks
from .errors import NegativeFlagValueError, UnknownFlagsError


def validate_bitmask(value: int, *, known_mask: int) -> int:
    """
    Check that `value` can back a flag of a registry whose bits union to `known_mask`.

    Raises NegativeFlagValueError for values below zero and UnknownFlagsError
    when any bit outside `known_mask` is set. Returns `value` unchanged.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Flag value must be an int, got {type(value).__name__}")
    if value < 0:
        raise NegativeFlagValueError(value)

    unknown = bitmasks.outside(bits=value, known=known_mask)
    if unknown:
        raise UnknownFlagsError(value, unknown)
    return value
