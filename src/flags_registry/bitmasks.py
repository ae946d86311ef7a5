"""Integer helpers for arbitrary-width bitmasks."""

from collections.abc import Iterable

from . import constants as const


def bit_at(position: int) -> int:
    """Return the single-bit mask for `position` (0 = LSB)."""
    if position < 0:
        raise ValueError(f"Bit position must be non-negative, got {position}")
    return 1 << position


def union(masks: Iterable[int]) -> int:
    """Bitwise OR of every mask in `masks`; empty input gives 0."""
    bits = const.EMPTY_BITMASK
    for mask in masks:
        bits |= mask
    return bits


def set_bits(*, bits: int, mask: int) -> int:
    return bits | mask


def clear_bits(*, bits: int, mask: int) -> int:
    return bits & ~mask


def contains(*, bits: int, mask: int) -> bool:
    """True when every bit of `mask` is set in `bits`."""
    return bits & mask == mask


def outside(*, bits: int, known: int) -> int:
    """Bits of `bits` that are not part of `known`."""
    return bits & ~known
