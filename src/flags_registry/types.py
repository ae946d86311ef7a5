"""
Read-only views shared by `FlagsRegistry` and `Flag`.

`Flag` only ever talks to its registry through `RegistryView`, so a flag can
look names up and check bits but has no way to change the registry.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, TypeVar

FlagKey = str

TFlag = TypeVar("TFlag", bound=FlagKey)


class RegistryView(Protocol[TFlag]):
    """Lookups a flag needs from the registry that produced it."""

    @property
    def known_mask(self) -> int: ...

    def get(self, name: TFlag) -> int | None: ...

    def require(self, name: TFlag) -> int: ...

    def entries(self) -> Iterator[tuple[TFlag, int]]: ...
