import pytest

from flags_registry import FlagsRegistry

FLAG_KEYS = (
    "__FLAG_A__",  # 1
    "__FLAG_B__",  # 2
    "__FLAG_C__",  # 4
    "__FLAG_D__",  # 8
)


@pytest.fixture
def flag_keys() -> tuple[str, ...]:
    return FLAG_KEYS


@pytest.fixture
def registry() -> FlagsRegistry[str]:
    """Four-flag registry: A=1, B=2, C=4, D=8."""
    return FlagsRegistry.from_names(*FLAG_KEYS)


@pytest.fixture
def abcd_registry() -> FlagsRegistry[str]:
    """Four-flag registry with short names: A=1, B=2, C=4, D=8."""
    return FlagsRegistry.from_names("A", "B", "C", "D")
