from flags_registry import FlagsRegistry
from flags_registry import constants as const


def test_alias_tokens_match_flag_output() -> None:
    registry = FlagsRegistry.from_names("A", "B")
    assert registry.empty().alias == const.EMPTY_FLAG_ALIAS
    assert registry.combine("A", "B").alias == const.ALIAS_TEMPLATE.format(
        const.ALIAS_SEPARATOR.join(["A", "B"])
    )


def test_radix_bounds() -> None:
    assert const.MIN_RADIX == 2
    assert const.MAX_RADIX == 36
    assert const.MIN_RADIX <= const.DEFAULT_RADIX <= const.MAX_RADIX
