"""Tests for the array formatter and overflow detection."""

import pytest
from chanvar.lib.errors import ArrayOverflowError
from chanvar.lib.formatter import (
    array_join,
    capacity_resolve,
    overflow_check,
    value_format,
)
from chanvar.models.dataModel import FormatSpec, TokenSequence


@pytest.fixture
def affixes() -> FormatSpec:
    """A spec where every affix is distinguishable."""
    return FormatSpec(
        joiner="|",
        prefix_first="{",
        prefix_last="(",
        prefix_each="<",
        suffix_first="}",
        suffix_last=")",
        suffix_each=">",
    )


@pytest.mark.parametrize(
    "max_split,limit,expected",
    [(0, 100, 100), (3, 100, 3), (99, 100, 99), (100, 100, 100), (150, 100, 100)],
)
def test_capacity_resolve(max_split: int, limit: int, expected: int) -> None:
    assert capacity_resolve(max_split, limit) == expected


def test_overflow_when_truncated() -> None:
    sequence = TokenSequence(tokens=["a", "b", "c"], capacity=3, truncated=True)
    with pytest.raises(ArrayOverflowError) as excinfo:
        overflow_check(sequence, max_split=3)
    assert excinfo.value.capacity == 3
    assert "max of 3 exceeded" in str(excinfo.value)


def test_exact_fill_with_explicit_max_is_accepted() -> None:
    sequence = TokenSequence(tokens=["a", "b", "c"], capacity=3)
    overflow_check(sequence, max_split=3)


def test_exact_fill_without_explicit_max_is_ambiguous() -> None:
    sequence = TokenSequence(tokens=["x"] * 5, capacity=5)
    with pytest.raises(ArrayOverflowError):
        overflow_check(sequence, max_split=0)


def test_exact_fill_below_requested_max_is_ambiguous() -> None:
    sequence = TokenSequence(tokens=["x"] * 5, capacity=5)
    with pytest.raises(ArrayOverflowError):
        overflow_check(sequence, max_split=8)


def test_partial_fill_is_accepted() -> None:
    overflow_check(TokenSequence(tokens=["a", "b"], capacity=100), max_split=0)


def test_join_no_tokens(affixes: FormatSpec) -> None:
    assert array_join([], affixes) == ""


def test_join_single_token_gets_every_affix() -> None:
    spec = FormatSpec(prefix_first="[", suffix_last="]", prefix_each="<", suffix_each=">")
    assert array_join(["X"], spec) == "[<X>]"


def test_join_single_token_affix_order(affixes: FormatSpec) -> None:
    assert array_join(["a"], affixes) == "{<(a>})"


def test_join_two_tokens_plain() -> None:
    assert array_join(["a", "b"], FormatSpec(joiner="-")) == "a-b"


def test_join_first_middle_last(affixes: FormatSpec) -> None:
    assert array_join(["a", "b", "c"], affixes) == "{<a>}|<b>|(<c>})"


def test_join_two_tokens_with_affixes(affixes: FormatSpec) -> None:
    assert array_join(["a", "b"], affixes) == "{<a>}|(<b>})"


def test_join_applies_expansion_before_affixes() -> None:
    spec = FormatSpec(joiner=",", prefix_each="'", suffix_each="'")
    assert array_join(["a", "b"], spec, str.upper) == "'A','B'"


def test_join_does_not_modify_input() -> None:
    tokens: list[str] = ["a", "b"]
    array_join(tokens, FormatSpec(joiner="+"), str.upper)
    assert tokens == ["a", "b"]


def test_value_format_default_split_by() -> None:
    assert value_format("a:|b:|c", FormatSpec(joiner=", "), limit=100) == "a, b, c"


def test_value_format_overflow_with_explicit_max() -> None:
    spec = FormatSpec(split_by=",", max_split=3)
    with pytest.raises(ArrayOverflowError):
        value_format("a,b,c,d,e", spec, limit=100)


def test_value_format_exact_explicit_max() -> None:
    spec = FormatSpec(split_by=",", max_split=3, joiner="-")
    assert value_format("a,b,c", spec, limit=100) == "a-b-c"


def test_value_format_limit_reached_without_max() -> None:
    spec = FormatSpec(split_by=",")
    with pytest.raises(ArrayOverflowError):
        value_format("a,b,c,d,e", spec, limit=5)
    assert value_format("a,b,c,d", spec, limit=5) == "abcd"


def test_value_format_strips_white_space() -> None:
    spec = FormatSpec(split_by=",", joiner=";", strip_white_space=True)
    assert value_format(" a ,\tb ", spec, limit=10) == "a;b"
