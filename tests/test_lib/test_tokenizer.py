"""Tests for the quote and escape aware tokenizer."""

import pytest
from chanvar.lib.formatter import array_join
from chanvar.lib.tokenizer import char_unescape, string_separate, token_clean
from chanvar.models.dataModel import FormatSpec, TokenSequence


@pytest.mark.parametrize(
    "escaped,expected",
    [("n", "\n"), ("r", "\r"), ("t", "\t"), ("s", " ")],
)
def test_unescape_control_characters(escaped: str, expected: str) -> None:
    assert char_unescape(escaped) == expected


@pytest.mark.parametrize("escaped", ["x", "N", "'", '"', "\\", ",", "|", " ", "0"])
def test_unescape_other_characters_map_to_themselves(escaped: str) -> None:
    assert char_unescape(escaped) == escaped


@pytest.mark.parametrize(
    "text,delim",
    [
        ("a,b,c", ","),
        ("a,,b", ","),
        ("abc", ","),
        ("one::two::three", "::"),
        ("x|y|z", "|"),
        ("red green blue", " "),
        ("first:|second", ":|"),
    ],
)
def test_plain_input_matches_naive_split(text: str, delim: str) -> None:
    """Without escapes or quotes the tokenizer behaves like str.split."""
    result: TokenSequence = string_separate(text, delim, capacity=100)
    assert result.tokens == text.split(delim)
    assert not result.truncated


def test_quoted_delimiter_is_not_split() -> None:
    result = string_separate("a,'b,c',d", ",", capacity=10)
    assert result.tokens == ["a", "b,c", "d"]


def test_escaped_delimiter_is_not_split() -> None:
    result = string_separate(r"a\,b,c", ",", capacity=10)
    assert result.tokens == ["a,b", "c"]


def test_unterminated_quote_is_literal() -> None:
    result = string_separate("it's fine,two", ",", capacity=10)
    assert result.tokens == ["it's fine", "two"]


def test_quote_region_spans_delimiters() -> None:
    result = string_separate("a'b,c'd,e", ",", capacity=10)
    assert result.tokens == ["ab,cd", "e"]


def test_double_quotes_are_not_special() -> None:
    result = string_separate('"a,b"', ",", capacity=10)
    assert result.tokens == ['"a', 'b"']


def test_escape_sequences_are_resolved() -> None:
    result = string_separate(r"a\tb,c\sd,e\nf", ",", capacity=10)
    assert result.tokens == ["a\tb", "c d", "e\nf"]


def test_escaped_escape_marker() -> None:
    result = string_separate(r"a\\,b", ",", capacity=10)
    assert result.tokens == ["a\\", "b"]


def test_escaped_quote_is_literal() -> None:
    result = string_separate(r"it\'s,'x'", ",", capacity=10)
    assert result.tokens == ["it's", "x"]


def test_escaped_quote_satisfies_quote_lookahead() -> None:
    result = string_separate(r"x'y,z\'w,v", ",", capacity=10)
    assert result.tokens == ["xy,z'w,v"]


def test_cleaner_lookahead_sees_escaped_quote() -> None:
    assert token_clean(r"x'y\'", "") == "xy'"
    assert token_clean(r"x'y\'z'", "") == "xy'z"


def test_unquoted_surrounding_spaces_are_trimmed() -> None:
    result = string_separate(" a  , b ,c", ",", capacity=10)
    assert result.tokens == ["a", "b", "c"]


def test_quoted_spaces_are_kept() -> None:
    result = string_separate("' a ',b", ",", capacity=10)
    assert result.tokens == [" a ", "b"]


def test_escaped_trailing_space_is_kept() -> None:
    result = string_separate(r"a\s,b", ",", capacity=10)
    assert result.tokens == ["a ", "b"]


def test_multi_character_delimiter() -> None:
    result = string_separate("a:b:|c:|d", ":|", capacity=10)
    assert result.tokens == ["a:b", "c", "d"]


def test_trailing_delimiter_does_not_start_a_token() -> None:
    result = string_separate("a,b,", ",", capacity=10)
    assert result.tokens == ["a", "b,"]


def test_leading_delimiter_gives_empty_token() -> None:
    result = string_separate(",a", ",", capacity=10)
    assert result.tokens == ["", "a"]


def test_strip_whitespace_skips_runs() -> None:
    result = string_separate("  a   b  c ", " ", capacity=10, strip_whitespace=True)
    assert result.tokens == ["a", "b", "c"]


def test_strip_whitespace_on_blank_input() -> None:
    assert string_separate("   ", ",", capacity=10, strip_whitespace=True).tokens == []
    assert string_separate("   ", ",", capacity=10).tokens == [""]


def test_empty_input() -> None:
    result = string_separate("", ",", capacity=10)
    assert result.tokens == []
    assert not result.truncated


def test_capacity_exactly_filled() -> None:
    result = string_separate("a,b,c", ",", capacity=3)
    assert result.tokens == ["a", "b", "c"]
    assert result.count == 3
    assert not result.truncated


def test_capacity_exceeded_is_reported() -> None:
    result = string_separate("a,b,c,d,e", ",", capacity=3)
    assert result.tokens == ["a", "b", "c"]
    assert result.capacity == 3
    assert result.truncated


def test_invalid_arguments() -> None:
    with pytest.raises(ValueError, match="Delimiter"):
        string_separate("a,b", "", capacity=3)
    with pytest.raises(ValueError, match="Capacity"):
        string_separate("a,b", ",", capacity=0)


@pytest.mark.parametrize(
    "raw,delim,expected",
    [
        ("  hello  ", "", "hello"),
        ("", "", ""),
        ("    ", "", ""),
        ("'  '", "", "  "),
        (" 'a' b ", "", "a b"),
        (r"a\,b", "", r"a\,b"),
        (r"a\,b", ",", "a,b"),
        (r"say \"hi\"", "", 'say "hi"'),
        ("it's", "", "it's"),
        ("ab\\", "", "ab\\"),
        (r"\q", "", r"\q"),
        ("\tx\t", "", "\tx\t"),
    ],
)
def test_token_clean(raw: str, delim: str, expected: str) -> None:
    assert token_clean(raw, delim) == expected


def test_join_then_split_round_trip() -> None:
    tokens: list[str] = ["alpha", "beta gamma", "delta"]
    joined: str = array_join(tokens, FormatSpec(joiner=","))
    assert joined == "alpha,beta gamma,delta"
    assert string_separate(joined, ",", capacity=10).tokens == tokens
