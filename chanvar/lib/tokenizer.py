r"""
Quote and escape aware string tokenizer for chanvar.

Splits a string into tokens on a (possibly multi-character) delimiter while
honouring backslash escapes and single-quoted regions, then cleans every
token: quote markers are removed, escapes are resolved and unquoted leading
and trailing spaces are dropped.

The tokenizer handles:
- Escape sequences (\n, \r, \t, \s and literal-izing escapes such as \, or \')
- Single-quoted regions that suppress splitting and whitespace trimming
- Dangling single quotes, which are kept as literal characters
- A caller-supplied maximum number of tokens, with truncation reported

Example:
    result = string_separate("a,'b,c',d", ",", capacity=10)
    result.tokens  ->  ["a", "b,c", "d"]
"""

from enum import Enum
from typing import Final
from chanvar.models.dataModel import TokenSequence

ESCAPE_META: Final[str] = "\\"
QUOTE: Final[str] = "'"
DOUBLE_QUOTE: Final[str] = '"'

_UNESCAPED: Final[dict[str, str]] = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "s": " ",
}


class ScanState(Enum):
    """Tokenizer scan states."""

    START = 1
    SCANNING = 2


def char_unescape(escaped: str) -> str:
    """Map the character following an escape marker to its literal value.

    Args:
        escaped: The single character after the escape marker

    Returns:
        Linefeed, carriage return, tab or space for n, r, t and s; the
        character itself otherwise
    """
    return _UNESCAPED.get(escaped, escaped)


def quote_toggles(text: str, index: int, inside_quotes: bool) -> bool:
    """Decide whether the quote at text[index] opens or closes a quoted region.

    A quote always closes an open region. It only opens one when another
    quote follows somewhere in the rest of the text, so a lone apostrophe
    stays literal.
    """
    return inside_quotes or text.find(QUOTE, index + 1) != -1


def token_clean(raw: str, delim: str = "") -> str:
    """Strip quotes, resolve escapes and trim unquoted spaces of one token.

    Args:
        raw: Token text as cut out of the source string
        delim: Delimiter character whose escaped form yields the literal
            character, empty when cleaning outside a split context

    Returns:
        The cleaned token, empty if it held nothing significant
    """
    length: int = len(raw)
    pos: int = 0
    while pos < length and raw[pos] == " ":
        pos += 1

    out: list[str] = []
    end: int | None = None
    inside_quotes: bool = False

    while pos < length:
        char: str = raw[pos]

        if char == ESCAPE_META and pos + 1 < length:
            escaped: str = raw[pos + 1]
            resolved: str = char_unescape(escaped)
            if (
                escaped in (QUOTE, DOUBLE_QUOTE, ESCAPE_META)
                or (delim and escaped == delim)
                or resolved != escaped
            ):
                out.append(resolved)
                end = len(out)
                pos += 2
                continue

        if char == QUOTE and quote_toggles(raw, pos, inside_quotes):
            inside_quotes = not inside_quotes
            if inside_quotes:
                # spaces captured inside the quotes are significant
                end = len(out)
        else:
            out.append(char)
            if char != " " or inside_quotes:
                end = len(out)
        pos += 1

    if end is None:
        return ""
    return "".join(out[:end])


def _raw_split(buf: str, delim: str, strip_whitespace: bool) -> list[str]:
    """Cut buf into raw (uncleaned) tokens on unquoted, unescaped delimiters."""
    raw_tokens: list[str] = []
    state: ScanState = ScanState.START
    length: int = len(buf)
    delim_len: int = len(delim)
    inside_quotes: bool = False
    start: int = 0
    pos: int = 0

    while pos < length:
        if state is ScanState.START:
            if strip_whitespace:
                while pos < length and buf[pos].isspace():
                    pos += 1
                if pos >= length:
                    break
            start = pos
            state = ScanState.SCANNING
            continue

        char: str = buf[pos]
        if char == ESCAPE_META:
            # the escaped character is never a delimiter or quote
            pos += 1
        elif char == QUOTE and quote_toggles(buf, pos, inside_quotes):
            inside_quotes = not inside_quotes
        elif (
            not inside_quotes
            and buf.startswith(delim, pos)
            and pos + delim_len < length
        ):
            raw_tokens.append(buf[start:pos])
            pos += delim_len
            state = ScanState.START
            continue
        pos += 1

    if state is ScanState.SCANNING:
        raw_tokens.append(buf[start:])
    return raw_tokens


def string_separate(
    buf: str, delim: str, capacity: int, strip_whitespace: bool = False
) -> TokenSequence:
    """Split buf on delim into at most capacity cleaned tokens.

    A delimiter only separates tokens when it is outside quotes, not
    escaped, and followed by more input: a trailing delimiter stays part
    of the last token.

    Args:
        buf: Input text
        delim: Non-empty delimiter, matched literally
        capacity: Maximum number of tokens to return
        strip_whitespace: Skip whitespace before each token starts

    Returns:
        TokenSequence holding the first capacity tokens, with truncated set
        when the input held more

    Raises:
        ValueError: If delim is empty or capacity is below 1
    """
    if not delim:
        raise ValueError("Delimiter cannot be empty")
    if capacity < 1:
        raise ValueError(f"Capacity must be positive, got {capacity}")

    raw_tokens: list[str] = _raw_split(buf, delim, strip_whitespace)
    truncated: bool = len(raw_tokens) > capacity
    tokens: list[str] = [token_clean(raw, delim[0]) for raw in raw_tokens[:capacity]]
    return TokenSequence(tokens=tokens, capacity=capacity, truncated=truncated)
