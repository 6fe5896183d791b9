"""
Bracketed option parsing for chanvar applications.

Applications accept a leading option segment such as
`[joiner=', ',prefix_each=<,suffix_each=>]`. This module locates the segment,
splits it on commas with the quote and escape aware tokenizer and maps every
option onto a typed field through a declarative vocabulary.

Rules:
- Option names are matched case-sensitively
- Flags take no value, or one of 1/true/yes/on and 0/false/no/off
- Unknown options are reported as warnings and otherwise ignored
- When an option repeats, the last occurrence wins
"""

from typing import Final
from chanvar.config.settings import appsettings
from chanvar.lib.errors import OptionSyntaxError
from chanvar.lib.tokenizer import string_separate
from chanvar.models.dataModel import (
    OptionDefinition,
    OptionKind,
    OptionSet,
    TokenSequence,
)

OPTION_VOCABULARY: Final[dict[str, OptionDefinition]] = {
    "delim": OptionDefinition("delim", OptionKind.STRING),
    "expand": OptionDefinition("expand", OptionKind.FLAG),
    "expand_each": OptionDefinition("expand_each", OptionKind.FLAG),
    "expand-each": OptionDefinition("expand_each", OptionKind.FLAG),
    "strip_white_space": OptionDefinition("strip_white_space", OptionKind.FLAG),
    "split_by": OptionDefinition("split_by", OptionKind.STRING),
    "max_split": OptionDefinition("max_split", OptionKind.INTEGER),
    "joiner": OptionDefinition("joiner", OptionKind.STRING),
    "prefix_first": OptionDefinition("prefix_first", OptionKind.STRING),
    "prefix_last": OptionDefinition("prefix_last", OptionKind.STRING),
    "prefix_each": OptionDefinition("prefix_each", OptionKind.STRING),
    "suffix_first": OptionDefinition("suffix_first", OptionKind.STRING),
    "suffix_last": OptionDefinition("suffix_last", OptionKind.STRING),
    "suffix_each": OptionDefinition("suffix_each", OptionKind.STRING),
}

_TRUE_WORDS: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSE_WORDS: Final[frozenset[str]] = frozenset({"0", "false", "no", "off"})


def bracket_findEnd(text: str, open_char: str = "[", close_char: str = "]") -> int | None:
    """Find the bracket closing the one that opens text.

    Leading spaces are skipped. Nested brackets of the same kind are
    balanced.

    Args:
        text: Text expected to start with open_char
        open_char: Opening bracket
        close_char: Closing bracket

    Returns:
        Index of the matching close_char, or None if text does not start
        with open_char or the bracket is never closed
    """
    pos: int = 0
    while pos < len(text) and text[pos] == " ":
        pos += 1
    if pos >= len(text) or text[pos] != open_char:
        return None

    depth: int = 0
    for index in range(pos, len(text)):
        char: str = text[index]
        if char == open_char and (open_char != close_char or depth == 0):
            depth += 1
        elif char == close_char:
            depth -= 1
            if not depth:
                return index
    return None


def flag_parse(name: str, value: str | None) -> bool:
    """Interpret the optional value of a flag option.

    Raises:
        OptionSyntaxError: If the value is not a recognized boolean word
    """
    if value is None:
        return True
    word: str = value.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise OptionSyntaxError(f"Option [{name}] expects a boolean, got '{value}'")


def integer_parse(name: str, value: str) -> int:
    """Interpret an integer option value; negative values mean 'unset'.

    Raises:
        OptionSyntaxError: If the value is not an integer
    """
    try:
        number: int = int(value.strip())
    except ValueError:
        raise OptionSyntaxError(f"Option [{name}] expects an integer, got '{value}'")
    return max(number, 0)


def options_parse(segment: str) -> OptionSet:
    """Parse the content of a bracketed option segment.

    Args:
        segment: Text between the brackets, e.g. "joiner=-,expand"

    Returns:
        OptionSet with typed values, ignored options and repeated names

    Raises:
        OptionSyntaxError: On malformed values or too many options
    """
    capacity: int = appsettings.option_capacity
    parts: TokenSequence = string_separate(segment, ",", capacity)
    if parts.truncated:
        raise OptionSyntaxError(f"Too many options, at most {capacity} allowed")

    options: OptionSet = OptionSet()
    seen: set[str] = set()

    for token in parts.tokens:
        if not token:
            continue
        name, has_value, raw_value = token.partition("=")
        definition: OptionDefinition | None = OPTION_VOCABULARY.get(name)
        value: str | None = raw_value if has_value else None

        if definition is None or (definition.kind is not OptionKind.FLAG and value is None):
            options.unrecognized.append(token)
            continue

        if definition.field in seen:
            options.duplicates.append(name)
        seen.add(definition.field)

        match definition.kind:
            case OptionKind.FLAG:
                options.values[definition.field] = flag_parse(name, value)
            case OptionKind.INTEGER:
                options.values[definition.field] = integer_parse(name, value or "")
            case OptionKind.STRING:
                options.values[definition.field] = value or ""

    return options
