"""
Array formatter for chanvar.

Rejoins a token sequence into one string. The first, last and every item
each get their own prefix and suffix, and consecutive items are separated
by a joiner. Overflow detection lives here too: the tokenizer only reports
what it saw, and the formatter refuses to emit a result that may have been
cut short.

Assembly, for items T1..Tn:
    n == 1:  prefix_first prefix_each prefix_last T1 suffix_each suffix_first suffix_last
    n >= 2:  prefix_first prefix_each T1 suffix_each suffix_first
             joiner prefix_each Ti suffix_each                         (1 < i < n)
             joiner prefix_last prefix_each Tn suffix_each suffix_first suffix_last
"""

from typing import Callable
from chanvar.lib.errors import ArrayOverflowError
from chanvar.lib.tokenizer import string_separate
from chanvar.models.dataModel import FormatSpec, TokenSequence


def capacity_resolve(max_split: int, limit: int) -> int:
    """Number of tokens to request from the tokenizer.

    Args:
        max_split: Explicit maximum, 0 when none was given
        limit: Hard upper bound of the application

    Returns:
        max_split when it is positive and below limit, limit otherwise
    """
    if 0 < max_split < limit:
        return max_split
    return limit


def overflow_check(sequence: TokenSequence, max_split: int) -> None:
    """Reject sequences that were, or may have been, truncated.

    A sequence that fills its capacity exactly is ambiguous unless the caller
    asked for exactly that many items.

    Args:
        sequence: Output of the tokenizer
        max_split: The explicit maximum that was requested, 0 for none

    Raises:
        ArrayOverflowError: If items were dropped or may have been
    """
    capacity: int = sequence.capacity
    ambiguous: bool = sequence.count == capacity and (
        max_split == 0 or max_split > capacity
    )
    if sequence.truncated or ambiguous:
        raise ArrayOverflowError(capacity)


def array_join(
    tokens: list[str],
    spec: FormatSpec,
    expand_one: Callable[[str], str] | None = None,
) -> str:
    """Join tokens applying the affixes and joiner of spec.

    Args:
        tokens: Items in output order
        spec: Joiner and affix settings
        expand_one: Applied to every item before affixing, if given

    Returns:
        The assembled string, empty for no tokens
    """
    if not tokens:
        return ""

    items: list[str] = [expand_one(t) for t in tokens] if expand_one else list(tokens)

    if len(items) == 1:
        return "".join(
            (
                spec.prefix_first,
                spec.prefix_each,
                spec.prefix_last,
                items[0],
                spec.suffix_each,
                spec.suffix_first,
                spec.suffix_last,
            )
        )

    parts: list[str] = [
        f"{spec.prefix_first}{spec.prefix_each}{items[0]}{spec.suffix_each}{spec.suffix_first}"
    ]
    for item in items[1:-1]:
        parts.append(f"{spec.joiner}{spec.prefix_each}{item}{spec.suffix_each}")
    parts.append(
        f"{spec.joiner}{spec.prefix_last}{spec.prefix_each}{items[-1]}"
        f"{spec.suffix_each}{spec.suffix_first}{spec.suffix_last}"
    )
    return "".join(parts)


def value_format(
    value: str,
    spec: FormatSpec,
    limit: int,
    expand_one: Callable[[str], str] | None = None,
) -> str:
    """Split value on spec.split_by and join it back according to spec.

    Args:
        value: Text to split, already expanded if the caller wanted that
        spec: Splitting and formatting settings
        limit: Hard upper bound on the number of items
        expand_one: Per-item expansion, if any

    Returns:
        The formatted string

    Raises:
        ArrayOverflowError: If value holds more items than allowed
        ValueError: If spec.split_by is empty
    """
    capacity: int = capacity_resolve(spec.max_split, limit)
    sequence: TokenSequence = string_separate(
        value, spec.split_by, capacity, spec.strip_white_space
    )
    overflow_check(sequence, spec.max_split)
    return array_join(sequence.tokens, spec, expand_one)
