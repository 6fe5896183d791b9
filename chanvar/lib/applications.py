"""
Applications and APIs built on the tokenizer, option parser and formatter.

This is the thin layer between a channel and the core:

- set_raw:          <varname>=<value>
                    store a value without expanding it
- set_array:        [delim=,expand,expand_each,max_split=]<varname>=<value>
                    split the value and push every item onto the variable
- join_array:       [split_by=,joiner=,prefix_*=,suffix_*=,...],<value>
                    split the value and join it back with affixes
- get_var_expanded: <varname>
                    fetch a variable and expand the references it holds

Every function raises a `ChanvarError` subclass on failure, before any
variable is touched, and returns a `CommandResult` otherwise.
"""

from typing import Final
from chanvar.config.settings import appsettings
from chanvar.lib.errors import (
    MissingArgumentError,
    OptionSyntaxError,
    SessionRequiredError,
)
from chanvar.lib.formatter import capacity_resolve, overflow_check, value_format
from chanvar.lib.log import LOG
from chanvar.lib.options import bracket_findEnd, options_parse
from chanvar.lib.tokenizer import string_separate
from chanvar.models.dataModel import (
    ChannelCollaborator,
    CommandResult,
    FormatSpec,
    OptionSet,
    TokenSequence,
)


SET_ARRAY_OPTIONS: Final[frozenset[str]] = frozenset(
    {"delim", "expand", "expand_each", "max_split", "strip_white_space"}
)
JOIN_ARRAY_OPTIONS: Final[frozenset[str]] = frozenset(
    {
        "split_by",
        "joiner",
        "prefix_first",
        "prefix_last",
        "prefix_each",
        "suffix_first",
        "suffix_last",
        "suffix_each",
        "expand",
        "expand_each",
        "max_split",
        "strip_white_space",
    }
)


def assignment_split(text: str) -> tuple[str, str | None]:
    """Split "name=value" (or "name,value") at the first separator.

    Returns:
        The name, and the value or None when it is absent or empty
    """
    index: int = text.find("=")
    if index == -1:
        index = text.find(",")
    if index == -1:
        return text, None
    return text[:index], text[index + 1 :] or None


def options_extract(data: str) -> tuple[OptionSet, str]:
    """Parse an optional leading [options] segment.

    Returns:
        The parsed options and the text following the segment

    Raises:
        OptionSyntaxError: If the segment is not closed
    """
    if not data.startswith("["):
        return OptionSet(), data
    end: int | None = bracket_findEnd(data)
    if end is None:
        raise OptionSyntaxError("Syntax error: missing ']'")
    return options_parse(data[1:end]), data[end + 1 :]


def session_require(channel: ChannelCollaborator | None, what: str) -> ChannelCollaborator:
    if channel is None:
        raise SessionRequiredError(f"Cannot {what} without a session")
    return channel


def set_raw(data: str, channel: ChannelCollaborator | None) -> CommandResult:
    """Set a channel variable without expanding the value.

    Raises:
        MissingArgumentError: If no variable name is given
        SessionRequiredError: If there is no channel
    """
    if not data:
        raise MissingArgumentError("No variable name specified.")
    session: ChannelCollaborator = session_require(channel, "set a variable")

    name, value = assignment_split(data)
    if not name:
        raise MissingArgumentError("No variable name specified.")

    session.store_raw(name, value)
    return CommandResult()


def set_array(data: str, channel: ChannelCollaborator | None) -> CommandResult:
    """Split a value and push every non-empty item onto a variable.

    Raises:
        MissingArgumentError: If no variable name is given
        OptionSyntaxError: On malformed options or an empty delimiter
        ArrayOverflowError: If the value holds too many items
        SessionRequiredError: If there is no channel
        ExpansionError: If expanding the value fails
    """
    if not data:
        raise MissingArgumentError("No variable name specified")
    session: ChannelCollaborator = session_require(channel, "set a variable")

    options, rest = options_extract(data)
    options.restrict(SET_ARRAY_OPTIONS)
    spec: FormatSpec = FormatSpec.from_options(options, delim=appsettings.set_array_delim)

    if not rest:
        raise MissingArgumentError("No variable name specified after options []")

    name, value = assignment_split(rest)
    if not name:
        raise MissingArgumentError("No variable name specified")
    if value is None:
        LOG(f"SET_ARRAY: no value for {name}, nothing to push")
        return CommandResult(warnings=options.warnings())
    if not spec.delim:
        raise OptionSyntaxError("Option [delim] cannot be empty")

    if spec.expand:
        value = session.expand_one(value)

    LOG(f"SET_ARRAY: Separating var {name} by '{spec.delim}'")
    capacity: int = capacity_resolve(spec.max_split, appsettings.set_array_capacity)
    strip: bool = spec.strip_white_space or spec.delim.isspace()
    sequence: TokenSequence = string_separate(value, spec.delim, capacity, strip)
    overflow_check(sequence, spec.max_split)

    items: list[str] = [
        session.expand_one(token) if spec.expand_each else token
        for token in sequence.tokens
    ]
    for i, item in enumerate(items):
        if item:
            LOG(f"SET_ARRAY: setting {name}[{i}] = {item}")
            session.store_pushed(name, item)

    return CommandResult(warnings=options.warnings())


def join_array(data: str, channel: ChannelCollaborator | None = None) -> CommandResult:
    """Split a value on split_by and join it back with affixes and a joiner.

    The channel is only needed for the expand and expand_each options.

    Raises:
        MissingArgumentError: If no argument is given
        OptionSyntaxError: On a missing [ or ], a missing value argument,
            malformed options or an empty split_by
        ArrayOverflowError: If the value holds too many items
        SessionRequiredError: If expansion is requested without a channel
        ExpansionError: If expanding the value fails
    """
    if not data:
        raise MissingArgumentError("No variable name")
    if not data.startswith("["):
        raise OptionSyntaxError("Syntax error: missing '[' in first arg")

    end: int | None = bracket_findEnd(data)
    if end is None:
        raise OptionSyntaxError("Syntax error: missing ']'")
    comma: int = data.find(",", end + 1)
    if comma == -1:
        raise OptionSyntaxError("Syntax error: missing second arg")

    options: OptionSet = options_parse(data[1:end])
    options.restrict(JOIN_ARRAY_OPTIONS)
    spec: FormatSpec = FormatSpec.from_options(
        options, split_by=appsettings.join_split_by
    )
    if spec.expand or spec.expand_each:
        session_require(channel, "expand variables")

    value: str = data[comma + 1 :]
    if spec.strip_white_space:
        value = value.strip()

    if not value:
        LOG("Empty value, nothing to do!")
        return CommandResult(text="", warnings=options.warnings())

    if not spec.split_by:
        raise OptionSyntaxError("missing split_by option")

    if spec.expand and channel is not None:
        value = channel.expand_one(value)

    text: str = value_format(
        value,
        spec,
        appsettings.join_capacity,
        channel.expand_one if spec.expand_each and channel is not None else None,
    )
    return CommandResult(text=text, warnings=options.warnings())


def get_var_expanded(data: str, channel: ChannelCollaborator | None) -> CommandResult:
    """Return a variable's value with its references expanded.

    Unset variables give an empty result.

    Raises:
        SessionRequiredError: If there is no channel
        MissingArgumentError: If no variable name is given
        ExpansionError: If expanding the value fails
    """
    session: ChannelCollaborator = session_require(channel, "retrieve variable")
    if not data:
        raise MissingArgumentError("No variable name")

    value: str | None = session.value_get(data)
    return CommandResult(text=session.expand_one(value) if value is not None else "")
