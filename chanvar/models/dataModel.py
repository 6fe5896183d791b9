"""
dataModel.py

This module defines the data models and schemas used throughout chanvar.
The models leverage Pydantic for validation and type safety.

Features:
- Token sequences produced by the delimiter tokenizer
- Option vocabulary definitions, parsed option sets and format specs
- Application (command) results
- Variable expansion results
- Input processing results
- The channel collaborator protocol

Usage:
Import these models to validate and structure data used in the application.
"""

from pydantic import BaseModel, Field
from typing import Any, Callable, Optional, Protocol
from enum import Enum
from dataclasses import dataclass


class OptionKind(Enum):
    """
    Enum for the value type an option accepts.
    """

    FLAG = 1
    STRING = 2
    INTEGER = 3


@dataclass(frozen=True)
class OptionDefinition:
    """Declarative entry of the option vocabulary.

    Attributes:
        field: FormatSpec field the option sets
        kind: How the option value is interpreted
    """

    field: str
    kind: OptionKind


class TokenSequence(BaseModel):
    """Result of a delimiter tokenization.

    Attributes:
        tokens: Cleaned tokens in source order
        capacity: Maximum number of tokens that was requested
        truncated: True when the input held more tokens than capacity
    """

    tokens: list[str] = Field(default_factory=list)
    capacity: int
    truncated: bool = False

    @property
    def count(self) -> int:
        return len(self.tokens)


class OptionSet(BaseModel):
    """Options parsed from a bracketed option segment.

    Attributes:
        values: FormatSpec field name mapped to its parsed value
        unrecognized: Raw option tokens that were reported and ignored
        duplicates: Option names given more than once (last one wins)
        unused: Known options the application does not use
    """

    values: dict[str, str | int | bool] = Field(default_factory=dict)
    unrecognized: list[str] = Field(default_factory=list)
    duplicates: list[str] = Field(default_factory=list)
    unused: list[str] = Field(default_factory=list)

    def warnings(self) -> list[str]:
        """Human readable warnings for the caller."""
        messages: list[str] = [
            f"Invalid option [{opt}] specified" for opt in self.unrecognized
        ]
        messages += [f"Option [{name}] given more than once" for name in self.duplicates]
        messages += [f"Option [{name}] has no effect here" for name in self.unused]
        return messages

    def restrict(self, fields: frozenset[str]) -> None:
        """Move options whose field is not in fields from values to unused."""
        for field in [f for f in self.values if f not in fields]:
            del self.values[field]
            self.unused.append(field)


class FormatSpec(BaseModel):
    """Formatting and splitting settings derived from an option set.

    Attributes:
        joiner: Placed between consecutive items
        prefix_first: Prepended to the first item
        prefix_last: Prepended to the last item
        prefix_each: Prepended to every item
        suffix_first: Appended to the first item
        suffix_last: Appended to the last item
        suffix_each: Appended to every item
        split_by: Delimiter for join_array
        delim: Delimiter for set_array
        max_split: Explicit maximum number of items, 0 for none
        strip_white_space: Strip whitespace around the value and tokens
        expand: Expand the whole value before splitting
        expand_each: Expand every token after splitting
    """

    joiner: str = ""
    prefix_first: str = ""
    prefix_last: str = ""
    prefix_each: str = ""
    suffix_first: str = ""
    suffix_last: str = ""
    suffix_each: str = ""
    split_by: str = ":|"
    delim: str = " "
    max_split: int = 0
    strip_white_space: bool = False
    expand: bool = False
    expand_each: bool = False

    @classmethod
    def from_options(cls, options: OptionSet, **defaults: Any) -> "FormatSpec":
        """Build a spec from parsed options layered over the given defaults."""
        return cls(**{**defaults, **options.values})


class ParseResult(BaseModel):
    """Result of ${var} expansion.

    Attributes:
        text: The processed text after substitutions
        error: Optional error message if expansion failed
        success: Whether expansion succeeded
    """

    text: str
    error: str | None
    success: bool


class CommandResult(BaseModel):
    """Result of running one application or API.

    Attributes:
        text: Output text (empty for applications that only set variables)
        error: Error message if the command failed
        success: Whether the command succeeded
        warnings: Non-fatal problems, such as unrecognized options
    """

    text: str = ""
    error: str | None = None
    success: bool = True
    warnings: list[str] = Field(default_factory=list)


class InputResult(BaseModel):
    """Result of input collection operation.

    Attributes:
        text: The collected input text
        continue_loop: Whether to continue processing
        error: Optional error message if input collection failed
    """

    text: str
    continue_loop: bool
    error: str | None = None


class ProcessResult(BaseModel):
    """Result of command/input processing.

    Attributes:
        text: Processed output text or command output
        is_command: Whether input was a command
        should_exit: Whether to exit processing
        error: Optional error message
        success: Whether processing succeeded
        exit_code: Exit code for non-interactive mode
    """

    text: str
    is_command: bool
    should_exit: bool
    error: str | None = None
    success: bool = True
    exit_code: int = 0


class InputMode(BaseModel):
    """Input mode determination.

    Attributes:
        has_stdin: Whether stdin has content
        exec_string: Direct command string if provided
        use_repl: Whether to use interactive REPL
    """

    has_stdin: bool = False
    exec_string: str | None = None
    use_repl: bool = True


class ChannelCollaborator(Protocol):
    """Protocol for the channel the applications operate on.

    Channels must implement:
        expand_one(): ${var} expansion of a single string
        store_pushed(): ordered multi-value storage
        store_raw(): plain assignment
        value_get(): plain lookup
    """

    def expand_one(self, raw: str) -> str:
        """Expand variable references in one string.

        Raises:
            ExpansionError: If references are circular or nested too deeply
        """
        ...

    def store_pushed(self, name: str, value: str) -> None:
        """Append one value to the variable called name."""
        ...

    def store_raw(self, name: str, value: str | None) -> None:
        """Set the variable called name, or unset it when value is None."""
        ...

    def value_get(self, name: str) -> str | None:
        """Return the stored value of name, None if unset."""
        ...


class ApplicationKind(Enum):
    """
    Enum for how an application reports back.

    APPLICATION: acts on the channel, produces no output
    API: produces output text
    """

    APPLICATION = 1
    API = 2


@dataclass
class ApplicationRoute:
    """Registration entry of the application router.

    Attributes:
        name: Name the application is invoked by (e.g. 'join_array')
        handler: Callable taking (data, channel) and returning a CommandResult
        kind: APPLICATION or API
        summary: One line description
        syntax: Usage string for help output
    """

    name: str
    handler: Callable[[str, Optional[ChannelCollaborator]], CommandResult]
    kind: ApplicationKind
    summary: str
    syntax: str
