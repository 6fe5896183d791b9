"""
Error types raised by the chanvar core and applications.

Every error derives from `ChanvarError`, which carries a short `kind` label
used when results are reported back to the caller. Unrecognized options are
not errors: they are collected as warnings on the parsed option set.
"""


class ChanvarError(Exception):
    """Base class for all reportable chanvar failures."""

    kind: str = "error"


class MissingArgumentError(ChanvarError):
    """A required variable name or value is absent."""

    kind = "missing argument"


class OptionSyntaxError(ChanvarError):
    """Malformed bracketed options or a missing required separator."""

    kind = "syntax error"


class ArrayOverflowError(ChanvarError):
    """More items than the requested maximum, or an ambiguous exact fill."""

    kind = "overflow"

    def __init__(self, capacity: int) -> None:
        super().__init__(f"too many items in array. max of {capacity} exceeded")
        self.capacity: int = capacity


class SessionRequiredError(ChanvarError):
    """The operation needs a channel and none was supplied."""

    kind = "no session"


class ExpansionError(ChanvarError):
    """Variable expansion failed (circular or too deeply nested references)."""

    kind = "expansion error"
