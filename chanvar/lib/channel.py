"""
In-memory channel for chanvar.

A channel is the host-side collaborator the applications operate on: it
stores variables, appends "pushed" values and expands `${name}` references.

Pushed values use the array encoding `ARRAY::first|:second|:third`. Pushing
onto an unset variable stores the plain value; pushing onto a plain value
turns it into an array.

Usage:
    from chanvar.lib.channel import channel_active
    channel = channel_active()
    channel.store_pushed("dest", "1000")
"""

from typing import Final, Optional
from chanvar.config.settings import appsettings
from chanvar.lib.errors import ExpansionError
from chanvar.lib.log import LOG
from chanvar.lib.parser import BaseTokenParser, ChannelVariableResolver
from chanvar.lib.session import channelUUID_generate
from chanvar.models.dataModel import ParseResult

ARRAY_PREFIX: Final[str] = "ARRAY::"
ARRAY_SEPARATOR: Final[str] = "|:"


class Channel:
    """Variable store with push semantics and reference expansion.

    Attributes:
        name: Human readable channel name
        uuid: Unique channel identifier
        variables: Raw variable values by name
    """

    def __init__(
        self, name: str = "chanvar/local", variables: Optional[dict[str, str]] = None
    ) -> None:
        self.name: str = name
        self.uuid: str = channelUUID_generate(name)
        self.variables: dict[str, str] = dict(variables or {})

    def value_get(self, name: str) -> str | None:
        return self.variables.get(name)

    def store_raw(self, name: str, value: str | None) -> None:
        """Set a variable, or unset it when value is None."""
        LOG(f"SET {self.name} [{name}]=[{value if value is not None else 'UNDEF'}]")
        if value is None:
            self.variables.pop(name, None)
        else:
            self.variables[name] = value

    def store_pushed(self, name: str, value: str) -> None:
        """Append value to the array held by name."""
        current: str | None = self.variables.get(name)
        LOG(f"PUSH {self.name} [{name}]=[{value}]")
        if current is None:
            self.variables[name] = value
        elif current.startswith(ARRAY_PREFIX):
            self.variables[name] = f"{current}{ARRAY_SEPARATOR}{value}"
        else:
            self.variables[name] = f"{ARRAY_PREFIX}{current}{ARRAY_SEPARATOR}{value}"

    def array_get(self, name: str) -> list[str]:
        """Items of an array variable; a plain value is a one item array."""
        current: str | None = self.variables.get(name)
        if current is None:
            return []
        if not current.startswith(ARRAY_PREFIX):
            return [current]
        return current[len(ARRAY_PREFIX) :].split(ARRAY_SEPARATOR)

    def variable_delete(self, name: str) -> bool:
        """Unset name; returns False if it was not set."""
        return self.variables.pop(name, None) is not None

    def expand_one(self, raw: str) -> str:
        """Expand every ${name} reference in raw.

        Raises:
            ExpansionError: On circular or too deeply nested references
        """
        if "${" not in raw:
            return raw
        resolver = ChannelVariableResolver(self.value_get, appsettings.expand_depth)
        result: ParseResult = BaseTokenParser(resolver=resolver).parse(raw)
        if not result.success:
            raise ExpansionError(result.error or f"Cannot expand '{raw}'")
        return result.text


# Channel used by the command line front end
_active_channel: Optional[Channel] = None


def channel_active() -> Channel:
    """Return the channel commands operate on, creating it on first use."""
    global _active_channel
    if _active_channel is None:
        _active_channel = Channel()
    return _active_channel


def channel_activate(channel: Channel) -> Channel:
    """Make channel the one commands operate on."""
    global _active_channel
    _active_channel = channel
    return channel
