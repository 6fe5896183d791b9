"""
Reference resolvers for chanvar.

Implements the resolution strategy for `${name}` references: channel
variable lookup with recursion handling. Variables whose value holds further
references are expanded in turn, up to a maximum depth.
"""

from typing import Callable, Set, Self
from chanvar.lib.log import LOG
from chanvar.lib.parser.base import BaseTokenParser
from chanvar.models.dataModel import ParseResult


class ChannelVariableResolver:
    """Resolver for variable references backed by a channel lookup."""

    def __init__(
        self: Self, lookup: Callable[[str], str | None], max_depth: int = 10
    ) -> None:
        """Initialize resolver with a lookup function and recursion limit.

        Args:
            lookup: Returns the raw value of a variable, None if unset
            max_depth: Maximum nesting of references inside values
        """
        self.lookup: Callable[[str], str | None] = lookup
        self.max_depth: int = max_depth
        self.current_depth: int = 0
        self.seen_vars: Set[str] = set()

    def resolve(self: Self, token_value: str) -> ParseResult:
        """Resolve a variable to its expanded value.

        Unset variables expand to the empty string.

        Args:
            token_value: Variable name to resolve

        Returns:
            ParseResult containing resolved value or error details
        """
        if self.current_depth >= self.max_depth or token_value in self.seen_vars:
            msg: str = f"Max depth exceeded or circular reference: {token_value}"
            LOG(msg, level="WARNING")
            return ParseResult(text="", error=msg, success=False)

        try:
            self.seen_vars.add(token_value)
            self.current_depth += 1

            value: str | None = self.lookup(token_value)
            if value is None:
                LOG(f"Variable {token_value} is not set, expanding to ''")
                return ParseResult(text="", error=None, success=True)

            # If value contains references, recursively resolve them
            if "${" in value:
                parser = BaseTokenParser(resolver=self)
                nested_result: ParseResult = parser.parse(value)
                if not nested_result.success:
                    return nested_result
                value = nested_result.text

            return ParseResult(text=value, error=None, success=True)

        finally:
            self.current_depth -= 1
            self.seen_vars.remove(token_value)
