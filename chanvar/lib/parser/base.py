r"""
Base parser implementation for variable reference expansion.

Provides a generic parsing engine that replaces `${name}` style references
using configurable resolvers. Supports escaped references and custom
resolution strategies.

The parser handles:
- Delimited references with configurable open and close tokens
- Escape sequences for literal references (\${name} stays as ${name})
- Resolver strategy pattern for looking up reference values
- Error propagation from resolvers

Example:
    parser = BaseTokenParser(resolver=ChannelVariableResolver(channel.value_get))
    result = parser.parse("Calling ${caller_id_number}")
"""

from typing import Protocol, runtime_checkable, Self
from chanvar.models.dataModel import ParseResult
from chanvar.lib.log import LOG


@runtime_checkable
class TokenResolver(Protocol):
    """Protocol defining the resolver interface for reference expansion.

    Resolvers must implement the resolve method and return ParseResult
    objects containing either the resolved value or error details.
    """

    def resolve(self: Self, token_value: str) -> ParseResult:
        """Resolve a reference name to its substitution.

        Args:
            token_value: Reference name, without the enclosing tokens

        Returns:
            ParseResult containing:
                - text: Resolved value if successful
                - error: Error message if resolution failed
                - success: Whether resolution succeeded
        """
        ...


class BaseTokenParser:
    """Generic reference parser using resolver strategy.

    Attributes:
        open_token: Marker that starts a reference (e.g. "${")
        close_token: Marker that ends a reference (e.g. "}")
        resolver: Strategy for resolving reference names
        escape_char: Character used for escaping references
    """

    def __init__(
        self: Self,
        resolver: TokenResolver,
        open_token: str = "${",
        close_token: str = "}",
        escape_char: str = "\\",
    ) -> None:
        """Initialize parser with token configuration.

        Raises:
            ValueError: If a token or escape_char is empty
        """
        if not open_token or not close_token or not escape_char:
            raise ValueError("Tokens and escape character cannot be empty")

        self.open_token: str = open_token
        self.close_token: str = close_token
        self.resolver: TokenResolver = resolver
        self.escape_char: str = escape_char

    def parse(self: Self, input_text: str) -> ParseResult:
        """Parse input text and process all reference substitutions.

        Args:
            input_text: Raw input string containing references

        Returns:
            ParseResult with processed text or error details
        """
        try:
            if not input_text:
                return ParseResult(text="", error=None, success=True)

            return self._process_tokens(input_text)
        except Exception as e:
            LOG(f"Error in parse: {e}", level="ERROR")
            return ParseResult(text="", error=str(e), success=False)

    def _process_tokens(self: Self, text: str) -> ParseResult:
        """Split on escaped references and process substitutions.

        Text following an escaped open token keeps that token literally; only
        references after it are substituted.
        """
        parts: list[str] = text.split(f"{self.escape_char}{self.open_token}")
        result: list[str] = []

        for i, part in enumerate(parts):
            processed: str | ParseResult = self._substitute_tokens(part)
            if isinstance(processed, ParseResult):
                return processed  # Propagate error
            if i > 0:  # Parts after escaped token
                result.append(self.open_token + processed)
            else:
                result.append(processed)

        return ParseResult(text="".join(result), error=None, success=True)

    def _substitute_tokens(self: Self, text: str) -> str | ParseResult:
        """Substitute every complete reference in one segment.

        Returns:
            Either:
                - str: Successfully processed text
                - ParseResult: Error details if resolution failed

        Note:
            An open token without a close token is left as is, and so
            is an empty reference.
        """
        if self.open_token not in text:
            return text

        result: list[str] = []
        pos: int = 0
        while True:
            start: int = text.find(self.open_token, pos)
            if start == -1:
                break
            name_start: int = start + len(self.open_token)
            end: int = text.find(self.close_token, name_start)
            if end == -1:
                break

            result.append(text[pos:start])
            token_value: str = text[name_start:end].strip()
            if token_value:
                resolve_result: ParseResult = self.resolver.resolve(token_value)
                if not resolve_result.success:
                    return resolve_result
                result.append(resolve_result.text)
            else:
                result.append(text[start : end + len(self.close_token)])
            pos = end + len(self.close_token)

        result.append(text[pos:])
        return "".join(result)
