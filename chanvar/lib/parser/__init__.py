"""
Parser package for chanvar variable expansion.

Provides a modular system for `${name}` reference substitution using
configurable resolvers.
"""

from .base import BaseTokenParser, TokenResolver
from .resolvers import ChannelVariableResolver

__all__ = ["BaseTokenParser", "TokenResolver", "ChannelVariableResolver"]
