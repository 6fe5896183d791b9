"""Tests for the channel variable resolver."""

import pytest
from chanvar.lib.parser import BaseTokenParser, ChannelVariableResolver


@pytest.fixture
def variables() -> dict[str, str]:
    return {
        "name": "world",
        "greeting": "hello ${name}",
        "outer": "<${greeting}>",
        "self": "x${self}",
        "ping": "${pong}",
        "pong": "${ping}",
    }


@pytest.fixture
def resolver(variables: dict[str, str]) -> ChannelVariableResolver:
    return ChannelVariableResolver(variables.get)


def test_simple_lookup(resolver: ChannelVariableResolver) -> None:
    result = resolver.resolve("name")
    assert result.success
    assert result.text == "world"


def test_unset_variable_is_empty(resolver: ChannelVariableResolver) -> None:
    result = resolver.resolve("missing")
    assert result.success
    assert result.text == ""


def test_nested_references(resolver: ChannelVariableResolver) -> None:
    assert resolver.resolve("outer").text == "<hello world>"


@pytest.mark.parametrize("name", ["self", "ping"])
def test_circular_reference(resolver: ChannelVariableResolver, name: str) -> None:
    result = resolver.resolve(name)
    assert not result.success
    assert "circular reference" in result.error


def test_state_is_reset_after_resolution(resolver: ChannelVariableResolver) -> None:
    resolver.resolve("self")
    assert resolver.current_depth == 0
    assert resolver.seen_vars == set()
    assert resolver.resolve("name").text == "world"


def test_depth_limit() -> None:
    chain: dict[str, str] = {f"v{i}": f"${{v{i + 1}}}" for i in range(5)}
    chain["v5"] = "end"
    assert ChannelVariableResolver(chain.get, max_depth=10).resolve("v0").text == "end"
    assert not ChannelVariableResolver(chain.get, max_depth=3).resolve("v0").success


def test_with_parser(resolver: ChannelVariableResolver) -> None:
    result = BaseTokenParser(resolver=resolver).parse("${greeting}, ${missing}!")
    assert result.text == "hello world, !"
