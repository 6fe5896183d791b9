"""Tests for the in-memory channel."""

import pytest
from chanvar.lib import channel as channel_module
from chanvar.lib.channel import Channel, channel_activate, channel_active
from chanvar.lib.errors import ExpansionError


def test_new_channel() -> None:
    channel = Channel(name="sofia/internal", variables={"a": "1"})
    assert channel.name == "sofia/internal"
    assert channel.uuid.endswith("-sofia_internal")
    assert channel.value_get("a") == "1"
    assert channel.value_get("b") is None


def test_channels_have_distinct_ids() -> None:
    assert Channel().uuid != Channel().uuid


def test_initial_variables_are_copied() -> None:
    initial: dict[str, str] = {"a": "1"}
    channel = Channel(variables=initial)
    channel.store_raw("a", "2")
    assert initial == {"a": "1"}


def test_store_raw_and_unset(channel: Channel) -> None:
    channel.store_raw("x", "value")
    assert channel.value_get("x") == "value"
    channel.store_raw("x", None)
    assert channel.value_get("x") is None
    channel.store_raw("never", None)


def test_store_pushed_builds_array(channel: Channel) -> None:
    channel.store_pushed("arr", "a")
    assert channel.value_get("arr") == "a"
    channel.store_pushed("arr", "b")
    assert channel.value_get("arr") == "ARRAY::a|:b"
    channel.store_pushed("arr", "c")
    assert channel.value_get("arr") == "ARRAY::a|:b|:c"
    assert channel.array_get("arr") == ["a", "b", "c"]


def test_array_get_plain_and_unset(channel: Channel) -> None:
    channel.store_raw("plain", "only")
    assert channel.array_get("plain") == ["only"]
    assert channel.array_get("unset") == []


def test_variable_delete(channel: Channel) -> None:
    channel.store_raw("x", "1")
    assert channel.variable_delete("x")
    assert not channel.variable_delete("x")


def test_expand_one(channel: Channel) -> None:
    channel.store_raw("first", "Ada")
    channel.store_raw("full", "${first} ${last}")
    assert channel.expand_one("plain text") == "plain text"
    assert channel.expand_one("Hi ${full}!") == "Hi Ada !"
    assert channel.expand_one(r"\${first}") == "${first}"


def test_expand_one_circular(channel: Channel) -> None:
    channel.store_raw("a", "${b}")
    channel.store_raw("b", "${a}")
    with pytest.raises(ExpansionError, match="circular"):
        channel.expand_one("${a}")


def test_channel_active_creates_default() -> None:
    channel_module._active_channel = None
    created: Channel = channel_active()
    assert created.name == "chanvar/local"
    assert channel_active() is created


def test_channel_activate() -> None:
    replacement = Channel(name="other")
    assert channel_activate(replacement) is replacement
    assert channel_active() is replacement
