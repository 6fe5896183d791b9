"""Shared fixtures for chanvar tests."""

from typing import Generator
import pytest
from chanvar.lib import channel as channel_module
from chanvar.lib.channel import Channel, channel_activate


@pytest.fixture(autouse=True)
def channel() -> Generator[Channel, None, None]:
    """Provides a fresh active channel for every test."""
    previous = channel_module._active_channel
    yield channel_activate(Channel(name="test/channel"))
    channel_module._active_channel = previous
