"""
Counter plugin for a host application's plugin WebSocket protocol.

The plugin keeps one counter per button, increments it on key presses, shows
it as the button title and lets the host persist it through settings.
"""

from deckcounter.codec import decode, encode
from deckcounter.config.models import PluginConfig
from deckcounter.exceptions import (
    ConnectError,
    DecodeError,
    MissingFieldError,
    PluginError,
    SendError,
)
from deckcounter.plugin import CounterPlugin
from deckcounter.state_store import CounterStore
from deckcounter.transport import PluginTransport

__version__ = "0.1.0"

__all__ = [
    "ConnectError",
    "CounterPlugin",
    "CounterStore",
    "DecodeError",
    "MissingFieldError",
    "PluginConfig",
    "PluginError",
    "PluginTransport",
    "SendError",
    "decode",
    "encode",
]
