"""Wire models for the host plugin protocol."""

from .plugin_api import (
    CommandType,
    CounterSettings,
    EventPayload,
    GetSettingsCommand,
    PluginCommand,
    PluginEvent,
    PluginEventType,
    RegisterCommand,
    SetSettingsCommand,
    SettingsPayload,
    SetTitleCommand,
    TitlePayload,
)

__all__ = [
    "CommandType",
    "CounterSettings",
    "EventPayload",
    "GetSettingsCommand",
    "PluginCommand",
    "PluginEvent",
    "PluginEventType",
    "RegisterCommand",
    "SetSettingsCommand",
    "SettingsPayload",
    "SetTitleCommand",
    "TitlePayload",
]
