"""
Pydantic models for the host application's plugin WebSocket protocol.

This module defines structured data models for the incoming events and
outgoing commands the counter plugin exchanges with the host, providing type
validation and documentation.

The communication flow involves:
1. The host launches the plugin with a port, a plugin UUID and the name of the
   registration event
2. The plugin opens ``ws://localhost:<port>`` and sends the registration command
3. The host streams JSON events (key presses, appearance, settings) to the plugin
4. The plugin answers with JSON commands (set title, get/set settings)

Only ``event`` is required on an inbound frame. The payload is kept as raw
JSON and only validated by the handler that reads it, so events the plugin
ignores are never rejected for their payload. Outbound fields that are
``None`` are left out of the serialized frame rather than sent as ``null``.
"""

import enum
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class PluginEventType(str, enum.Enum):
    """Inbound event names the counter plugin reacts to.

    Any other event name is treated as unrecognized and ignored.
    """

    KEY_DOWN = "keyDown"
    WILL_APPEAR = "willAppear"
    DID_RECEIVE_SETTINGS = "didReceiveSettings"


class CommandType(str, enum.Enum):
    """Outbound command names sent by the plugin."""

    GET_SETTINGS = "getSettings"
    SET_SETTINGS = "setSettings"
    SET_TITLE = "setTitle"


# Inbound events
class CounterSettings(BaseModel):
    """Per-context settings persisted by the host on the plugin's behalf."""

    model_config = ConfigDict(frozen=True)

    count: Optional[int] = Field(None, ge=0, description="Persisted counter value")


class EventPayload(BaseModel):
    """Payload of a didReceiveSettings event.

    The host sends more keys than the plugin uses (coordinates, state,
    isInMultiAction...); those are ignored.
    """

    model_config = ConfigDict(frozen=True)

    settings: Optional[CounterSettings] = Field(
        None, description="Settings stored for the context"
    )


class PluginEvent(BaseModel):
    """An inbound event frame.

    Example:
    {
      "event": "didReceiveSettings",
      "action": "com.yourname.counter.action",
      "context": "A1B2C3",
      "device": "D1",
      "payload": {"settings": {"count": 7}, "coordinates": {"column": 0, "row": 1}}
    }
    """

    model_config = ConfigDict(frozen=True)

    event: str = Field(..., description="Event name")
    context: Optional[str] = Field(
        None, description="Opaque identifier of the control instance"
    )
    action: Optional[str] = Field(None, description="Action identifier of the control")
    payload: Optional[Any] = Field(None, description="Raw event payload")

    @property
    def event_type(self) -> Optional[PluginEventType]:
        """The recognized event type, or None for any other event name."""
        try:
            return PluginEventType(self.event)
        except ValueError:
            return None


# Outbound commands
class PluginCommand(BaseModel):
    """Base model for all outbound commands."""

    event: str = Field(..., description="Command name")


class RegisterCommand(PluginCommand):
    """Registration command sent once, immediately after connecting.

    The event name is supplied by the host at launch.

    Example:
    {"event": "registerPlugin", "uuid": "6C1F0A1E..."}
    """

    uuid: str = Field(..., description="Plugin UUID assigned by the host")


class GetSettingsCommand(PluginCommand):
    """Ask the host for the settings persisted for a context.

    The host answers with a didReceiveSettings event.
    """

    event: Literal[CommandType.GET_SETTINGS] = CommandType.GET_SETTINGS
    context: str = Field(..., description="Context to fetch settings for")


class SettingsPayload(BaseModel):
    """Settings stored for the counter action."""

    count: Optional[int] = Field(None, ge=0, description="Counter value to persist")


class SetSettingsCommand(PluginCommand):
    """Persist settings for a context.

    Example:
    {"event": "setSettings", "context": "A1B2C3", "payload": {"count": 3}}
    """

    event: Literal[CommandType.SET_SETTINGS] = CommandType.SET_SETTINGS
    context: str = Field(..., description="Context the settings belong to")
    payload: SettingsPayload


class TitlePayload(BaseModel):
    """Title to display on a control."""

    title: Optional[str] = Field(None, description="Title text")
    target: int = Field(0, description="0 updates both the hardware and software key")


class SetTitleCommand(PluginCommand):
    """Set the title shown on a control.

    Example:
    {"event": "setTitle", "context": "A1B2C3", "payload": {"title": "3", "target": 0}}
    """

    event: Literal[CommandType.SET_TITLE] = CommandType.SET_TITLE
    context: str = Field(..., description="Context to retitle")
    payload: TitlePayload
