"""
JSON codec for plugin protocol frames.

Outbound commands are serialized with ``None`` fields dropped at every level;
inbound text is parsed into a :class:`PluginEvent`, with any failure surfaced
as :class:`DecodeError`.
"""

import json

from pydantic import ValidationError

from deckcounter.exceptions import DecodeError
from deckcounter.models.plugin_api import PluginCommand, PluginEvent


def encode(command: PluginCommand) -> str:
    """Serialize a command to JSON text, omitting null fields."""
    return command.model_dump_json(exclude_none=True)


def decode(text: str) -> PluginEvent:
    """
    Parse an inbound frame.

    Args:
        text: Raw frame text

    Returns:
        PluginEvent: The decoded event

    Raises:
        DecodeError: If the text is not JSON, not an object, or lacks a string ``event``
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(f"Invalid JSON frame: {e}") from e

    if not isinstance(data, dict):
        raise DecodeError(f"Expected a JSON object, got {type(data).__name__}")

    try:
        return PluginEvent.model_validate(data)
    except ValidationError as e:
        raise DecodeError(
            f"Malformed '{data.get('event', '<no event>')}' frame: "
            f"{e.error_count()} validation error(s)"
        ) from e
