"""Exceptions raised by the plugin core."""


class PluginError(Exception):
    """Base class for plugin errors."""


class ConnectError(PluginError):
    """The host's plugin endpoint could not be reached."""


class DecodeError(PluginError):
    """An inbound frame is not valid JSON or is not a well-formed event."""


class MissingFieldError(DecodeError):
    """A recognized event lacks a field its handler requires."""

    def __init__(self, event: str, field: str):
        super().__init__(f"'{event}' event is missing required field '{field}'")
        self.event = event
        self.field = field


class SendError(PluginError):
    """A frame could not be written because the socket is not open."""
