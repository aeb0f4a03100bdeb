"""Event dispatch and error reporting for the plugin."""

from .counter_action import CounterAction
from .error_handler import ErrorContext, ErrorHandler, ErrorSeverity
from .event_router import EventRouter

__all__ = [
    "CounterAction",
    "ErrorContext",
    "ErrorHandler",
    "ErrorSeverity",
    "EventRouter",
]
