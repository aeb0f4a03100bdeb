"""Event router for inbound plugin events.

Handlers are registered per event type and run to completion, one event at a
time, in the order frames arrive. This keeps every read-modify-send sequence
for a context from interleaving with the next event for the same context.
"""

import asyncio
import logging
from typing import Callable, Dict, List, Optional

from deckcounter.config.constants import LOGGER_NAME
from deckcounter.exceptions import DecodeError
from deckcounter.handlers.error_handler import ErrorContext, ErrorHandler, ErrorSeverity
from deckcounter.models.plugin_api import PluginEvent, PluginEventType

logger = logging.getLogger(f"{LOGGER_NAME}.router")


class EventRouter:
    """Routes decoded events to the handlers registered for their type.

    Attributes:
        handlers (Dict[PluginEventType, List[Callable]]): Handlers in registration order
        error_handler (ErrorHandler): Receives exceptions raised by handlers
    """

    def __init__(self, error_handler: Optional[ErrorHandler] = None):
        self.handlers: Dict[PluginEventType, List[Callable]] = {}
        self.error_handler = error_handler or ErrorHandler()

    def register_handler(self, event_type: PluginEventType, handler: Callable) -> None:
        """Register a sync or async handler taking the PluginEvent."""
        self.handlers.setdefault(event_type, []).append(handler)
        logger.debug(f"Registered handler for event type: {event_type.value}")

    async def dispatch(self, event: PluginEvent) -> None:
        """Run every handler registered for the event's type.

        Unrecognized event names are ignored.
        """
        event_type = event.event_type
        if event_type is None:
            logger.debug(f"Ignoring unrecognized event: {event.event}")
            return

        handlers = self.handlers.get(event_type, [])
        if not handlers:
            logger.debug(f"No handler for event type: {event_type.value}")
            return

        logger.debug(f"Dispatching {event_type.value} for context {event.context}")
        for handler in handlers:
            try:
                if asyncio.iscoroutinefunction(handler):
                    await handler(event)
                else:
                    handler(event)
            except DecodeError as e:
                self.error_handler.handle_error(
                    e,
                    ErrorContext.CODEC,
                    ErrorSeverity.MEDIUM,
                    operation=f"handle_{event_type.value}",
                    context_id=event.context,
                )
            except Exception as e:
                self.error_handler.handle_error(
                    e,
                    ErrorContext.HANDLER,
                    ErrorSeverity.HIGH,
                    operation=f"handle_{event_type.value}",
                    context_id=event.context,
                )
