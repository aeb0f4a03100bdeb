"""
Handlers for the counter action.

Each press of a counter button adds one to the count for that button, shows
the new value as the button title and asks the host to persist it. When a
button appears the plugin asks for the persisted value; the answer arrives
as didReceiveSettings and becomes the current count.
"""

import logging
from typing import Awaitable, Callable

from pydantic import ValidationError

from deckcounter.config.constants import LOGGER_NAME
from deckcounter.exceptions import DecodeError, MissingFieldError
from deckcounter.handlers.event_router import EventRouter
from deckcounter.models.plugin_api import (
    EventPayload,
    GetSettingsCommand,
    PluginCommand,
    PluginEvent,
    PluginEventType,
    SetSettingsCommand,
    SettingsPayload,
    SetTitleCommand,
    TitlePayload,
)
from deckcounter.state_store import CounterStore

logger = logging.getLogger(f"{LOGGER_NAME}.counter")

CommandSender = Callable[[PluginCommand], Awaitable[bool]]


def _require_context(event: PluginEvent) -> str:
    if event.context is None:
        raise MissingFieldError(event.event, "context")
    return event.context


def _require_action(event: PluginEvent) -> str:
    if event.action is None:
        raise MissingFieldError(event.event, "action")
    return event.action


def settings_count(event: PluginEvent) -> int:
    """
    Read ``payload.settings.count`` from an event.

    Returns:
        int: The count, or 0 if the payload, settings or count is absent

    Raises:
        DecodeError: If the payload is present but the count is not a non-negative integer
    """
    if event.payload is None:
        return 0
    try:
        payload = EventPayload.model_validate(event.payload)
    except ValidationError as e:
        raise DecodeError(
            f"Malformed settings in '{event.event}' for {event.context}: "
            f"{e.error_count()} validation error(s)"
        ) from e
    if payload.settings is None or payload.settings.count is None:
        return 0
    return payload.settings.count


class CounterAction:
    """
    Event handlers for counter buttons.

    Attributes:
        store (CounterStore): Counter values by context
        send (CommandSender): Coroutine that delivers a command, returning False on failure
        action_id (str): Action identifier the key and appear handlers respond to
    """

    def __init__(self, store: CounterStore, send: CommandSender, action_id: str):
        self.store = store
        self.send = send
        self.action_id = action_id

    def register(self, router: EventRouter) -> None:
        """Register the counter handlers on a router."""
        router.register_handler(PluginEventType.KEY_DOWN, self.handle_key_down)
        router.register_handler(PluginEventType.WILL_APPEAR, self.handle_will_appear)
        router.register_handler(
            PluginEventType.DID_RECEIVE_SETTINGS, self.handle_did_receive_settings
        )

    async def handle_key_down(self, event: PluginEvent) -> None:
        context = _require_context(event)
        if _require_action(event) != self.action_id:
            return

        count = self.store.increment(context)
        logger.info(f"Counter {context} pressed, count is now {count}")

        # Title first so the button reacts before the value is persisted
        await self._send_title(context, count)
        await self.send(
            SetSettingsCommand(context=context, payload=SettingsPayload(count=count))
        )

    async def handle_will_appear(self, event: PluginEvent) -> None:
        context = _require_context(event)
        if _require_action(event) != self.action_id:
            return

        logger.debug(f"Counter {context} appeared, requesting settings")
        await self.send(GetSettingsCommand(context=context))

    async def handle_did_receive_settings(self, event: PluginEvent) -> None:
        """Adopt the persisted count for a context and show it.

        Applied whatever the event's action is.
        """
        context = _require_context(event)
        count = settings_count(event)
        self.store.set(context, count)
        logger.info(f"Counter {context} restored to {count}")

        await self._send_title(context, count)

    async def _send_title(self, context: str, count: int) -> bool:
        return await self.send(
            SetTitleCommand(context=context, payload=TitlePayload(title=str(count)))
        )
