"""
Counter plugin session.

Ties the transport, codec, counter store and event router together for one
connection to the host: connect, register, then process frames one at a time
until the host closes the socket.
"""

import logging
from typing import Optional

from deckcounter.codec import decode, encode
from deckcounter.config.constants import LOGGER_NAME
from deckcounter.config.models import PluginConfig
from deckcounter.exceptions import DecodeError, SendError
from deckcounter.handlers.counter_action import CounterAction
from deckcounter.handlers.error_handler import ErrorContext, ErrorHandler, ErrorSeverity
from deckcounter.handlers.event_router import EventRouter
from deckcounter.models.plugin_api import PluginCommand, RegisterCommand
from deckcounter.state_store import CounterStore
from deckcounter.transport import PluginTransport


class CounterPlugin:
    """
    One plugin session against the host application.

    Attributes:
        config (PluginConfig): Startup parameters and settings
        transport (PluginTransport): Connection to the host
        store (CounterStore): Counter values by context
        error_handler (ErrorHandler): Collects per-frame failures
        router (EventRouter): Dispatches decoded events
        frames_processed (int): Frames decoded and dispatched
        frames_dropped (int): Frames that failed to decode
    """

    def __init__(
        self,
        config: PluginConfig,
        transport: Optional[PluginTransport] = None,
        store: Optional[CounterStore] = None,
        error_handler: Optional[ErrorHandler] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.config = config
        self.logger = logger or logging.getLogger(LOGGER_NAME)
        self.transport = transport or PluginTransport(
            config.get_websocket_url(), open_timeout=config.open_timeout
        )
        self.store = store or CounterStore()
        self.error_handler = error_handler or ErrorHandler()
        self.router = EventRouter(self.error_handler)
        self.counter_action = CounterAction(
            self.store, self.send_command, config.counter_action
        )
        self.counter_action.register(self.router)
        self.frames_processed = 0
        self.frames_dropped = 0

    async def run(self) -> None:
        """
        Connect, register and process events until the host disconnects.

        Raises:
            ConnectError: If the host endpoint cannot be reached
        """
        await self.transport.connect()
        try:
            await self.register()
            async for frame in self.transport.frames():
                await self.handle_frame(frame)
        finally:
            await self.transport.close()
            self.logger.info(
                f"Session ended: {self.frames_processed} frames processed, "
                f"{self.frames_dropped} dropped, {len(self.store)} counters, "
                f"errors: {self.error_handler.summary()}"
            )

    async def register(self) -> bool:
        """Send the registration command the host asked for."""
        self.logger.info(
            f"Registering plugin {self.config.plugin_uuid} via {self.config.register_event}"
        )
        return await self.send_command(
            RegisterCommand(
                event=self.config.register_event, uuid=self.config.plugin_uuid
            )
        )

    async def handle_frame(self, frame: str) -> None:
        """Decode one frame and route it. Never raises for a bad frame."""
        try:
            event = decode(frame)
        except DecodeError as e:
            self.frames_dropped += 1
            self.error_handler.handle_error(
                e,
                ErrorContext.CODEC,
                ErrorSeverity.MEDIUM,
                operation="decode",
            )
            return

        self.frames_processed += 1
        await self.router.dispatch(event)

    async def send_command(self, command: PluginCommand) -> bool:
        """
        Encode and send a command.

        Returns:
            bool: True if the frame was written, False if it was lost
        """
        try:
            await self.transport.send(encode(command))
        except SendError as e:
            self.error_handler.handle_error(
                e,
                ErrorContext.SEND,
                ErrorSeverity.HIGH,
                operation="send",
                command=type(command).__name__,
            )
            return False
        return True
