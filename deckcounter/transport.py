"""
WebSocket transport to the host application.

Owns exactly one client connection. Frames are exposed as an async iterator
that ends when the socket closes; there is no reconnection, the host restarts
the plugin process if it needs to.
"""

import asyncio
import logging
from typing import AsyncIterator, Optional

import websockets
from websockets.exceptions import (
    ConnectionClosed,
    ConnectionClosedOK,
    WebSocketException,
)
from websockets.protocol import State

from deckcounter.config.constants import DEFAULT_OPEN_TIMEOUT, LOGGER_NAME
from deckcounter.exceptions import ConnectError, SendError


class PluginTransport:
    """
    Client WebSocket connection to the host's plugin endpoint.

    Attributes:
        url (str): Endpoint URL, ``ws://localhost:<port>``
        open_timeout (float): Seconds allowed for the opening handshake
        logger (logging.Logger): Logger instance for diagnostics
    """

    def __init__(
        self,
        url: str,
        open_timeout: float = DEFAULT_OPEN_TIMEOUT,
        logger: Optional[logging.Logger] = None,
    ):
        self.url = url
        self.open_timeout = open_timeout
        self.logger = logger or logging.getLogger(f"{LOGGER_NAME}.transport")
        self._ws = None

    @property
    def is_open(self) -> bool:
        """True while the socket can carry frames."""
        return self._ws is not None and self._ws.state is State.OPEN

    async def connect(self) -> None:
        """
        Open the connection.

        Raises:
            ConnectError: If the endpoint is unreachable or the handshake fails
        """
        try:
            self._ws = await websockets.connect(
                self.url, open_timeout=self.open_timeout
            )
        except (OSError, asyncio.TimeoutError, WebSocketException) as e:
            raise ConnectError(f"Failed to connect to {self.url}: {e}") from e
        self.logger.info(f"Connected to host at {self.url}")

    async def send(self, frame: str) -> None:
        """
        Write one text frame.

        Raises:
            SendError: If the socket is not open or closes mid-send
        """
        if not self.is_open:
            raise SendError("Cannot send: socket is not open")
        try:
            await self._ws.send(frame)
        except ConnectionClosed as e:
            raise SendError(f"Socket closed while sending: {e}") from e
        self.logger.debug(f"Sent frame: {frame}")

    async def receive(self) -> Optional[str]:
        """
        Wait for the next text frame.

        Binary frames are not part of the protocol and are skipped.

        Returns:
            Optional[str]: The frame, or None once the socket has closed
        """
        if self._ws is None:
            return None
        while True:
            try:
                message = await self._ws.recv()
            except ConnectionClosedOK:
                self.logger.info("Host closed the connection")
                return None
            except ConnectionClosed as e:
                self.logger.warning(f"Connection lost: {e}")
                return None

            if isinstance(message, (bytes, bytearray)):
                self.logger.debug(f"Skipping binary frame of {len(message)} bytes")
                continue
            self.logger.debug(f"Received frame: {message}")
            return message

    async def frames(self) -> AsyncIterator[str]:
        """Yield text frames in arrival order until the socket closes."""
        while True:
            frame = await self.receive()
            if frame is None:
                return
            yield frame

    async def close(self) -> None:
        """Close the connection if it is still open."""
        if self._ws is None:
            return
        if self._ws.state is not State.CLOSED:
            try:
                await self._ws.close()
            except WebSocketException as e:
                self.logger.warning(f"Error while closing connection: {e}")
        self.logger.info("Connection closed")
