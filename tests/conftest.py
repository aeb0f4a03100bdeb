"""
Pytest configuration for the counter plugin test suite.

This file contains fixtures that are shared across multiple test files.
"""

import json
import logging
from typing import List, Optional

import pytest

from deckcounter.config.models import LoggingConfig, PluginConfig
from deckcounter.exceptions import SendError

COUNTER_ACTION_ID = "com.yourname.counter.action"


class FakeTransport:
    """In-memory stand-in for PluginTransport.

    Inbound frames are queued up front; everything sent is recorded.
    """

    def __init__(self, frames: Optional[List[str]] = None):
        self.inbound = list(frames or [])
        self.sent: List[str] = []
        self.connected = False
        self.closed = False
        self.fail_sends = False

    @property
    def is_open(self) -> bool:
        return self.connected and not self.closed

    async def connect(self) -> None:
        self.connected = True

    async def send(self, frame: str) -> None:
        if self.fail_sends or not self.is_open:
            raise SendError("Cannot send: socket is not open")
        self.sent.append(frame)

    async def receive(self) -> Optional[str]:
        if not self.inbound:
            return None
        return self.inbound.pop(0)

    async def frames(self):
        while True:
            frame = await self.receive()
            if frame is None:
                return
            yield frame

    async def close(self) -> None:
        self.closed = True

    @property
    def sent_json(self) -> List[dict]:
        return [json.loads(frame) for frame in self.sent]


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset logging configuration before each test"""
    logger = logging.getLogger("deckcounter")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.propagate = True
    yield


@pytest.fixture
def plugin_config(tmp_path):
    """Create a PluginConfig for a host on an arbitrary port."""
    return PluginConfig(
        port=28196,
        plugin_uuid="6C1F0A1E-3C4B-4E0C-9C1F-0A1E3C4B4E0C",
        register_event="registerPlugin",
        info='{"application": {"version": "6.0"}}',
        counter_action=COUNTER_ACTION_ID,
        logging=LoggingConfig(log_dir=str(tmp_path / "logs"), file_logging=False),
    )


@pytest.fixture
def fake_transport():
    """Create a connected FakeTransport with no queued frames."""
    transport = FakeTransport()
    transport.connected = True
    return transport


def make_event(event, context="ctx-1", action=COUNTER_ACTION_ID, payload=None) -> str:
    """Build an inbound frame, leaving out fields passed as None."""
    data = {"event": event}
    if context is not None:
        data["context"] = context
    if action is not None:
        data["action"] = action
    if payload is not None:
        data["payload"] = payload
    return json.dumps(data)


@pytest.fixture
def event_frame():
    """Factory for inbound event frames."""
    return make_event
