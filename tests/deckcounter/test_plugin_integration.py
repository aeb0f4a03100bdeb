"""
End-to-end test against a real local WebSocket server playing the host.
"""

import asyncio
import json

import pytest
import websockets

from deckcounter.config.models import LoggingConfig, PluginConfig
from deckcounter.plugin import CounterPlugin

ACTION = "com.yourname.counter.action"


@pytest.mark.integration
@pytest.mark.asyncio
async def test_session_against_local_host():
    received = []

    async def host(websocket):
        received.append(json.loads(await websocket.recv()))

        await websocket.send(json.dumps({"event": "keyDown", "context": "K", "action": ACTION}))
        received.append(json.loads(await websocket.recv()))
        received.append(json.loads(await websocket.recv()))

        await websocket.send("{not json")
        await websocket.send(
            json.dumps(
                {
                    "event": "didReceiveSettings",
                    "context": "K",
                    "action": ACTION,
                    "payload": {"settings": {"count": 7}},
                }
            )
        )
        received.append(json.loads(await websocket.recv()))
        await websocket.close()

    async with websockets.serve(host, "127.0.0.1", 0) as server:
        port = server.sockets[0].getsockname()[1]
        config = PluginConfig(
            port=port,
            plugin_uuid="UUID-1",
            register_event="registerPlugin",
            host="127.0.0.1",
            logging=LoggingConfig(file_logging=False),
        )
        plugin = CounterPlugin(config)

        await asyncio.wait_for(plugin.run(), timeout=10)

    assert received == [
        {"event": "registerPlugin", "uuid": "UUID-1"},
        {"event": "setTitle", "context": "K", "payload": {"title": "1", "target": 0}},
        {"event": "setSettings", "context": "K", "payload": {"count": 1}},
        {"event": "setTitle", "context": "K", "payload": {"title": "7", "target": 0}},
    ]
    assert plugin.store.get("K") == 7
    assert plugin.frames_dropped == 1
