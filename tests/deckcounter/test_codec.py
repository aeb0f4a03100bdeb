"""Tests for the frame codec."""

import json

import pytest

from deckcounter.codec import decode, encode
from deckcounter.exceptions import DecodeError
from deckcounter.models.plugin_api import (
    GetSettingsCommand,
    PluginEventType,
    RegisterCommand,
    SetSettingsCommand,
    SettingsPayload,
    SetTitleCommand,
    TitlePayload,
)


class TestEncode:
    def test_register(self):
        text = encode(RegisterCommand(event="registerPlugin", uuid="abc"))
        assert json.loads(text) == {"event": "registerPlugin", "uuid": "abc"}

    def test_get_settings(self):
        text = encode(GetSettingsCommand(context="ctx"))
        assert json.loads(text) == {"event": "getSettings", "context": "ctx"}

    def test_set_settings(self):
        text = encode(SetSettingsCommand(context="ctx", payload=SettingsPayload(count=4)))
        assert json.loads(text) == {
            "event": "setSettings",
            "context": "ctx",
            "payload": {"count": 4},
        }

    def test_set_title(self):
        text = encode(SetTitleCommand(context="ctx", payload=TitlePayload(title="4")))
        assert json.loads(text) == {
            "event": "setTitle",
            "context": "ctx",
            "payload": {"title": "4", "target": 0},
        }

    def test_null_fields_are_omitted(self):
        """Optional fields left unset never appear as null."""
        text = encode(SetSettingsCommand(context="ctx", payload=SettingsPayload()))
        assert "null" not in text
        assert json.loads(text) == {
            "event": "setSettings",
            "context": "ctx",
            "payload": {},
        }


class TestDecode:
    def test_full_event(self):
        event = decode(
            json.dumps(
                {
                    "event": "keyDown",
                    "context": "ctx",
                    "action": "com.yourname.counter.action",
                    "payload": {"settings": {"count": 2}},
                }
            )
        )
        assert event.event_type is PluginEventType.KEY_DOWN
        assert event.context == "ctx"
        assert event.action == "com.yourname.counter.action"
        assert event.payload == {"settings": {"count": 2}}

    def test_minimal_event(self):
        event = decode('{"event": "deviceDidConnect"}')
        assert event.event == "deviceDidConnect"
        assert event.event_type is None

    @pytest.mark.parametrize(
        "text",
        [
            "{not json",
            "",
            "[1, 2, 3]",
            '"keyDown"',
            '{"context": "ctx"}',
            '{"event": 5}',
        ],
    )
    def test_invalid_frames_raise_decode_error(self, text):
        with pytest.raises(DecodeError):
            decode(text)

    @pytest.mark.parametrize(
        "payload",
        [{"settings": {"count": "lots"}}, {"settings": "x"}, {"settings": {"count": -1}}, 3],
    )
    def test_payload_shape_does_not_fail_decode(self, payload):
        event = decode(json.dumps({"event": "sendToPlugin", "payload": payload}))
        assert event.payload == payload
