"""SMS hand-off tests."""

import asyncio
import json

import pytest

from aksha.core.ws_manager import ConnectionManager
from aksha.services.dispatch_service import (
    SMS_COMPOSE_EVENT,
    NoRecipientsError,
    SmsLinkDispatcher,
    build_sms_uri,
)

from conftest import RecordingManager


def test_build_sms_uri_encodes_body():
    uri = build_sms_uri(["+1555000111", "+1555000222"], "Help me\nnow & here")
    assert uri == "sms:+1555000111;+1555000222?body=Help%20me%0Anow%20%26%20here"


def test_build_sms_uri_strips_number_formatting():
    uri = build_sms_uri(["+91 98765-43210", "(555) 010.9999"], "x", separator="&")
    assert uri.startswith("sms:+919876543210&5550109999?")


def test_unsupported_separator():
    with pytest.raises(ValueError):
        SmsLinkDispatcher(ConnectionManager(), separator=",")


def test_send_text_hands_off_to_device():
    manager = RecordingManager(connected=2)
    result = asyncio.run(SmsLinkDispatcher(manager).send_text(["+1555"], "SOS"))

    assert result.dispatched is True
    assert result.delivered_to == 2
    event, data = manager.events[0]
    assert event == SMS_COMPOSE_EVENT
    assert data["uri"] == result.uri
    assert data["recipients"] == ["+1555"]


def test_send_text_without_device_is_not_dispatched():
    result = asyncio.run(SmsLinkDispatcher(ConnectionManager()).send_text(["+1555"], "SOS"))
    assert result.dispatched is False
    assert result.uri.startswith("sms:+1555?body=")


def test_send_text_requires_recipients():
    with pytest.raises(NoRecipientsError):
        asyncio.run(SmsLinkDispatcher(RecordingManager()).send_text([], "SOS"))


class FakeSocket:
    """Stands in for a device WebSocket; records what the server sends."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.sent: list[str] = []
        self.on_send = None

    async def accept(self) -> None:
        pass

    async def send_text(self, payload: str) -> None:
        await asyncio.sleep(0)
        if self.on_send is not None:
            self.on_send()
        if self.fail:
            raise RuntimeError("socket closed")
        self.sent.append(payload)


def test_send_text_survives_device_disconnecting_mid_send():
    manager = ConnectionManager()
    first, second = FakeSocket(), FakeSocket()

    async def scenario():
        await manager.connect(first, "phone")
        await manager.connect(second, "phone")
        first.on_send = lambda: manager.disconnect(second, "phone")
        second.on_send = lambda: manager.disconnect(first, "phone")
        return await SmsLinkDispatcher(manager).send_text(["+1555"], "SOS")

    result = asyncio.run(scenario())

    assert result.dispatched is True
    assert result.delivered_to >= 1
    assert manager.total_connections == 0


def test_send_text_delivers_to_real_manager_and_prunes_dead_sockets():
    manager = ConnectionManager()
    alive, broken = FakeSocket(), FakeSocket(fail=True)

    async def scenario():
        await manager.connect(alive, "phone")
        await manager.connect(broken, "tablet")
        return await SmsLinkDispatcher(manager).send_text(["+1555"], "SOS")

    result = asyncio.run(scenario())

    assert result.dispatched is True
    assert result.delivered_to == 1
    assert json.loads(alive.sent[0]) == {
        "event": SMS_COMPOSE_EVENT,
        "data": {"uri": result.uri, "recipients": ["+1555"], "body": "SOS"},
    }
    assert broken.sent == []
    assert manager.total_connections == 1
    assert "tablet" not in manager._connections
