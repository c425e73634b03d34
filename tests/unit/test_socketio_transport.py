from __future__ import annotations

from typing import Any

import pytest
from socketio import exceptions as sio_exceptions

from hms_client.application.exceptions import TransportError
from hms_client.config import Settings
from hms_client.infrastructure.realtime.socketio_transport import SocketIOTransport


class FakeSioClient:
    """Stands in for socketio.AsyncClient; `fire` plays the server side."""

    def __init__(self) -> None:
        self.handlers: dict[str, Any] = {}
        self.connected = False
        self.emitted: list[tuple[str, Any]] = []
        self.connect_error: Exception | None = None
        self.url: str | None = None
        self.reconnecting = False
        self.shutdowns = 0

    def on(self, event: str, handler: Any) -> None:
        self.handlers[event] = handler

    async def connect(self, url: str, transports=None) -> None:
        if self.connect_error:
            raise self.connect_error
        self.url = url
        self.connected = True
        await self.fire("connect")

    async def disconnect(self) -> None:
        # leaves a running reconnect loop alone
        self.connected = False

    async def shutdown(self) -> None:
        self.shutdowns += 1
        self.connected = False
        self.reconnecting = False

    async def emit(self, event: str, data: Any = None) -> None:
        if not self.connected:
            raise sio_exceptions.BadNamespaceError("/ is not a connected namespace.")
        self.emitted.append((event, data))

    async def fire(self, event: str, *args: Any) -> None:
        handler = self.handlers.get(event)
        if handler is not None:
            await handler(*args)


@pytest.fixture
def sio():
    return FakeSioClient()


@pytest.fixture
def transport(sio):
    return SocketIOTransport(
        Settings(API_URL="http://hms.local", REALTIME_URL="http://rt.hms.local"),
        client=sio,
    )


@pytest.mark.asyncio
async def test_connect_runs_connect_handlers_every_time(transport, sio):
    calls = []

    async def on_connect():
        calls.append(transport.connected)

    transport.on_connect(on_connect)
    await transport.connect()
    await sio.fire("connect")

    assert sio.url == "http://rt.hms.local"
    assert calls == [True, True]


@pytest.mark.asyncio
async def test_fan_out_in_registration_order(transport, sio):
    seen = []

    async def first(data):
        seen.append(("first", data))

    async def second(data):
        seen.append(("second", data))

    transport.on("receive_message", first)
    sub = transport.on("receive_message", second)
    await sio.fire("receive_message", {"_id": "m-1"})
    sub.unsubscribe()
    await sio.fire("receive_message", {"_id": "m-2"})

    assert seen == [
        ("first", {"_id": "m-1"}),
        ("second", {"_id": "m-1"}),
        ("first", {"_id": "m-2"}),
    ]


@pytest.mark.asyncio
async def test_failing_handler_does_not_starve_others(transport, sio):
    seen = []

    async def broken(_data):
        raise RuntimeError("boom")

    async def healthy(data):
        seen.append(data)

    transport.on("new_notification", broken)
    transport.on("new_notification", healthy)
    await sio.fire("new_notification", {"title": "x"})

    assert seen == [{"title": "x"}]


@pytest.mark.asyncio
async def test_connection_errors_become_transport_errors(transport, sio):
    sio.connect_error = sio_exceptions.ConnectionError("refused")
    with pytest.raises(TransportError):
        await transport.connect()

    with pytest.raises(TransportError):
        await transport.emit("join_room", "u-1")


@pytest.mark.asyncio
async def test_close_disconnects(transport, sio):
    await transport.connect()
    await transport.emit("join_room", "u-1")
    await transport.close()

    assert sio.emitted == [("join_room", "u-1")]
    assert not transport.connected


@pytest.mark.asyncio
async def test_close_while_reconnecting_stops_the_retry_loop(transport, sio):
    await transport.connect()
    sio.connected = False
    sio.reconnecting = True

    await transport.close()

    assert sio.shutdowns == 1
    assert not sio.reconnecting
    assert not transport.connected
