import asyncio

import pytest
import websockets

from drills.chat_server import (
    WELCOME,
    Broadcast,
    Lagged,
    SendError,
    handle_connection,
)


@pytest.mark.asyncio
async def test_send_without_subscribers_fails():
    broadcast = Broadcast()
    with pytest.raises(SendError):
        broadcast.send("hello")


@pytest.mark.asyncio
async def test_send_reaches_every_subscriber():
    broadcast = Broadcast()
    first = broadcast.subscribe()
    second = broadcast.subscribe()
    assert broadcast.send("hello") == 2
    assert await first.recv() == "hello"
    assert await second.recv() == "hello"


@pytest.mark.asyncio
async def test_closed_subscription_is_not_counted():
    broadcast = Broadcast()
    kept = broadcast.subscribe()
    with broadcast.subscribe():
        assert broadcast.send("one") == 2
    assert broadcast.send("two") == 1
    assert await kept.recv() == "one"
    assert await kept.recv() == "two"


@pytest.mark.asyncio
async def test_lagging_subscriber_is_told_and_keeps_newest():
    broadcast = Broadcast(capacity=2)
    sub = broadcast.subscribe()
    for message in ("a", "b", "c"):
        broadcast.send(message)
    with pytest.raises(Lagged) as info:
        await sub.recv()
    assert info.value.skipped == 1
    assert await sub.recv() == "b"
    assert await sub.recv() == "c"


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        Broadcast(capacity=0)


async def _recv(ws):
    return await asyncio.wait_for(ws.recv(), 5)


@pytest.mark.asyncio
async def test_messages_are_broadcast_to_all_clients():
    broadcast = Broadcast()
    watcher = broadcast.subscribe()

    async def handler(ws):
        await handle_connection(ws, broadcast)

    async with websockets.serve(handler, "127.0.0.1", 0) as server:
        port = server.sockets[0].getsockname()[1]
        uri = f"ws://127.0.0.1:{port}"
        async with websockets.connect(uri) as alice, websockets.connect(uri) as bob:
            assert await _recv(alice) == WELCOME
            assert await _recv(bob) == WELCOME
            await alice.send("hi")
            assert await asyncio.wait_for(watcher.recv(), 5) == "hi"
            assert await _recv(alice) == "hi"
            assert await _recv(bob) == "hi"


@pytest.mark.asyncio
async def test_binary_messages_are_not_broadcast():
    broadcast = Broadcast()
    watcher = broadcast.subscribe()

    async def handler(ws):
        await handle_connection(ws, broadcast)

    async with websockets.serve(handler, "127.0.0.1", 0) as server:
        port = server.sockets[0].getsockname()[1]
        uri = f"ws://127.0.0.1:{port}"
        async with websockets.connect(uri) as alice, websockets.connect(uri) as bob:
            await _recv(alice)
            await _recv(bob)
            await alice.send(b"raw")
            await alice.send("text")
            assert await asyncio.wait_for(watcher.recv(), 5) == "text"
            assert await _recv(bob) == "text"