import asyncio
import io

import pytest
import websockets

from drills.chat_client import run_client


async def _feed(lines, wait=True):
    """Yield the given lines, then block forever if asked to."""
    for line in lines:
        yield line
    if wait:
        await asyncio.Event().wait()


@pytest.mark.asyncio
async def test_prints_server_messages_until_server_closes():
    async def handler(ws):
        await ws.send("Welcome")
        message = await ws.recv()
        await ws.send(f"echo: {message}")

    output = io.StringIO()
    async with websockets.serve(handler, "127.0.0.1", 0) as server:
        port = server.sockets[0].getsockname()[1]
        await asyncio.wait_for(
            run_client(f"ws://127.0.0.1:{port}", _feed(["hello"]), output), 5
        )
    assert output.getvalue() == "From server: Welcome\nFrom server: echo: hello\n"


@pytest.mark.asyncio
async def test_sends_every_line_in_order():
    received = []
    finished = asyncio.Event()

    async def handler(ws):
        try:
            async for message in ws:
                received.append(message)
        finally:
            finished.set()

    output = io.StringIO()
    async with websockets.serve(handler, "127.0.0.1", 0) as server:
        port = server.sockets[0].getsockname()[1]
        await asyncio.wait_for(
            run_client(f"ws://127.0.0.1:{port}", ["a", "b"], output), 5
        )
        await asyncio.wait_for(finished.wait(), 5)
    assert received == ["a", "b"]
    assert output.getvalue() == ""


@pytest.mark.asyncio
async def test_no_lines_sends_nothing():
    received = []
    finished = asyncio.Event()

    async def handler(ws):
        try:
            async for message in ws:
                received.append(message)
        finally:
            finished.set()

    output = io.StringIO()
    async with websockets.serve(handler, "127.0.0.1", 0) as server:
        port = server.sockets[0].getsockname()[1]
        await asyncio.wait_for(
            run_client(f"ws://127.0.0.1:{port}", _feed([], wait=False), output), 5
        )
        await asyncio.wait_for(finished.wait(), 5)
    assert received == []
    assert output.getvalue() == ""


@pytest.mark.asyncio
async def test_binary_messages_are_not_printed():
    async def handler(ws):
        await ws.send(b"\x00\x01")
        await ws.send("text")

    output = io.StringIO()
    async with websockets.serve(handler, "127.0.0.1", 0) as server:
        port = server.sockets[0].getsockname()[1]
        await asyncio.wait_for(
            run_client(f"ws://127.0.0.1:{port}", _feed([]), output), 5
        )
    assert output.getvalue() == "From server: text\n"