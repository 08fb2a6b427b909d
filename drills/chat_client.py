"""A WebSocket chat client that sends lines and prints what arrives."""

from __future__ import annotations

import argparse
import asyncio
import sys
import threading
from typing import AsyncIterable, AsyncIterator, Iterable, TextIO, Union

import websockets
from websockets.exceptions import ConnectionClosedOK

Lines = Union[AsyncIterable[str], Iterable[str]]


async def _as_async(lines: Lines) -> AsyncIterator[str]:
    if hasattr(lines, "__aiter__"):
        async for line in lines:  # type: ignore[union-attr]
            yield line
    else:
        for line in lines:  # type: ignore[union-attr]
            yield line


async def run_client(uri: str, lines: Lines, output: TextIO) -> None:
    """Send each of ``lines`` to ``uri`` and write incoming text to ``output``.

    Returns when the lines run out or the server closes the connection.
    """
    source = _as_async(lines)

    async def next_line() -> str:
        return await source.__anext__()

    async with websockets.connect(uri) as websocket:
        incoming: asyncio.Task | None = None
        outgoing: asyncio.Task | None = None
        try:
            while True:
                if incoming is None:
                    incoming = asyncio.create_task(websocket.recv())
                if outgoing is None:
                    outgoing = asyncio.create_task(next_line())
                done, _ = await asyncio.wait(
                    {incoming, outgoing}, return_when=asyncio.FIRST_COMPLETED
                )
                if incoming in done:
                    task, incoming = incoming, None
                    try:
                        message = task.result()
                    except ConnectionClosedOK:
                        return
                    if isinstance(message, str):
                        print(f"From server: {message}", file=output)
                if outgoing in done:
                    task, outgoing = outgoing, None
                    try:
                        line = task.result()
                    except StopAsyncIteration:
                        return
                    await websocket.send(line)
        finally:
            pending = [t for t in (incoming, outgoing) if t is not None]
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)


async def _stdin_lines() -> AsyncIterator[str]:
    loop = asyncio.get_running_loop()
    received: asyncio.Queue = asyncio.Queue()

    def put(item: object) -> None:
        try:
            loop.call_soon_threadsafe(received.put_nowait, item)
        except RuntimeError:
            pass

    def pump() -> None:
        for line in sys.stdin:
            put(line)
        put(None)

    threading.Thread(target=pump, daemon=True).start()
    while (line := await received.get()) is not None:
        yield line.rstrip("\r\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Chat from the terminal.")
    parser.add_argument("uri", nargs="?", default="ws://127.0.0.1:2000")
    args = parser.parse_args(argv)
    try:
        asyncio.run(run_client(args.uri, _stdin_lines(), sys.stdout))
    except KeyboardInterrupt:
        pass
    except (OSError, websockets.exceptions.WebSocketException) as err:
        print(err, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())