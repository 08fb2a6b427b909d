"""A WebSocket chat server that broadcasts every message to all clients."""

from __future__ import annotations

import argparse
import asyncio
from typing import Any

import websockets
from websockets.exceptions import ConnectionClosedOK

WELCOME = "Welcome to chat! Type a message"


class SendError(RuntimeError):
    """A message was broadcast while nobody was subscribed."""


class Lagged(RuntimeError):
    """A subscriber fell behind and missed messages."""

    def __init__(self, skipped: int) -> None:
        super().__init__(f"subscriber lagged behind by {skipped} messages")
        self.skipped = skipped


class Subscription:
    """Receives the messages sent on a :class:`Broadcast` after subscribing."""

    def __init__(self, broadcast: Broadcast, capacity: int) -> None:
        self._broadcast = broadcast
        self._queue: asyncio.Queue[str] = asyncio.Queue(maxsize=capacity)
        self._lagged = 0

    def _deliver(self, message: str) -> None:
        if self._queue.full():
            self._queue.get_nowait()
            self._lagged += 1
        self._queue.put_nowait(message)

    async def recv(self) -> str:
        """Return the next message; raise :class:`Lagged` after an overflow."""
        if self._lagged:
            skipped, self._lagged = self._lagged, 0
            raise Lagged(skipped)
        return await self._queue.get()

    def close(self) -> None:
        """Stop receiving messages."""
        self._broadcast._subscribers.discard(self)

    def __enter__(self) -> Subscription:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class Broadcast:
    """A channel whose every message goes to every current subscriber."""

    def __init__(self, capacity: int = 16) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._subscribers: set[Subscription] = set()

    def subscribe(self) -> Subscription:
        """Return a new subscription that sees messages sent from now on."""
        subscription = Subscription(self, self.capacity)
        self._subscribers.add(subscription)
        return subscription

    def send(self, message: str) -> int:
        """Send ``message`` to all subscribers and return how many there are."""
        if not self._subscribers:
            raise SendError("no subscribers to receive the message")
        for subscription in self._subscribers:
            subscription._deliver(message)
        return len(self._subscribers)


async def handle_connection(websocket: Any, broadcast: Broadcast) -> None:
    """Relay text from ``websocket`` to everyone, and everyone's text back."""
    addr = websocket.remote_address
    incoming: asyncio.Task | None = None
    outgoing: asyncio.Task | None = None
    with broadcast.subscribe() as subscription:
        await websocket.send(WELCOME)
        try:
            while True:
                if incoming is None:
                    incoming = asyncio.create_task(websocket.recv())
                if outgoing is None:
                    outgoing = asyncio.create_task(subscription.recv())
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
                        print(f"From client {addr!r} {message!r}")
                        broadcast.send(message)
                if outgoing in done:
                    task, outgoing = outgoing, None
                    await websocket.send(task.result())
        finally:
            pending = [t for t in (incoming, outgoing) if t is not None]
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)


async def run_server(host: str = "127.0.0.1", port: int = 2000) -> None:
    """Serve the chat on ``host``:``port`` until cancelled."""
    broadcast = Broadcast(16)

    async def handler(websocket: Any) -> None:
        print(f"New connection from {websocket.remote_address!r}")
        await handle_connection(websocket, broadcast)

    async with websockets.serve(handler, host, port):
        print(f"listening on port {port}")
        await asyncio.Future()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the chat server.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=2000)
    args = parser.parse_args(argv)
    try:
        asyncio.run(run_server(args.host, args.port))
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())