"""Dining philosophers with asyncio tasks."""

from __future__ import annotations

import argparse
import asyncio
from dataclasses import dataclass
from typing import AsyncIterator, Iterable

PHILOSOPHERS = ("Socrates", "Hypatia", "Plato", "Aristotle", "Pythagoras")

_DONE = object()


@dataclass
class Philosopher:
    """A philosopher who alternately thinks and eats with two forks."""

    name: str
    left_fork: asyncio.Lock
    right_fork: asyncio.Lock
    thoughts: asyncio.Queue
    meal_time: float = 0.005

    async def think(self) -> None:
        """Send a new thought."""
        await self.thoughts.put(f"Eureka! {self.name} has a new idea!")

    async def eat(self) -> None:
        """Pick up both forks, eat for a moment and put them down."""
        async with self.left_fork, self.right_fork:
            print(f"{self.name} is eating...")
            await asyncio.sleep(self.meal_time)


async def _live(philosopher: Philosopher, rounds: int) -> None:
    for _ in range(rounds):
        await philosopher.think()
        await philosopher.eat()


async def _dine(names: list[str], rounds: int) -> AsyncIterator[str]:
    thoughts: asyncio.Queue = asyncio.Queue(maxsize=10)
    forks = [asyncio.Lock() for _ in names]
    neighbours = forks[1:] + forks[:1]
    philosophers = []
    for seat, (name, left, right) in enumerate(zip(names, forks, neighbours)):
        if seat == len(names) - 1:
            left, right = right, left
        philosophers.append(Philosopher(name, left, right, thoughts))

    tasks = [asyncio.create_task(_live(p, rounds)) for p in philosophers]

    async def finish() -> list[object]:
        outcomes = await asyncio.gather(*tasks, return_exceptions=True)
        await thoughts.put(_DONE)
        return outcomes

    watcher = asyncio.create_task(finish())
    try:
        while (thought := await thoughts.get()) is not _DONE:
            yield thought
        for outcome in await watcher:
            if isinstance(outcome, BaseException):
                raise outcome
    finally:
        for task in (*tasks, watcher):
            task.cancel()


def dine(names: Iterable[str] = PHILOSOPHERS, rounds: int = 100) -> AsyncIterator[str]:
    """Seat the philosophers around the table and yield their thoughts."""
    names = list(names)
    if len(names) < 2:
        raise ValueError("at least two philosophers are needed to share forks")
    return _dine(names, rounds)


async def _print_thoughts(rounds: int) -> None:
    async for thought in dine(PHILOSOPHERS, rounds):
        print(f"Here is a thought: {thought}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the async dining philosophers.")
    parser.add_argument("--rounds", type=int, default=100)
    args = parser.parse_args(argv)
    asyncio.run(_print_thoughts(args.rounds))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())