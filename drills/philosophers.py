"""Dining philosophers with threads."""

from __future__ import annotations

import argparse
import queue
import threading
import time
from dataclasses import dataclass
from typing import ContextManager, Iterable, Iterator

PHILOSOPHERS = ("Socrates", "Hypatia", "Plato", "Aristotle", "Pythagoras")

_DONE = object()


@dataclass
class Philosopher:
    """A philosopher who alternately eats with two forks and thinks."""

    name: str
    left_fork: ContextManager[object]
    right_fork: ContextManager[object]
    thoughts: queue.Queue
    meal_time: float = 0.01

    def think(self) -> None:
        """Send a new thought."""
        self.thoughts.put(f"Eureka! {self.name} has a new idea!")

    def eat(self) -> None:
        """Pick up both forks, eat for a moment and put them down."""
        print(f"{self.name} is trying to eat")
        with self.left_fork, self.right_fork:
            print(f"{self.name} is eating...")
            time.sleep(self.meal_time)


def _live(philosopher: Philosopher, rounds: int) -> None:
    try:
        for _ in range(rounds):
            philosopher.eat()
            philosopher.think()
    finally:
        philosopher.thoughts.put(_DONE)


def _collect(thoughts: queue.Queue, diners: int) -> Iterator[str]:
    remaining = diners
    while remaining:
        item = thoughts.get()
        if item is _DONE:
            remaining -= 1
        else:
            yield item


def dine(names: Iterable[str] = PHILOSOPHERS, rounds: int = 100) -> Iterator[str]:
    """Seat the philosophers around the table and yield their thoughts."""
    names = list(names)
    if len(names) < 2:
        raise ValueError("at least two philosophers are needed to share forks")
    thoughts: queue.Queue = queue.Queue(maxsize=10)
    forks = [threading.Lock() for _ in names]
    neighbours = forks[1:] + forks[:1]
    philosophers = []
    for seat, (name, left, right) in enumerate(zip(names, forks, neighbours)):
        # The last philosopher reaches for the forks in the other order,
        # which breaks the symmetry that would otherwise deadlock.
        if seat == len(names) - 1:
            left, right = right, left
        philosophers.append(Philosopher(name, left, right, thoughts))
    for philosopher in philosophers:
        threading.Thread(target=_live, args=(philosopher, rounds), daemon=True).start()
    return _collect(thoughts, len(philosophers))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the dining philosophers.")
    parser.add_argument("--rounds", type=int, default=100)
    args = parser.parse_args(argv)
    for thought in dine(PHILOSOPHERS, args.rounds):
        print(thought)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())