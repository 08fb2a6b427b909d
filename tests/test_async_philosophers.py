import asyncio
import contextlib
from collections import Counter

import pytest

from drills.async_philosophers import PHILOSOPHERS, Philosopher, dine, main


def _philosopher(name="Hypatia"):
    return Philosopher(name, asyncio.Lock(), asyncio.Lock(), asyncio.Queue())


@pytest.mark.asyncio
async def test_think_sends_thought():
    philosopher = _philosopher()
    await philosopher.think()
    assert philosopher.thoughts.get_nowait() == "Eureka! Hypatia has a new idea!"


@pytest.mark.asyncio
async def test_eat_releases_forks(capsys):
    philosopher = _philosopher()
    await philosopher.eat()
    assert not philosopher.left_fork.locked()
    assert not philosopher.right_fork.locked()
    assert "Hypatia is eating..." in capsys.readouterr().out


@pytest.mark.asyncio
async def test_dine_yields_every_thought():
    names = ["A", "B", "C"]
    thoughts = Counter([thought async for thought in dine(names, 2)])
    assert thoughts == Counter(
        {f"Eureka! {name} has a new idea!": 2 for name in names}
    )


@pytest.mark.asyncio
async def test_dine_default_table():
    thoughts = {thought async for thought in dine(rounds=1)}
    assert thoughts == {f"Eureka! {name} has a new idea!" for name in PHILOSOPHERS}


@pytest.mark.asyncio
async def test_dine_can_stop_early():
    async with contextlib.aclosing(dine(["A", "B"], 50)) as thoughts:
        first = await thoughts.__anext__()
    assert first in {"Eureka! A has a new idea!", "Eureka! B has a new idea!"}


def test_dine_needs_two_philosophers():
    with pytest.raises(ValueError):
        dine(["Alone"], 1)


def test_main_prints_thoughts(capsys):
    assert main(["--rounds", "1"]) == 0
    out = capsys.readouterr().out
    assert "Here is a thought: Eureka! Socrates has a new idea!" in out