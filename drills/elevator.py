"""Events in an elevator system."""

from __future__ import annotations

import argparse
import enum
from dataclasses import dataclass
from typing import Union

Floor = int


class Direction(enum.Enum):
    """A direction of travel."""

    UP = "Up"
    DOWN = "Down"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class LobbyCall:
    """A button in the elevator lobby on the given floor."""

    direction: Direction
    floor: Floor

    def __str__(self) -> str:
        return f"LobbyCall({self.direction}, {self.floor})"


@dataclass(frozen=True)
class CarFloor:
    """A floor button within the car."""

    floor: Floor

    def __str__(self) -> str:
        return f"CarFloor({self.floor})"


Button = Union[LobbyCall, CarFloor]


@dataclass(frozen=True)
class ButtonPressed:
    """A button was pressed."""

    button: Button

    def __str__(self) -> str:
        return f"ButtonPressed({self.button})"


@dataclass(frozen=True)
class CarArrived:
    """The car has arrived at the given floor."""

    floor: Floor

    def __str__(self) -> str:
        return f"CarArrived({self.floor})"


@dataclass(frozen=True)
class CarDoorOpened:
    """The car's doors have opened."""

    def __str__(self) -> str:
        return "CarDoorOpened"


@dataclass(frozen=True)
class CarDoorClosed:
    """The car's doors have closed."""

    def __str__(self) -> str:
        return "CarDoorClosed"


Event = Union[ButtonPressed, CarArrived, CarDoorOpened, CarDoorClosed]


def car_arrived(floor: Floor) -> Event:
    """The car has arrived on the given floor."""
    return CarArrived(floor)


def car_door_opened() -> Event:
    """The car doors have opened."""
    return CarDoorOpened()


def car_door_closed() -> Event:
    """The car doors have closed."""
    return CarDoorClosed()


def lobby_call_button_pressed(floor: Floor, direction: Direction) -> Event:
    """A directional button was pressed in a lobby on the given floor."""
    return ButtonPressed(LobbyCall(direction, floor))


def car_floor_button_pressed(floor: Floor) -> Event:
    """A floor button was pressed in the elevator car."""
    return ButtonPressed(CarFloor(floor))


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(description="Print sample elevator events.").parse_args(
        argv
    )
    print(
        "A ground floor passenger has pressed the up button: "
        f"{lobby_call_button_pressed(0, Direction.UP)}"
    )
    print(f"The car has arrived on the ground floor: {car_arrived(0)}")
    print(f"The car door opened: {car_door_opened()}")
    print(f"A passenger has pressed the 3rd floor button: {car_floor_button_pressed(3)}")
    print(f"The car door closed: {car_door_closed()}")
    print(f"The car has arrived on the 3rd floor: {car_arrived(3)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())