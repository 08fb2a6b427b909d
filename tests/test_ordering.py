import dataclasses

import pytest

from drills.ordering import main, minimum


@dataclasses.dataclass(order=True, frozen=True)
class _Ranked:
    rank: int
    label: str = dataclasses.field(compare=False)


@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [
        (0, 10, 0),
        (500, 123, 123),
        ("a", "z", "a"),
        ("7", "1", "1"),
        ("hello", "goodbye", "goodbye"),
        ("bat", "armadillo", "armadillo"),
    ],
)
def test_minimum(left, right, expected):
    assert minimum(left, right) == expected


def test_equal_values_return_left():
    result = minimum(_Ranked(1, "left"), _Ranked(1, "right"))
    assert result.label == "left"


def test_greater_left_returns_right():
    result = minimum(_Ranked(2, "left"), _Ranked(1, "right"))
    assert result.label == "right"


def test_symmetric():
    assert minimum(3, 8) == minimum(8, 3)


def test_main_runs_checks():
    assert main([]) == 0