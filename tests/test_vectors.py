import math

import pytest

from drills.vectors import magnitude, main, normalize


def test_unit_vector_magnitude():
    assert magnitude([0.0, 1.0, 0.0]) == 1.0


def test_known_magnitude():
    assert magnitude([3.0, 4.0, 0.0]) == pytest.approx(5.0)


def test_normalize_gives_unit_length():
    v = [1.0, 2.0, 9.0]
    assert normalize(v) is None
    assert magnitude(v) == pytest.approx(1.0)


def test_normalize_keeps_direction():
    original = [1.0, 2.0, 9.0]
    v = list(original)
    normalize(v)
    scale = magnitude(original)
    for before, after in zip(original, v):
        assert after * scale == pytest.approx(before)


def test_normalize_zero_vector():
    with pytest.raises(ZeroDivisionError):
        normalize([0.0, 0.0, 0.0])


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Magnitude of a unit vector: 1.0"
    last = float(lines[-1].rsplit(": ", 1)[1])
    assert math.isclose(last, 1.0)