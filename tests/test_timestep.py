import pytest

from orbitengine.timestep import Timestep


def test_default_is_zero():
    assert Timestep().seconds == 0.0
    assert float(Timestep()) == 0.0


def test_float_conversion_returns_time():
    assert float(Timestep(0.5)) == 0.5


def test_seconds_matches_float():
    step = Timestep(0.125)
    assert step.seconds == float(step)


def test_milliseconds():
    assert Timestep(1.5).milliseconds == pytest.approx(1500.0)


def test_milliseconds_scales_seconds():
    step = Timestep(0.016)
    assert step.milliseconds == pytest.approx(step.seconds * 1000.0)


def test_equality_and_immutability():
    assert Timestep(0.25) == Timestep(0.25)
    with pytest.raises(AttributeError):
        Timestep(0.25).time = 1.0  # type: ignore[misc]