import math

import pytest

from physixal.timestep import Timestep


def test_default_is_zero():
    ts = Timestep()
    assert float(ts) == 0.0
    assert ts.seconds == 0.0
    assert ts.milliseconds == 0.0


def test_float_conversion_and_seconds_agree():
    ts = Timestep(0.25)
    assert float(ts) == 0.25
    assert ts.seconds == float(ts)


def test_milliseconds_scale():
    ts = Timestep(0.5)
    assert ts.milliseconds == pytest.approx(ts.seconds * 1000.0)


@pytest.mark.parametrize("value", [0.5, 0.016, 0.1, 2.0])
def test_frames_per_second_times_step_is_one(value):
    ts = Timestep(value)
    assert ts.frames_per_second * ts.seconds == pytest.approx(1.0)


def test_zero_step_gives_infinite_rate():
    assert Timestep(0.0).frames_per_second == math.inf


def test_timestep_is_immutable():
    ts = Timestep(1.0)
    with pytest.raises(AttributeError):
        ts.time = 2.0  # type: ignore[misc]
    assert float(ts) == 1.0
    assert ts.seconds == 1.0