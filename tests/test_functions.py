import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from sparkmaths.functions import rsqrt, sign, to_degrees, to_radians

finite = st.floats(min_value=-1e6, max_value=1e6, allow_nan=False)
positive = st.floats(min_value=1e-6, max_value=1e6, allow_nan=False)


def test_half_turn_is_pi():
    assert to_radians(180) == pytest.approx(math.pi)


def test_pi_is_half_turn():
    assert to_degrees(math.pi) == pytest.approx(180)


@given(finite)
def test_degree_radian_round_trip(value):
    assert to_degrees(to_radians(value)) == pytest.approx(value, rel=1e-9, abs=1e-9)


@given(finite)
def test_sign_matches_copysign(value):
    result = sign(value)
    if value == 0:
        assert result == 0
    else:
        assert result == math.copysign(1, value)


def test_sign_of_zero():
    assert sign(0.0) == 0


@given(positive)
def test_rsqrt_times_sqrt_is_one(value):
    assert rsqrt(value) * math.sqrt(value) == pytest.approx(1.0)


def test_rsqrt_of_four():
    assert rsqrt(4.0) == 0.5


def test_rsqrt_of_zero_raises():
    with pytest.raises(ZeroDivisionError):
        rsqrt(0.0)


def test_rsqrt_of_negative_raises():
    with pytest.raises(ValueError):
        rsqrt(-1.0)