import math

import pytest

from boardtrace.utility import (
    PI,
    clamp,
    clamp_max,
    degrees_to_radians,
    random_double,
    random_int,
    rgb01_to_255,
)


def test_half_turn_is_pi():
    assert math.isclose(degrees_to_radians(180), PI)


def test_full_turn_is_tau():
    assert math.isclose(degrees_to_radians(360), math.tau)


def test_random_int_inclusive_range():
    draws = {random_int(0, 2) for _ in range(500)}
    assert draws == {0, 1, 2}


@pytest.mark.parametrize("low, high", [(3, 3), (5, 1)])
def test_random_int_rejects_empty_range(low, high):
    with pytest.raises(ValueError):
        random_int(low, high)


def test_random_double_bounds():
    values = [random_double(-2.0, 3.0) for _ in range(500)]
    assert all(-2.0 <= v < 3.0 for v in values)


def test_random_double_default_unit_interval():
    values = [random_double() for _ in range(500)]
    assert all(0.0 <= v < 1.0 for v in values)


@pytest.mark.parametrize(
    "x, low, high, expected",
    [(-5.0, 0.0, 1.0, 0.0), (5.0, 0.0, 1.0, 1.0), (0.25, 0.0, 1.0, 0.25)],
)
def test_clamp(x, low, high, expected):
    assert clamp(x, low, high) == expected


def test_clamp_max():
    assert clamp_max(7.0, 4.0) == 4.0
    assert clamp_max(-3.0, 4.0) == -3.0


def test_rgb_extremes():
    assert rgb01_to_255(1.0) == 255
    assert rgb01_to_255(0.0) == 0
    assert rgb01_to_255(-1.0) == rgb01_to_255(0.0)
    assert rgb01_to_255(2.0) == rgb01_to_255(1.0)


def test_rgb_monotone_and_in_range():
    results = [rgb01_to_255(i / 100) for i in range(101)]
    assert results == sorted(results)
    assert all(0 <= r <= 255 for r in results)