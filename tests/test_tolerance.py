import math

import pytest

from rubber_spring import InvalidParameterError, Tolerance, near_equal, near_zero
from rubber_spring.settings import DEFAULT_TOLERANCE_BAND


def test_default_band():
    assert Tolerance().distance == DEFAULT_TOLERANCE_BAND


def test_near_zero_is_strict_band():
    assert near_zero(5e-5, 1e-4) is True
    assert near_zero(-5e-5, 1e-4) is True
    assert near_zero(1e-4, 1e-4) is False
    assert near_zero(-2e-4, 1e-4) is False


def test_exact_zero_matches_empty_band():
    assert near_zero(0.0, 0.0) is True
    assert near_zero(1e-300, 0.0) is False


def test_non_finite_never_near():
    assert near_zero(math.nan, 1e-4) is False
    assert near_zero(math.inf, 1e-4) is False


def test_near_equal():
    assert near_equal(1.00005, 1.0, 1e-4) is True
    assert near_equal(1.001, 1.0, 1e-4) is False


@pytest.mark.parametrize("distance", [0.0, -1e-4, math.nan])
def test_invalid_band_rejected(distance):
    with pytest.raises(InvalidParameterError):
        Tolerance(distance=distance).validate()
