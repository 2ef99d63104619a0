# -*- coding: utf-8 -*-
"""
Pytest tests for the fixed income deposit helpers.
"""

import numpy as np
import pytest

from core.rate_calculator import RateCalculator
from pricing.fixed_income.deposit import future_value, future_values, interest_earned, real_rate
from utils.error import FinError


@pytest.fixture
def calc():
    return RateCalculator(0.05)


def test_future_value_matches_calculator(calc):
    assert future_value(calc, 100.0) == calc.single_period(100.0)
    assert future_value(calc, 100.0) == pytest.approx(105.0)


def test_interest_earned(calc):
    assert interest_earned(calc, 100.0) == pytest.approx(5.0)
    assert interest_earned(RateCalculator(-0.10), 200.0) == pytest.approx(-20.0)


def test_interest_earned_is_future_value_less_principal(calc):
    principals = np.array([0.0, 10.0, 1234.5])
    np.testing.assert_allclose(
        interest_earned(calc, principals),
        future_value(calc, principals) - principals
    )


def test_future_values_ladder(calc):
    result = future_values(calc, [1_000.0, 5_000.0, 10_000.0])

    assert isinstance(result, np.ndarray)
    np.testing.assert_allclose(result, [1_050.0, 5_250.0, 10_500.0])


def test_future_values_scalar_becomes_one_element(calc):
    result = future_values(calc, 100.0)
    assert result.shape == (1,)
    assert result[0] == pytest.approx(105.0)


def test_future_values_empty(calc):
    assert future_values(calc, []).size == 0


def test_future_values_rejects_text(calc):
    with pytest.raises(FinError):
        future_values(calc, ["a", "b"])


@pytest.mark.parametrize("fn", [future_value, interest_earned, future_values])
def test_requires_calculator(fn):
    with pytest.raises(FinError, match="RateCalculator"):
        fn(0.05, 100.0)


def test_real_rate():
    assert real_rate(0.06, 0.04) == pytest.approx(0.02)
    assert real_rate(0.02, 0.05) == pytest.approx(-0.03)


def test_real_rate_rejects_non_numeric():
    with pytest.raises(FinError):
        real_rate("6%", 0.04)


@pytest.mark.parametrize("fn", [future_value, interest_earned, future_values])
@pytest.mark.parametrize("bad", ["100", True, ["100"], [True, False], None])
def test_helpers_reject_non_numeric_principal(calc, fn, bad):
    with pytest.raises(FinError):
        fn(calc, bad)


def test_interest_earned_matches_future_value_for_ints(calc):
    assert interest_earned(calc, 100) == pytest.approx(future_value(calc, 100) - 100)
