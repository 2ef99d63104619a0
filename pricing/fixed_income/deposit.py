import logging

import numpy as np

from core.rate_calculator import RateCalculator
from utils.error import FinError
from utils.helper import is_real_number
from utils.math import as_float_array

logger = logging.getLogger(__name__)


def _check_calculator(calculator):
    if not isinstance(calculator, RateCalculator):
        raise FinError(f"calculator must be a RateCalculator instance. Got: {type(calculator).__name__}")


# -------------------------------
# 1. Single deposit
# -------------------------------

def future_value(calculator: RateCalculator, principal):
    _check_calculator(calculator)
    return calculator.single_period(principal)


def interest_earned(calculator: RateCalculator, principal):
    """
    Interest paid over the period, i.e. principal * rate.
    """
    _check_calculator(calculator)
    if is_real_number(principal):
        return principal * calculator.rate
    if isinstance(principal, (np.ndarray, list, tuple)):
        return as_float_array(principal) * calculator.rate
    raise FinError(f"Principal must be a real number or numeric array. Got: {type(principal).__name__}")


# -------------------------------
# 2. Many deposits
# -------------------------------

def future_values(calculator: RateCalculator, principals) -> np.ndarray:
    _check_calculator(calculator)
    arr = as_float_array(principals)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    logger.debug("Valuing %d deposits with %r", arr.size, calculator)
    return calculator.single_period(arr)


# -------------------------------
# 3. Inflation
# -------------------------------

def real_rate(nominal: float, inflation: float) -> float:
    """
    Approximate real return for one period: nominal - inflation.
    6% nominal with 4% inflation leaves 2%, before taxes.
    """
    if not is_real_number(nominal) or not is_real_number(inflation):
        raise FinError(f"Rates must be real numbers. Got: {nominal!r}, {inflation!r}")
    return nominal - inflation
