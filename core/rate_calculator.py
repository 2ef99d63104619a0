# -*- coding: utf-8 -*-
"""
Created on Wed Sep  3 07:32:18 2025

@author: Simran
"""

import logging
import math
from copy import deepcopy

import numpy as np

from utils.error import FinError
from utils.globals import PERCENT
from utils.helper import is_real_number, format_percentage
from utils.math import as_float_array

logger = logging.getLogger(__name__)


class RateCalculator:
    """
    Fixed single-period interest rate.

    Future value of a deposit after one period: V = P * (1 + R)
    """

    def __init__(self, rate: float):
        if not is_real_number(rate):
            raise FinError(f"Rate must be a real number. Got: {type(rate).__name__}")
        if not math.isfinite(rate):
            raise FinError(f"Rate must be finite. Got: {rate}")

        self._rate = float(rate)
        logger.debug("Created %r", self)

    @classmethod
    def from_percentage(cls, percentage: float):
        """Build from a rate quoted in percentage points, e.g. 5.0 for 5%."""
        if not is_real_number(percentage):
            raise FinError(f"Percentage must be a real number. Got: {type(percentage).__name__}")
        return cls(percentage / PERCENT)

    @property
    def rate(self) -> float:
        return self._rate

    # ===== Value semantics =====
    def copy(self):
        return deepcopy(self)

    def assign(self, other: "RateCalculator"):
        """
        Overwrite this calculator's rate with the rate of `other`.
        Returns self so assignments can be chained.
        """
        if not isinstance(other, RateCalculator):
            raise FinError(f"Can only assign from a RateCalculator. Got: {type(other).__name__}")
        if other is not self:
            logger.debug("Assigning rate %.6f over %.6f", other._rate, self._rate)
            self._rate = other._rate
        return self

    def __copy__(self):
        return self.__deepcopy__({})

    def __deepcopy__(self, memo):
        cls = self.__class__
        result = cls.__new__(cls)
        memo[id(self)] = result

        result._rate = self._rate

        return result

    # ===== API =====
    def single_period(self, value):
        """
        Future value of `value` after exactly one period.

        Scalars give a float; lists, tuples and ndarrays give an ndarray
        of the same shape. inf and nan propagate.
        """
        if is_real_number(value):
            return value * (1.0 + self._rate)

        if isinstance(value, (np.ndarray, list, tuple)):
            principals = as_float_array(value)
            logger.debug("Valuing %d principals at rate %.6f", principals.size, self._rate)
            return principals * (1.0 + self._rate)

        raise FinError(f"Value must be a real number or numeric array. Got: {type(value).__name__}")

    # ===== Comparisons =====
    def __eq__(self, other):
        if not isinstance(other, RateCalculator):
            return NotImplemented
        return self._rate == other._rate

    # assign() mutates the rate, so instances are unhashable
    __hash__ = None

    # ===== Representation =====
    def __repr__(self):
        return f"RateCalculator(rate={self._rate:.4f})"

    def __str__(self):
        return f"Single-period rate: {format_percentage(self._rate)}"
