# -*- coding: utf-8 -*-
"""
Created on Wed Sep  3 07:14:52 2025

@author: Simran
"""

# utils/math.py

import numpy as np

from utils.error import FinError


def as_float_array(values) -> np.ndarray:
    """
    Convert a scalar or sequence of numbers to a float ndarray.
    Strings, bools and objects are rejected rather than coerced.
    """
    try:
        arr = np.asarray(values)
    except (TypeError, ValueError):
        raise FinError(f"Expected numeric data. Got: {values!r}")

    if arr.dtype.kind not in "iuf":
        raise FinError(f"Expected numeric data. Got: {values!r}")
    return arr.astype(float)
