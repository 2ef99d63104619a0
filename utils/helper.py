# -*- coding: utf-8 -*-
"""
Created on Wed Sep  3 06:58:20 2025

@author: Simran
"""

import numbers

from utils.globals import PERCENT


def is_real_number(value):
    
    # bool is an Integral subclass but never a rate or an amount
    return isinstance(value, numbers.Real) and not isinstance(value, bool)

def format_currency(value, decimals=2):
    
    return f"${value:,.{decimals}f}"

def format_percentage(rate, decimals=2):
    
    return f"{rate * PERCENT:.{decimals}f}%"
