# -*- coding: utf-8 -*-
"""
Created on Wed Sep  3 06:45:37 2025

@author: Simran
"""


class FinError(Exception):
    """Raised for invalid inputs to rate calculators and deposit helpers."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message
