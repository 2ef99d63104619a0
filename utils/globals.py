# -*- coding: utf-8 -*-
"""
Created on Wed Sep  3 06:51:09 2025

@author: Simran
"""


# Percentage scale
PERCENT = 100.0
