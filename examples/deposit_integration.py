# deposit_integration.py

import logging
import numpy as np

from core.rate_calculator import RateCalculator
from pricing.fixed_income.deposit import (
    future_value,
    future_values,
    interest_earned,
    real_rate
)
from utils.helper import format_currency, format_percentage

logging.basicConfig(level=logging.DEBUG)

# ------------------------------
# 1. Certificate of deposit, 5% for one period
# ------------------------------

cd_rate = RateCalculator(0.05)
principal = 100.0

print(cd_rate)
print(f"Future value:    {format_currency(future_value(cd_rate, principal))}")
print(f"Interest earned: {format_currency(interest_earned(cd_rate, principal))}")

# ------------------------------
# 2. Same rate quoted in percentage points
# ------------------------------

quoted = RateCalculator.from_percentage(5.0)
print(f"Quoted matches decimal: {quoted == cd_rate}")

# ------------------------------
# 3. Copy and assignment
# ------------------------------

backup = cd_rate.copy()
loss = RateCalculator(-0.10)
backup.assign(loss)
print(f"Backup after assignment: {backup!r}, original: {cd_rate!r}")
print(f"200 at -10%: {format_currency(backup.single_period(200.0))}")

# ------------------------------
# 4. A ladder of deposits
# ------------------------------

ladder = np.array([1_000.0, 5_000.0, 10_000.0, 50_000.0])
for p, v in zip(ladder, future_values(cd_rate, ladder)):
    print(f"{format_currency(p):>12} -> {format_currency(v):>12}")

# ------------------------------
# 5. Inflation eats the return
# ------------------------------

print(f"Real return at 6% nominal, 4% inflation: {format_percentage(real_rate(0.06, 0.04))}")
