"""
utils/numeric.py -- Overflow guards for the growth formulas.

growth_factor(r, n)   -> (1 + r)^n, or CalculationDomainError if it overflows
ensure_finite(value)  -> value, or CalculationDomainError if it is inf/NaN

Python floats raise OverflowError from ** but silently produce inf from *
and /; numpy produces inf for both. Every engine primitive routes its result
through one of these so an overflow is reported, never returned.
"""
from __future__ import annotations

import math

from app.exceptions import CalculationDomainError

MSG_TOO_LARGE = "Result is too large to represent"


def ensure_finite(value: float) -> float:
    if not math.isfinite(value):
        raise CalculationDomainError(MSG_TOO_LARGE)
    return value


def growth_factor(rate: float, periods: float) -> float:
    """(1 + rate)^periods, rate as a per-period decimal."""
    try:
        factor = (1.0 + rate) ** periods
    except OverflowError:
        raise CalculationDomainError(MSG_TOO_LARGE) from None
    return ensure_finite(factor)
