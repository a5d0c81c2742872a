"""
utils/withdrawal.py -- Systematic withdrawal plan (SWP) simulator.

Each month:
  balance = balance * (1 + r) - withdrawal      r = annual_return_rate / 100 / 12
until the balance is exhausted (<= 0). The loop is capped at
config.MAX_SWP_MONTHS: when growth keeps pace with the withdrawal the balance
never runs out, and the result reports depleted=False instead of looping.
"""
from __future__ import annotations

import logging
from typing import Optional, Tuple

from app import config
from app.models import SWPParams, round2

logger = logging.getLogger(__name__)


def simulate_withdrawals(
    initial_investment: float,
    monthly_withdrawal: float,
    annual_return_rate: float,
    max_months: Optional[int] = None,
) -> Tuple[int, float, bool]:
    """
    Run the depletion loop.

    Returns:
        months    -- months simulated (the month the balance ran out, or the cap)
        balance   -- balance after the last simulated month
        depleted  -- True when the balance reached zero within the cap
    """
    cap = config.MAX_SWP_MONTHS if max_months is None else max_months
    r = annual_return_rate / 100.0 / 12
    balance = initial_investment
    months = 0

    while balance > 0:
        if months >= cap:
            logger.info("SWP reached the %d month cap without depleting", cap)
            return months, balance, False
        balance = balance * (1 + r) - monthly_withdrawal
        months += 1

    return months, balance, True


def format_duration(months: int) -> str:
    years, remaining = divmod(months, 12)
    return f"{years} years and {remaining} months"


def calc_swp(params: SWPParams) -> dict:
    months, balance, depleted = simulate_withdrawals(
        params.initial_investment,
        params.monthly_withdrawal,
        params.annual_return_rate,
    )

    if depleted:
        lasted = format_duration(months)
        # The final withdrawal only takes what was left in the account
        total_withdrawn = params.monthly_withdrawal * months + min(balance, 0.0)
    else:
        lasted = f"more than {months // 12} years"
        total_withdrawn = params.monthly_withdrawal * months

    return {
        "initial_investment": params.initial_investment,
        "monthly_withdrawal": params.monthly_withdrawal,
        "annual_return_rate": params.annual_return_rate,
        "investment_lasted": lasted,
        "months_lasted": months,
        "depleted": depleted,
        "total_withdrawn": round2(total_withdrawn),
    }
