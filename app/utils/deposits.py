"""
utils/deposits.py -- Deposit and annuity engine.

Primitives:
  lump_sum_future_value(P, r, n)     -> P * (1 + r)^n
  annuity_due_future_value(C, r, n)  -> C * ((1 + r)^n - 1) / r * (1 + r),  C * n when r == 0
  series_future_value(c, r, exps)    -> sum(c[i] * (1 + r)^exps[i]),  exps defaults to n - i
  years_to_double(r)                 -> ln 2 / ln(1 + r)

Shared product calculators (config dicts from app.config, Strategy pattern):
  calc_periodic_scheme(params, config)  -> PPF fixed, SSY, SIP, ELSS, NPS, EPF
  calc_lump_sum_scheme(params, config)  -> TD, NSC, lumpsum

Product-specific calculators follow below. r and n are always the per-period
rate and the period count derived from the declared frequency.
"""
from __future__ import annotations

import math
from typing import Any, Optional, Sequence

import numpy as np

from app import config
from app.exceptions import CalculationDomainError
from app.models import (
    APSParams,
    CumulativeFixedDepositParams,
    FixedDepositParams,
    KVPParams,
    MISParams,
    MSSCParams,
    MutualFundReturnsParams,
    PMSYMParams,
    PostOfficeRDParams,
    PPFVariableParams,
    RecurringDepositParams,
    RetirementParams,
    SCSSParams,
    round2,
)
from app.utils.numeric import ensure_finite, growth_factor

# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------

def lump_sum_future_value(principal: float, rate: float, periods: float) -> float:
    """A = P * (1 + r)^n."""
    return ensure_finite(principal * growth_factor(rate, periods))


def annuity_due_future_value(contribution: float, rate: float, periods: int) -> float:
    """Future value of level contributions made at the start of each period."""
    growth = growth_factor(rate, periods)
    if growth == 1.0:
        return ensure_finite(contribution * periods)
    return ensure_finite(contribution * ((growth - 1.0) / rate) * (1.0 + rate))


def series_future_value(
    contributions: Sequence[float],
    rate: float,
    exponents: Optional[Sequence[float]] = None,
) -> float:
    """
    Sum each contribution compounded forward for its remaining periods.

    Default exponents are n - i for the i-th (0-based) of n contributions,
    i.e. every contribution earns a full period in the period it is made.
    Uses numpy for bulk arithmetic -- no Python loop over the series.
    """
    amounts = np.asarray(contributions, dtype=np.float64)
    if amounts.size == 0:
        return 0.0
    if exponents is None:
        exps = amounts.size - np.arange(amounts.size, dtype=np.float64)
    else:
        exps = np.asarray(exponents, dtype=np.float64)
    # Overflow surfaces as inf and is rejected below
    with np.errstate(over="ignore", invalid="ignore"):
        total = np.sum(amounts * np.power(1.0 + rate, exps))
    return ensure_finite(float(total))


def years_to_double(rate: float) -> float:
    """Years for a lump sum to double at an annual rate (decimal)."""
    if rate <= 0:
        raise CalculationDomainError(
            "Interest rate must be greater than zero for the investment to double"
        )
    return math.log(2) / math.log(1.0 + rate)


# ---------------------------------------------------------------------------
# Shared config-driven calculators
# ---------------------------------------------------------------------------

def calc_periodic_scheme(params: Any, scheme: dict[str, Any]) -> dict:
    """
    Level periodic contributions, annuity-due future value.

    scheme -- one of config.PERIODIC_SCHEMES:
      {"contribution", "rate", "term", "periods_per_year",
       "invested", "gain", "result"}
    """
    contribution = getattr(params, scheme["contribution"])
    annual_rate = getattr(params, scheme["rate"])
    years = getattr(params, scheme["term"])
    m = scheme["periods_per_year"]

    r = annual_rate / 100.0 / m
    n = years * m
    maturity = annuity_due_future_value(contribution, r, n)
    invested = contribution * n

    return {
        scheme["contribution"]: contribution,
        scheme["invested"]: round2(invested),
        scheme["gain"]: round2(maturity - invested),
        scheme["result"]: round2(maturity),
        scheme["term"]: years,
        scheme["rate"]: annual_rate,
    }


def calc_lump_sum_scheme(params: Any, scheme: dict[str, Any]) -> dict:
    """
    Single deposit compounded annually.

    scheme -- one of config.LUMP_SUM_SCHEMES:
      {"principal", "rate", "term", "fixed_term"}; term=None uses fixed_term.
    """
    principal = getattr(params, scheme["principal"])
    annual_rate = getattr(params, scheme["rate"])
    years = scheme["fixed_term"] if scheme["term"] is None else getattr(params, scheme["term"])

    maturity = lump_sum_future_value(principal, annual_rate / 100.0, years)

    return {
        scheme["principal"]: principal,
        "annual_interest_rate": annual_rate,
        "tenure_in_years": years,
        "total_interest": round2(maturity - principal),
        "maturity_amount": round2(maturity),
    }


# ---------------------------------------------------------------------------
# Bank deposits
# ---------------------------------------------------------------------------

def calc_fixed_deposit(params: FixedDepositParams) -> dict:
    """
    Non-cumulative FD: interest is paid out every period and never
    compounded back, so the balance stays at the principal. The payout count
    is term x payouts per year rounded to the nearest whole payout; the
    params model guarantees at least one.
    """
    payouts_per_year = config.PERIODS_PER_YEAR[params.payout_frequency]
    rate_per_payout = params.annual_interest_rate / 100.0 / payouts_per_year
    total_payouts = int(round(params.term_in_years * payouts_per_year))

    interest_per_payout = params.principal * rate_per_payout
    schedule = [
        {
            "payout_number": i,
            "interest_payment": round2(interest_per_payout),
            "remaining_balance": round2(params.principal),
        }
        for i in range(1, total_payouts + 1)
    ]

    return {
        "principal": params.principal,
        "payout_frequency": params.payout_frequency,
        "interest_per_payout": round2(interest_per_payout),
        "total_interest": round2(interest_per_payout * total_payouts),
        "total_payouts": total_payouts,
        "amortization_schedule": schedule,
    }


def calc_cumulative_fixed_deposit(params: CumulativeFixedDepositParams) -> dict:
    """A = P * (1 + r/m)^(m*t)."""
    m = config.PERIODS_PER_YEAR[params.compounding_frequency]
    maturity = lump_sum_future_value(
        params.principal,
        params.annual_interest_rate / 100.0 / m,
        params.term_in_years * m,
    )

    return {
        "principal": params.principal,
        "total_interest": round2(maturity - params.principal),
        "maturity_amount": round2(maturity),
        "compounding_frequency": params.compounding_frequency,
        "term_in_years": params.term_in_years,
        "annual_interest_rate": params.annual_interest_rate,
    }


def recurring_deposit_maturity(
    installment: float,
    annual_rate: float,
    months: int,
    compounding_per_year: int,
) -> float:
    """
    Canonical recurring deposit.

    Installment i (0-based, monthly) stays invested for (months - i) months and
    compounds at the declared frequency over that time:
      sum(C * (1 + R/m)^(m * (months - i) / 12))
    """
    held_months = months - np.arange(months, dtype=np.float64)
    exponents = compounding_per_year * held_months / 12.0
    return series_future_value(
        np.full(months, installment, dtype=np.float64),
        annual_rate / 100.0 / compounding_per_year,
        exponents,
    )


def calc_recurring_deposit(params: RecurringDepositParams) -> dict:
    m = config.PERIODS_PER_YEAR[params.compounding_frequency]
    months = max(1, int(round(params.term_in_years * 12)))
    maturity = recurring_deposit_maturity(
        params.monthly_installment, params.annual_interest_rate, months, m
    )
    total_deposits = params.monthly_installment * months

    return {
        "monthly_installment": params.monthly_installment,
        "total_deposits": round2(total_deposits),
        "total_interest": round2(maturity - total_deposits),
        "maturity_amount": round2(maturity),
        "compounding_frequency": params.compounding_frequency,
        "term_in_years": params.term_in_years,
        "annual_interest_rate": params.annual_interest_rate,
    }


# ---------------------------------------------------------------------------
# Post office / small savings
# ---------------------------------------------------------------------------

def calc_post_office_rd(params: PostOfficeRDParams) -> dict:
    """Post office RD: the canonical RD with quarterly compounding."""
    months = max(1, int(round(params.tenure * 12)))
    maturity = recurring_deposit_maturity(
        params.monthly_deposit,
        params.annual_interest_rate,
        months,
        config.PERIODS_PER_YEAR["quarterly"],
    )
    total_deposits = params.monthly_deposit * months

    return {
        "monthly_deposit": params.monthly_deposit,
        "annual_interest_rate": params.annual_interest_rate,
        "tenure_in_years": params.tenure,
        "total_deposits": round2(total_deposits),
        "total_interest": round2(maturity - total_deposits),
        "maturity_amount": round2(maturity),
    }


def calc_ppf_variable(params: PPFVariableParams) -> dict:
    """Annual contributions of varying size: sum(c[i] * (1 + r)^(n - i))."""
    r = params.annual_interest_rate / 100.0
    maturity = series_future_value(params.contributions, r)
    total_deposits = float(np.sum(params.contributions))

    return {
        "contributions": list(params.contributions),
        "total_deposits": round2(total_deposits),
        "total_interest": round2(maturity - total_deposits),
        "maturity_amount": round2(maturity),
        "term_in_years": len(params.contributions),
        "annual_interest_rate": params.annual_interest_rate,
    }


def calc_scss(params: SCSSParams) -> dict:
    """Senior citizen scheme: simple interest paid out quarterly."""
    quarterly_interest = params.principal_amount * params.annual_interest_rate / 4 / 100.0
    total_interest = quarterly_interest * params.term_in_years * 4

    return {
        "principal_amount": params.principal_amount,
        "quarterly_interest": round2(quarterly_interest),
        "total_interest": round2(total_interest),
        "maturity_amount": round2(params.principal_amount + total_interest),
        "term_in_years": params.term_in_years,
        "annual_interest_rate": params.annual_interest_rate,
    }


def calc_kvp(params: KVPParams) -> dict:
    """Kisan Vikas Patra: solve for the time to double, not a fixed term."""
    r = params.annual_interest_rate / 100.0
    years = years_to_double(r)
    maturity = lump_sum_future_value(params.principal_amount, r, years)

    return {
        "principal_amount": params.principal_amount,
        "annual_interest_rate": params.annual_interest_rate,
        "years_to_double": round2(years),
        "maturity_amount": round2(maturity),
    }


def calc_mssc(params: MSSCParams) -> dict:
    """Mahila Samman certificate: fixed tenure, quarterly compounding."""
    quarters = config.MSSC_TENURE_YEARS * 4
    maturity = lump_sum_future_value(
        params.principal_amount, params.annual_interest_rate / 4 / 100.0, quarters
    )

    return {
        "principal_amount": params.principal_amount,
        "annual_interest_rate": params.annual_interest_rate,
        "tenure_in_years": config.MSSC_TENURE_YEARS,
        "total_interest": round2(maturity - params.principal_amount),
        "maturity_amount": round2(maturity),
    }


def calc_mis(params: MISParams) -> dict:
    monthly_interest = params.principal_amount * (params.annual_interest_rate / 100.0) / 12

    return {
        "principal_amount": params.principal_amount,
        "annual_interest_rate": params.annual_interest_rate,
        "monthly_interest": round2(monthly_interest),
        "annual_interest": round2(monthly_interest * 12),
    }


# ---------------------------------------------------------------------------
# Mutual funds / retirement
# ---------------------------------------------------------------------------

def calc_mutual_fund_returns(params: MutualFundReturnsParams) -> dict:
    """
    lumpsum -> P * (1 + r)^t with annual compounding
    sip     -> sum of monthly installments compounded for their remaining months
    """
    annual_rate = params.annual_return_rate / 100.0
    years = params.investment_duration_years

    if params.investment_type == "lumpsum":
        invested = params.investment_amount
        maturity = lump_sum_future_value(invested, annual_rate, years)
    else:
        months = years * 12
        maturity = series_future_value(
            np.full(months, params.sip_amount, dtype=np.float64), annual_rate / 12
        )
        invested = params.sip_amount * months

    return {
        "investment_type": params.investment_type,
        "total_invested": round2(invested),
        "total_interest_earned": round2(maturity - invested),
        "maturity_amount": round2(maturity),
        "annual_return_rate": params.annual_return_rate,
        "investment_duration_years": years,
    }


def calc_aps(params: APSParams) -> dict:
    """Simplified pension estimate: plain accumulation of contributions."""
    months = params.years * 12

    return {
        "monthly_contribution": params.monthly_contribution,
        "estimated_pension": round2(params.monthly_contribution * months),
    }


def calc_pm_sym(params: PMSYMParams) -> dict:
    years = config.PM_SYM_RETIREMENT_AGE - params.age_of_entry

    return {
        "monthly_contribution": params.monthly_contribution,
        "years_of_contribution": years,
        "total_contribution": round2(params.monthly_contribution * years * 12),
    }


def calc_retirement(params: RetirementParams) -> dict:
    """
    Monthly saving needed to close the gap between current savings and the goal:
      gap * r / ((1 + r)^n - 1),  gap / n when r == 0
    """
    months = params.years_until_retirement * 12
    r = params.interest_rate / 100.0 / 12
    gap = params.retirement_goal - params.current_savings

    growth = growth_factor(r, months)
    if growth > 1.0:
        contribution = gap * r / (growth - 1.0)
    else:
        contribution = gap / months

    return {
        "retirement_goal": params.retirement_goal,
        "current_savings": params.current_savings,
        "interest_rate": params.interest_rate,
        "years_until_retirement": params.years_until_retirement,
        "monthly_contribution_required": round2(contribution),
    }
