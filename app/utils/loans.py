"""
utils/loans.py -- Amortizing-loan engine.

monthly_payment(principal, annual_rate, periods) -> level EMI
amortize(principal, annual_rate, periods, extra_payment, start) -> schedule
basic_loan(params)    -> loan-basic
advanced_loan(params) -> loan-advanced (extra payment + schedule + calendar labels)
generic_emi(params)   -> emi

Rules:
  r        = annual_rate / 100 / 12
  n        = term_in_years * 12
  payment  = P / n                              when r == 0
           = P * r * (1+r)^n / ((1+r)^n - 1)    otherwise
  Schedule is a per-period state machine over the remaining balance; it
  stops when the balance reaches 0 or after n periods, whichever is first.
  Full precision is kept throughout; values are rounded only in the output.
"""
from __future__ import annotations

from datetime import date
from typing import List, Optional, Tuple

from app.models import EmiParams, LoanAdvancedParams, LoanBasicParams, ScheduleEntry, round2
from app.utils.numeric import ensure_finite, growth_factor


def loan_periods(term_in_years: float) -> int:
    """Number of monthly installments for a term in (possibly fractional) years."""
    return max(1, int(round(term_in_years * 12)))


def monthly_payment(principal: float, annual_rate: float, periods: int) -> float:
    """Level monthly installment. A zero rate degenerates to straight division."""
    r = annual_rate / 100.0 / 12.0
    growth = growth_factor(r, periods)
    # Rates too small to move the growth factor behave like zero
    if growth == 1.0:
        return principal / periods
    return ensure_finite(principal * r * growth / (growth - 1.0))


def _calendar_label(start: date, period: int) -> Tuple[int, int]:
    """(month, year) of the given 1-based period, counting from start's month."""
    offset = start.month - 1 + period - 1
    return offset % 12 + 1, start.year + offset // 12


def amortize(
    principal: float,
    annual_rate: float,
    periods: int,
    extra_payment: float = 0.0,
    start: Optional[date] = None,
) -> Tuple[List[ScheduleEntry], float, float]:
    """
    Run the amortization state machine.

    Each period:
      interest       = balance * r
      principal_paid = payment - interest + extra_payment, clamped to balance
      balance       -= principal_paid

    Returns:
        entries        -- one ScheduleEntry per period actually run
        total_interest -- accumulated interest over those periods
        total_paid     -- accumulated cash paid (interest + principal)
    """
    r = annual_rate / 100.0 / 12.0
    payment = monthly_payment(principal, annual_rate, periods)

    balance = principal
    total_interest = 0.0
    total_paid = 0.0
    repaid = 0.0
    entries: List[ScheduleEntry] = []

    i = 1
    while i <= periods and balance > 0:
        interest = balance * r
        principal_paid = payment - interest + extra_payment
        if principal_paid > balance:
            principal_paid = balance

        balance -= principal_paid
        total_interest += interest
        total_paid += interest + principal_paid
        repaid += principal_paid

        month_label, year_label = _calendar_label(start, i) if start else (None, None)
        entries.append(
            ScheduleEntry(
                month=i,
                interest_payment=interest,
                principal_payment=principal_paid,
                remaining_balance=balance,
                principal_paid_percent=repaid / principal * 100.0,
                calendar_month=month_label,
                calendar_year=year_label,
            )
        )
        i += 1

    return entries, total_interest, total_paid


def basic_loan(params: LoanBasicParams) -> dict:
    n = loan_periods(params.term_in_years)
    payment = monthly_payment(params.principal, params.annual_interest_rate, n)
    total_payment = payment * n

    return {
        "monthly_payment": round2(payment),
        "total_payment": round2(total_payment),
        "total_interest": round2(total_payment - params.principal),
    }


def advanced_loan(params: LoanAdvancedParams, today: Optional[date] = None) -> dict:
    """
    Loan with an optional extra monthly payment and a full schedule.

    total_payment is the cash actually paid: payment x periods run, plus the
    extra principal applied, less the shortfall of a final partial installment.
    When today is given each entry carries a calendar month/year label.
    """
    n = loan_periods(params.term_in_years)
    payment = monthly_payment(params.principal, params.annual_interest_rate, n)

    entries, total_interest, total_paid = amortize(
        params.principal,
        params.annual_interest_rate,
        n,
        extra_payment=params.extra_payment,
        start=today,
    )

    if params.extra_payment > 0:
        _, baseline_interest, _ = amortize(params.principal, params.annual_interest_rate, n)
    else:
        baseline_interest = total_interest

    return {
        "monthly_payment": round2(payment),
        "total_payment": round2(total_paid),
        "total_interest": round2(total_interest),
        "months_to_payoff": len(entries),
        "interest_saved": round2(baseline_interest - total_interest),
        "amortization_schedule": [e.to_dict() for e in entries],
    }


def generic_emi(params: EmiParams) -> dict:
    n = params.loan_term_years * 12
    emi = monthly_payment(params.loan_amount, params.annual_interest_rate, n)
    total_payment = emi * n

    return {
        "loan_amount": round2(params.loan_amount),
        "annual_interest_rate": params.annual_interest_rate,
        "loan_term_years": params.loan_term_years,
        "emi": round2(emi),
        "total_payment": round2(total_payment),
        "total_interest": round2(total_payment - params.loan_amount),
    }
