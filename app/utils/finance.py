"""
utils/finance.py -- Single-formula calculators, bonds and insurance.

simple_interest        SI = P * r * t
compound_interest      A  = P * (1 + r/n)^(n*t)
inflation              PV = amount / (1 + i)^t
cagr                   ((final / initial)^(1/years) - 1) * 100
gratuity               (15/26) * salary * years
hra                    min(rent, city cap * basic salary)
apy                    ((1 + r/n)^n - 1) * 100
gst                    amount * rate / 100
arithmetic             add | subtract | multiply | divide
floating-rate bonds    simple interest
sovereign gold bonds   gold growth P * (1 + g)^t plus 2.5% annual simple interest
insurance              age-banded premium, fixed-premium government schemes

All rates arrive in percent and are converted to decimals here.
"""
from __future__ import annotations

from typing import Any

from app import config
from app.exceptions import CalculationDomainError
from app.models import (
    APYParams,
    ArithmeticParams,
    CAGRParams,
    CompoundInterestParams,
    FloatingRateBondParams,
    GratuityParams,
    GSTParams,
    HRAParams,
    InflationParams,
    PLIParams,
    SimpleInterestParams,
    SovereignGoldBondParams,
    round2,
)
from app.utils.numeric import ensure_finite, growth_factor

# ---------------------------------------------------------------------------
# Interest
# ---------------------------------------------------------------------------

def compound_amount(principal: float, rate: float, compounds_per_year: int, years: float) -> float:
    """A = P * (1 + r/n)^(n*t), rate as a decimal."""
    growth = growth_factor(rate / compounds_per_year, compounds_per_year * years)
    return ensure_finite(principal * growth)


def calc_simple_interest(params: SimpleInterestParams) -> dict:
    interest = params.principal * (params.rate / 100.0) * params.time

    return {
        "principal": params.principal,
        "rate": params.rate,
        "time": params.time,
        "simple_interest": round2(interest),
        "total_amount": round2(params.principal + interest),
    }


def calc_compound_interest(params: CompoundInterestParams) -> dict:
    future_value = compound_amount(
        params.principal, params.rate / 100.0, params.compounds_per_year, params.time
    )

    return {
        "principal": params.principal,
        "rate": params.rate,
        "time": params.time,
        "compounds_per_year": params.compounds_per_year,
        "future_value": round2(future_value),
        "compound_interest": round2(future_value - params.principal),
    }


def calc_inflation(params: InflationParams) -> dict:
    """Purchasing power today of an amount received after `years` of inflation."""
    future_value = params.current_amount / growth_factor(params.inflation_rate / 100.0, params.years)

    return {
        "current_amount": params.current_amount,
        "inflation_rate": params.inflation_rate,
        "years": params.years,
        "future_value": round2(future_value),
    }


def calc_cagr(params: CAGRParams) -> dict:
    if params.initial_value == 0:
        raise CalculationDomainError("Initial value must be greater than zero to compute CAGR")

    ratio = ensure_finite(params.final_value / params.initial_value)
    cagr = (ratio ** (1.0 / params.years) - 1.0) * 100

    return {
        "initial_value": round2(params.initial_value),
        "final_value": round2(params.final_value),
        "years": params.years,
        "cagr": f"{cagr:.2f}%",
    }


def calc_apy(params: APYParams) -> dict:
    n = params.compounds_per_year
    apy = (growth_factor(params.interest_rate / 100.0 / n, n) - 1.0) * 100

    return {
        "principal": params.principal,
        "interest_rate": params.interest_rate,
        "compounds_per_year": n,
        "apy": round(apy, 4),
    }


# ---------------------------------------------------------------------------
# Salary, tax helpers, arithmetic
# ---------------------------------------------------------------------------

def calc_gratuity(params: GratuityParams) -> dict:
    gratuity = config.GRATUITY_FACTOR * params.last_drawn_salary * params.years_of_service

    return {
        "last_drawn_salary": params.last_drawn_salary,
        "years_of_service": params.years_of_service,
        "gratuity_amount": round2(gratuity),
    }


def calc_hra(params: HRAParams) -> dict:
    cap = config.HRA_BASIC_SALARY_CAP[params.city_type] * params.basic_salary

    return {
        "basic_salary": params.basic_salary,
        "rent": params.rent,
        "other_allowances": params.other_allowances,
        "city_type": params.city_type,
        "hra": round2(min(params.rent, cap)),
    }


def calc_gst(params: GSTParams) -> dict:
    gst_amount = params.amount * params.gst_rate / 100.0

    return {
        "original_amount": round2(params.amount),
        "gst_rate": params.gst_rate,
        "gst_amount": round2(gst_amount),
        "total_amount_including_gst": round2(params.amount + gst_amount),
    }


def calc_arithmetic(params: ArithmeticParams) -> dict:
    a, b = params.num1, params.num2
    if params.operation == "add":
        result = a + b
    elif params.operation == "subtract":
        result = a - b
    elif params.operation == "multiply":
        result = a * b
    else:
        if b == 0:
            raise CalculationDomainError("Division by zero is not allowed")
        result = a / b

    return {"result": result}


# ---------------------------------------------------------------------------
# Bonds
# ---------------------------------------------------------------------------

def calc_floating_rate_bond(params: FloatingRateBondParams) -> dict:
    total_interest = params.principal * (params.interest_rate / 100.0) * params.period

    return {
        "principal": params.principal,
        "interest_rate": params.interest_rate,
        "period": params.period,
        "total_interest": round2(total_interest),
        "total_amount": round2(params.principal + total_interest),
    }


def calc_sovereign_gold_bond(params: SovereignGoldBondParams) -> dict:
    total_value = ensure_finite(
        params.investment_amount * growth_factor(params.gold_price_increase / 100.0, params.period)
    )
    interest_income = params.investment_amount * config.SGB_ANNUAL_INTEREST_RATE * params.period

    return {
        "investment_amount": params.investment_amount,
        "gold_price_increase": params.gold_price_increase,
        "period": params.period,
        "total_value": round2(total_value),
        "interest_income": round2(interest_income),
        "final_value": round2(total_value + interest_income),
    }


# ---------------------------------------------------------------------------
# Insurance
# ---------------------------------------------------------------------------

def calc_life_insurance(params: PLIParams, plan: dict[str, Any]) -> dict:
    """
    Postal life insurance (and its rural variant, via config.INSURANCE_PLANS):
    premium rate banded by age, maturity = sum assured plus a yearly bonus.
    """
    if params.age < plan["age_threshold"]:
        premium_rate = plan["younger_premium_rate"]
    else:
        premium_rate = plan["older_premium_rate"]
    premium = params.sum_assured * premium_rate
    maturity = params.sum_assured + params.sum_assured * plan["annual_bonus_rate"] * params.term

    return {
        "sum_assured": params.sum_assured,
        "age": params.age,
        "term": params.term,
        "premium": round2(premium),
        "maturity_amount": round2(maturity),
    }


def calc_fixed_premium_plan(params: Any, plan: dict[str, int]) -> dict:
    return {
        "age": params.age,
        "sum_assured": plan["sum_assured"],
        "annual_premium": plan["annual_premium"],
    }
