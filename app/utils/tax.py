"""
utils/tax.py -- Rate-slab tax engine.

income_tax(income)             -> progressive slab tax (marginal-rate fold)
capital_gains_tax(gain, months, asset_type) -> (tax, term, exemption)

Slabs (config.INCOME_TAX_SLABS):
  <= 2,50,000  ->  0
  <= 5,00,000  ->  (income - 2,50,000) * 0.05
  <= 10,00,000 ->  12,500 + (income - 5,00,000) * 0.20
  > 10,00,000  ->  1,12,500 + (income - 10,00,000) * 0.30
A slab covers income above its lower bound up to and including its upper
bound, so income exactly at a threshold is taxed entirely in the lower slab.
"""
from __future__ import annotations

from typing import List, Tuple

from app import config
from app.models import CapitalGainsParams, IncomeTaxParams, round2


def slab_breakdown(income: float) -> List[dict]:
    """Tax owed in each slab the income reaches, lowest slab first."""
    breakdown = []
    lower = 0.0
    for upper, rate in config.INCOME_TAX_SLABS:
        if income <= lower:
            break
        taxable = min(income, upper) - lower
        breakdown.append(
            {"lower": lower, "upper": upper, "rate": rate, "taxable": taxable, "tax": taxable * rate}
        )
        lower = upper
    return breakdown


def income_tax(income: float) -> float:
    """Progressive slab tax: each marginal rate applies only inside its slab."""
    return sum(slab["tax"] for slab in slab_breakdown(income))


def calc_income_tax(params: IncomeTaxParams) -> dict:
    breakdown = slab_breakdown(params.annual_income)
    tax = income_tax(params.annual_income)
    marginal_rate = breakdown[-1]["rate"] if breakdown else 0.0

    return {
        "annual_income": params.annual_income,
        "age": params.age,
        "tax_liability": round2(tax),
        "marginal_rate": round2(marginal_rate * 100),
        "effective_rate": round2(tax / params.annual_income * 100) if params.annual_income else 0.0,
        "slabs": [
            {
                "from": slab["lower"],
                "to": None if slab["upper"] == float("inf") else slab["upper"],
                "rate": round2(slab["rate"] * 100),
                "taxable_income": round2(slab["taxable"]),
                "tax": round2(slab["tax"]),
            }
            for slab in breakdown
        ],
    }


def capital_gains_tax(gain: float, holding_months: int, asset_type: str) -> Tuple[float, str, float]:
    """
    Tax on a capital gain, branching on (asset_type, holding period).

    Returns (tax, term, exemption_applied) where term is "short", "long" or
    "flat" for asset types with a single rate.
    """
    rule = config.CAPITAL_GAINS_RULES[asset_type]
    threshold = rule["long_term_months"]

    if threshold is None:
        return gain * rule["short_rate"], "flat", 0.0

    if holding_months < threshold:
        return gain * rule["short_rate"], "short", 0.0

    exemption = min(gain, rule["long_term_exemption"])
    return (gain - exemption) * rule["long_rate"], "long", exemption


def calc_capital_gains_tax(params: CapitalGainsParams) -> dict:
    tax, term, exemption = capital_gains_tax(
        params.capital_gain, params.holding_period, params.asset_type
    )

    return {
        "capital_gain": params.capital_gain,
        "tax_liability": round2(tax),
        "asset_type": params.asset_type,
        "holding_period": params.holding_period,
        "term": term,
        "exemption_applied": round2(exemption),
    }
