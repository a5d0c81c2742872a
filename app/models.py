"""
Pydantic models for the Financial Calculators API.

Each *Params model declares the per-field validation rules of one product:
type, required/default, numeric bounds and enumerated domain. Constraints are
declared per product and never shared implicitly.

All output doubles are rounded to 2 decimal places, at the output boundary only.
"""
from __future__ import annotations

import calendar
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from app import config

Frequency = Literal["monthly", "quarterly", "annually"]


def round2(v: float) -> float:
    return round(float(v), 2)


class CalculationParams(BaseModel):
    """Base for every request model: ignore unknown params, reject NaN/inf."""

    model_config = ConfigDict(extra="ignore", allow_inf_nan=False, frozen=True)


# ---------------------------------------------------------------------------
# Loans
# ---------------------------------------------------------------------------

class LoanBasicParams(CalculationParams):
    principal: float = Field(..., gt=0)
    annual_interest_rate: float = Field(..., ge=0)
    term_in_years: float = Field(..., gt=0, le=config.MAX_TERM_YEARS)


class LoanAdvancedParams(LoanBasicParams):
    extra_payment: float = Field(0.0, ge=0)


class EmiParams(CalculationParams):
    loan_amount: float = Field(..., ge=1)
    annual_interest_rate: float = Field(..., ge=0)
    loan_term_years: int = Field(..., ge=1, le=config.MAX_TERM_YEARS)


# ---------------------------------------------------------------------------
# Bank deposits
# ---------------------------------------------------------------------------

class FixedDepositParams(CalculationParams):
    principal: float = Field(..., gt=0)
    annual_interest_rate: float = Field(..., ge=0)
    term_in_years: float = Field(..., gt=0, le=config.MAX_TERM_YEARS)
    payout_frequency: Frequency = "monthly"

    @model_validator(mode="after")
    def check_covers_one_payout(self) -> "FixedDepositParams":
        if self.term_in_years * config.PERIODS_PER_YEAR[self.payout_frequency] < 1:
            raise ValueError("term_in_years must cover at least one payout period")
        return self


class CumulativeFixedDepositParams(CalculationParams):
    principal: float = Field(..., gt=0)
    annual_interest_rate: float = Field(..., ge=0)
    term_in_years: float = Field(..., gt=0, le=config.MAX_TERM_YEARS)
    compounding_frequency: Frequency = "quarterly"


class RecurringDepositParams(CalculationParams):
    monthly_installment: float = Field(..., gt=0)
    annual_interest_rate: float = Field(..., ge=0)
    term_in_years: float = Field(..., gt=0, le=config.MAX_TERM_YEARS)
    compounding_frequency: Frequency = "quarterly"


# ---------------------------------------------------------------------------
# Post office / small savings
# ---------------------------------------------------------------------------

class PostOfficeRDParams(CalculationParams):
    monthly_deposit: float = Field(..., gt=0)
    annual_interest_rate: float = Field(..., ge=0)
    tenure: float = Field(config.PO_RD_DEFAULT_TENURE_YEARS, gt=0, le=config.MAX_TERM_YEARS)


class PPFFixedParams(CalculationParams):
    annual_contribution: float = Field(..., ge=0)
    annual_interest_rate: float = Field(..., ge=0)
    term_in_years: int = Field(..., ge=1, le=config.MAX_TERM_YEARS)


class SSYParams(PPFFixedParams):
    term_in_years: int = Field(config.SSY_DEFAULT_TERM_YEARS, ge=1, le=config.MAX_TERM_YEARS)


class PPFVariableParams(CalculationParams):
    contributions: List[float] = Field(..., min_length=1, max_length=config.MAX_TERM_YEARS)
    annual_interest_rate: float = Field(..., ge=0)

    @field_validator("contributions", mode="before")
    @classmethod
    def check_contributions(cls, v: object) -> object:
        if not isinstance(v, (list, tuple)):
            raise ValueError("Contributions should be an array of numbers")
        return v

    @field_validator("contributions")
    @classmethod
    def check_non_negative(cls, v: List[float]) -> List[float]:
        if any(c < 0 for c in v):
            raise ValueError("Contributions must be non-negative")
        return v


class SCSSParams(CalculationParams):
    principal_amount: float = Field(..., gt=0)
    annual_interest_rate: float = Field(..., ge=0)
    term_in_years: float = Field(config.SCSS_DEFAULT_TERM_YEARS, gt=0, le=config.MAX_TERM_YEARS)


class KVPParams(CalculationParams):
    principal_amount: float = Field(..., gt=0)
    annual_interest_rate: float = Field(..., gt=0)


class MSSCParams(CalculationParams):
    principal_amount: float = Field(..., gt=0)
    annual_interest_rate: float = Field(config.MSSC_DEFAULT_RATE, ge=0)


class MISParams(CalculationParams):
    principal_amount: float = Field(..., gt=0)
    annual_interest_rate: float = Field(..., ge=0)


class TDParams(CalculationParams):
    principal_amount: float = Field(..., gt=0)
    annual_interest_rate: float = Field(..., ge=0)
    tenure: float = Field(..., gt=0, le=config.MAX_TERM_YEARS)


class NSCParams(CalculationParams):
    principal_amount: float = Field(..., gt=0)
    annual_interest_rate: float = Field(..., ge=0)


# ---------------------------------------------------------------------------
# Mutual funds
# ---------------------------------------------------------------------------

class SIPParams(CalculationParams):
    monthly_investment: float = Field(..., ge=0)
    annual_return_rate: float = Field(..., ge=0)
    years: int = Field(..., ge=1, le=config.MAX_TERM_YEARS)


class LumpsumParams(CalculationParams):
    initial_investment: float = Field(..., ge=1)
    annual_return_rate: float = Field(..., ge=0)
    investment_duration_years: int = Field(..., ge=1, le=config.MAX_TERM_YEARS)


class MutualFundReturnsParams(CalculationParams):
    investment_amount: float = Field(..., ge=1)
    annual_return_rate: float = Field(..., ge=0)
    investment_duration_years: int = Field(..., ge=1, le=config.MAX_TERM_YEARS)
    investment_type: Literal["lumpsum", "sip"]
    sip_amount: Optional[float] = Field(None, ge=1)

    @model_validator(mode="after")
    def check_sip_amount(self) -> "MutualFundReturnsParams":
        if self.investment_type == "sip" and self.sip_amount is None:
            raise ValueError("sip_amount is required when investment_type is sip")
        return self


class SWPParams(CalculationParams):
    initial_investment: float = Field(..., ge=0)
    monthly_withdrawal: float = Field(..., ge=0)
    annual_return_rate: float = Field(..., ge=0)


# ---------------------------------------------------------------------------
# Retirement
# ---------------------------------------------------------------------------

class NPSParams(CalculationParams):
    monthly_contribution: float = Field(..., ge=0)
    annual_return_rate: float = Field(..., ge=0)
    years: int = Field(..., ge=1, le=config.MAX_TERM_YEARS)


class EPFParams(CalculationParams):
    monthly_contribution: float = Field(..., ge=0)
    annual_interest_rate: float = Field(..., ge=0)
    years: int = Field(..., ge=1, le=config.MAX_TERM_YEARS)


class APSParams(CalculationParams):
    monthly_contribution: float = Field(..., ge=0)
    years: int = Field(..., ge=1, le=config.MAX_TERM_YEARS)


class PMSYMParams(CalculationParams):
    monthly_contribution: float = Field(..., ge=0)
    age_of_entry: int = Field(..., ge=18, le=40)


class GratuityParams(CalculationParams):
    last_drawn_salary: float = Field(..., ge=0)
    years_of_service: int = Field(..., ge=5)


class RetirementParams(CalculationParams):
    retirement_goal: float = Field(..., ge=0)
    current_savings: float = Field(..., ge=0)
    interest_rate: float = Field(..., ge=0, le=100)
    years_until_retirement: int = Field(..., ge=1, le=config.MAX_TERM_YEARS)


# ---------------------------------------------------------------------------
# Tax
# ---------------------------------------------------------------------------

class IncomeTaxParams(CalculationParams):
    annual_income: float = Field(..., ge=0)
    age: int = Field(..., ge=18)


class CapitalGainsParams(CalculationParams):
    capital_gain: float = Field(..., ge=0)
    holding_period: int = Field(..., ge=0, description="Holding period in months")
    asset_type: Literal["equity", "real_estate", "other"]


# ---------------------------------------------------------------------------
# General
# ---------------------------------------------------------------------------

class SimpleInterestParams(CalculationParams):
    principal: float = Field(..., ge=0)
    rate: float = Field(..., ge=0)
    time: float = Field(..., ge=0, le=config.MAX_TERM_YEARS)


class CompoundInterestParams(SimpleInterestParams):
    compounds_per_year: int = Field(..., ge=1)


class InflationParams(CalculationParams):
    current_amount: float = Field(..., ge=0)
    inflation_rate: float = Field(..., ge=0)
    years: float = Field(..., ge=0, le=config.MAX_TERM_YEARS)


class CAGRParams(CalculationParams):
    initial_value: float = Field(..., ge=0)
    final_value: float = Field(..., ge=0)
    years: float = Field(..., ge=1, le=config.MAX_TERM_YEARS)


class HRAParams(CalculationParams):
    basic_salary: float = Field(..., ge=0)
    rent: float = Field(..., ge=0)
    other_allowances: float = Field(..., ge=0)
    city_type: Literal["metro", "non-metro"]


class APYParams(CalculationParams):
    principal: float = Field(..., ge=1)
    interest_rate: float = Field(..., ge=0, le=100)
    compounds_per_year: int = Field(..., ge=1)


class GSTParams(CalculationParams):
    amount: float = Field(..., ge=0)
    gst_rate: float = Field(..., ge=0)


class ArithmeticParams(CalculationParams):
    num1: float
    num2: float
    operation: Literal["add", "subtract", "multiply", "divide"]


# ---------------------------------------------------------------------------
# Bonds
# ---------------------------------------------------------------------------

class FloatingRateBondParams(CalculationParams):
    principal: float = Field(..., ge=1000)
    interest_rate: float = Field(..., ge=0)
    period: int = Field(..., ge=1, le=config.MAX_TERM_YEARS)


class SovereignGoldBondParams(CalculationParams):
    investment_amount: float = Field(..., ge=1000)
    gold_price_increase: float = Field(..., ge=0)
    period: int = Field(..., ge=1, le=config.MAX_TERM_YEARS)


# ---------------------------------------------------------------------------
# Insurance
# ---------------------------------------------------------------------------

class PLIParams(CalculationParams):
    sum_assured: float = Field(..., ge=10_000)
    age: int = Field(..., ge=18)
    term: int = Field(..., ge=5, le=config.MAX_TERM_YEARS)


class RPLIParams(PLIParams):
    sum_assured: float = Field(..., ge=5_000)


class PMJJBYParams(CalculationParams):
    age: int = Field(..., ge=18, le=50)


class PMSBYParams(CalculationParams):
    age: int = Field(..., ge=18, le=70)


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------

class PerformanceResponse(BaseModel):
    time: str
    memory: str
    threads: int


class HealthResponse(BaseModel):
    status: str


# ---------------------------------------------------------------------------
# Internal data containers (not Pydantic, for speed inside the amortization loop)
# ---------------------------------------------------------------------------

class ScheduleEntry:
    """One amortization period at full precision. Rounded only in to_dict()."""

    __slots__ = (
        "month",
        "interest_payment",
        "principal_payment",
        "remaining_balance",
        "principal_paid_percent",
        "calendar_month",
        "calendar_year",
    )

    def __init__(
        self,
        month: int,
        interest_payment: float,
        principal_payment: float,
        remaining_balance: float,
        principal_paid_percent: float = 0.0,
        calendar_month: Optional[int] = None,
        calendar_year: Optional[int] = None,
    ) -> None:
        self.month = month
        self.interest_payment = interest_payment
        self.principal_payment = principal_payment
        self.remaining_balance = remaining_balance
        self.principal_paid_percent = principal_paid_percent
        self.calendar_month = calendar_month
        self.calendar_year = calendar_year

    def to_dict(self) -> dict:
        out = {
            "month": self.month,
            "interest_payment": round2(self.interest_payment),
            "principal_payment": round2(self.principal_payment),
            "remaining_balance": round2(self.remaining_balance),
            "principal_paid_percent": round2(self.principal_paid_percent),
        }
        if self.calendar_month is not None:
            out["calendar_month"] = calendar.month_name[self.calendar_month]
            out["calendar_year"] = self.calendar_year
        return out
