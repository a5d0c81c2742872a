"""
pipeline.py -- Single dispatch contract for every calculator.

compute(product_key, params, today=None)
  Runs: look up product -> validate params -> calculate

  product_key -- e.g. "loan-basic", "sip", "capital-gains-tax"
  params      -- raw mapping (query params or JSON body)
  today       -- current date; only calendar-labeled products read it

  Returns the result mapping, or raises:
    UnknownProductError        -- product_key not registered
    CalculationValidationError -- params failed the product's model
    CalculationDomainError     -- formula undefined for the validated inputs,
                                  or a result too large to represent

Critical rules implemented here:
  - Validation always completes before any calculation starts.
  - Static lookups return a fresh copy; the config tables are never exposed.
  - No state is kept between calls.
"""
from __future__ import annotations

import copy
import logging
import math
from datetime import date
from functools import partial
from typing import Any, Callable, Dict, NamedTuple, Optional, Type

from app import config
from app.exceptions import CalculationDomainError, CalculationValidationError, UnknownProductError
from app.models import (
    APSParams,
    APYParams,
    ArithmeticParams,
    CAGRParams,
    CapitalGainsParams,
    CalculationParams,
    CompoundInterestParams,
    CumulativeFixedDepositParams,
    EmiParams,
    EPFParams,
    FixedDepositParams,
    FloatingRateBondParams,
    GratuityParams,
    GSTParams,
    HRAParams,
    IncomeTaxParams,
    InflationParams,
    KVPParams,
    LoanAdvancedParams,
    LoanBasicParams,
    LumpsumParams,
    MISParams,
    MSSCParams,
    MutualFundReturnsParams,
    NPSParams,
    NSCParams,
    PLIParams,
    PMJJBYParams,
    PMSBYParams,
    PMSYMParams,
    PostOfficeRDParams,
    PPFFixedParams,
    PPFVariableParams,
    RecurringDepositParams,
    RetirementParams,
    RPLIParams,
    SCSSParams,
    SimpleInterestParams,
    SIPParams,
    SovereignGoldBondParams,
    SSYParams,
    SWPParams,
    TDParams,
)
from app.utils import deposits, finance, loans, tax, withdrawal
from app.utils.numeric import MSG_TOO_LARGE
from app.utils.validator import validate_params

logger = logging.getLogger(__name__)


class Calculator(NamedTuple):
    """model=None marks a static lookup that takes no parameters."""

    model: Optional[Type[CalculationParams]]
    func: Callable[..., Any]
    dated: bool = False


def _static(table: Any) -> Calculator:
    return Calculator(None, partial(copy.deepcopy, table))


def _periodic(key: str) -> Callable[[Any], dict]:
    return partial(deposits.calc_periodic_scheme, scheme=config.PERIODIC_SCHEMES[key])


def _lump_sum(key: str) -> Callable[[Any], dict]:
    return partial(deposits.calc_lump_sum_scheme, scheme=config.LUMP_SUM_SCHEMES[key])


PRODUCTS: Dict[str, Calculator] = {
    # Loans
    "loan-basic": Calculator(LoanBasicParams, loans.basic_loan),
    "loan-advanced": Calculator(LoanAdvancedParams, loans.advanced_loan, dated=True),
    "emi": Calculator(EmiParams, loans.generic_emi),
    # Bank deposits
    "fixed-deposit": Calculator(FixedDepositParams, deposits.calc_fixed_deposit),
    "cumulative-fixed-deposit": Calculator(
        CumulativeFixedDepositParams, deposits.calc_cumulative_fixed_deposit
    ),
    "recurring-deposit": Calculator(RecurringDepositParams, deposits.calc_recurring_deposit),
    "interest-rates": _static(config.BANK_INTEREST_RATES),
    # Post office / small savings
    "ppf-fixed": Calculator(PPFFixedParams, _periodic("ppf-fixed")),
    "ppf-variable": Calculator(PPFVariableParams, deposits.calc_ppf_variable),
    "ssy": Calculator(SSYParams, _periodic("ssy")),
    "scss": Calculator(SCSSParams, deposits.calc_scss),
    "kvp": Calculator(KVPParams, deposits.calc_kvp),
    "mssc": Calculator(MSSCParams, deposits.calc_mssc),
    "mis": Calculator(MISParams, deposits.calc_mis),
    "rd": Calculator(PostOfficeRDParams, deposits.calc_post_office_rd),
    "td": Calculator(TDParams, _lump_sum("td")),
    "nsc": Calculator(NSCParams, _lump_sum("nsc")),
    "post-office-interest-rates": _static(config.POST_OFFICE_INTEREST_RATES),
    # Mutual funds
    "mutual-funds-overview": _static(config.MUTUAL_FUNDS_OVERVIEW),
    "mutual-funds-top-listing": _static(config.MUTUAL_FUNDS_TOP_LISTING),
    "sip": Calculator(SIPParams, _periodic("sip")),
    "elss": Calculator(SIPParams, _periodic("elss")),
    "lumpsum": Calculator(LumpsumParams, _lump_sum("lumpsum")),
    "mutual-fund-returns": Calculator(MutualFundReturnsParams, deposits.calc_mutual_fund_returns),
    "swp": Calculator(SWPParams, withdrawal.calc_swp),
    # Retirement
    "nps": Calculator(NPSParams, _periodic("nps")),
    "epf": Calculator(EPFParams, _periodic("epf")),
    "aps": Calculator(APSParams, deposits.calc_aps),
    "pm-sym": Calculator(PMSYMParams, deposits.calc_pm_sym),
    "gratuity": Calculator(GratuityParams, finance.calc_gratuity),
    "retirement": Calculator(RetirementParams, deposits.calc_retirement),
    # Tax
    "income-tax": Calculator(IncomeTaxParams, tax.calc_income_tax),
    "capital-gains-tax": Calculator(CapitalGainsParams, tax.calc_capital_gains_tax),
    # Insurance
    "postal-life-insurance": Calculator(
        PLIParams,
        partial(finance.calc_life_insurance, plan=config.INSURANCE_PLANS["postal-life-insurance"]),
    ),
    "rural-postal-life-insurance": Calculator(
        RPLIParams,
        partial(
            finance.calc_life_insurance,
            plan=config.INSURANCE_PLANS["rural-postal-life-insurance"],
        ),
    ),
    "pm-jeevan-jyoti-bima": Calculator(
        PMJJBYParams,
        partial(finance.calc_fixed_premium_plan, plan=config.FIXED_PREMIUM_PLANS["pm-jeevan-jyoti-bima"]),
    ),
    "pm-suraksha-bima": Calculator(
        PMSBYParams,
        partial(finance.calc_fixed_premium_plan, plan=config.FIXED_PREMIUM_PLANS["pm-suraksha-bima"]),
    ),
    # Bonds
    "bonds-overview": _static(config.BONDS_OVERVIEW),
    "54ec-bonds-info": _static(config.BONDS_54EC_INFO),
    "floating-rate-bonds": Calculator(FloatingRateBondParams, finance.calc_floating_rate_bond),
    "sovereign-gold-bonds": Calculator(SovereignGoldBondParams, finance.calc_sovereign_gold_bond),
    # General
    "simple-interest": Calculator(SimpleInterestParams, finance.calc_simple_interest),
    "compound-interest": Calculator(CompoundInterestParams, finance.calc_compound_interest),
    "inflation": Calculator(InflationParams, finance.calc_inflation),
    "cagr": Calculator(CAGRParams, finance.calc_cagr),
    "hra": Calculator(HRAParams, finance.calc_hra),
    "apy": Calculator(APYParams, finance.calc_apy),
    "gst": Calculator(GSTParams, finance.calc_gst),
    "calculate": Calculator(ArithmeticParams, finance.calc_arithmetic),
}


def _all_finite(value: Any) -> bool:
    """True when every float inside a result mapping is finite."""
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, dict):
        return all(_all_finite(v) for v in value.values())
    if isinstance(value, list):
        return all(_all_finite(v) for v in value)
    return True


def compute(
    product_key: str,
    params: Any = None,
    today: Optional[date] = None,
) -> Any:
    """
    Validate params for product_key and run its calculator.

    Validation errors are logged at INFO, domain errors at WARNING; both are
    re-raised for the caller to translate.
    """
    calculator = PRODUCTS.get(product_key)
    if calculator is None:
        raise UnknownProductError(f"Unknown calculator: {product_key}")

    if calculator.model is None:
        return calculator.func()

    try:
        validated = validate_params(calculator.model, params)
    except CalculationValidationError as exc:
        logger.info("Rejected %s: %s", product_key, exc.message)
        raise

    logger.debug("Computing %s with %s", product_key, validated)
    try:
        if calculator.dated:
            result = calculator.func(validated, today=today)
        else:
            result = calculator.func(validated)
        if not _all_finite(result):
            raise CalculationDomainError(MSG_TOO_LARGE)
        return result
    except CalculationDomainError as exc:
        logger.warning("Undefined %s calculation: %s", product_key, exc.message)
        raise
