"""
app/config.py -- Process-wide configuration.

Settings are read from the environment once at import. Rate tables, scheme
parameters and product config dicts are module-level constants: read-only,
never reloaded per request.

Config dict pattern (Strategy pattern):
  PERIODIC_SCHEMES[key]  -> consumed by deposits.calc_periodic_scheme
  LUMP_SUM_SCHEMES[key]  -> consumed by deposits.calc_lump_sum_scheme
  CAPITAL_GAINS_RULES    -> consumed by tax.capital_gains_tax
  INSURANCE_PLANS        -> consumed by finance.calc_life_insurance
"""
from __future__ import annotations

import os
from typing import Any

# ---------------------------------------------------------------------------
# Runtime settings
# ---------------------------------------------------------------------------

HOST: str = os.environ.get("HOST", "0.0.0.0")
PORT: int = int(os.environ.get("PORT", "8000"))
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()

API_PREFIX = "/api"

# Hard ceiling for the systematic-withdrawal loop (100 years of months)
MAX_SWP_MONTHS: int = int(os.environ.get("SWP_MAX_MONTHS", "1200"))

# Upper bound on every term, tenure or duration parameter, in years
MAX_TERM_YEARS = 100

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOGGING: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "{levelname} {asctime} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": LOG_LEVEL,
    },
    "loggers": {
        "app": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
        "uvicorn": {
            "handlers": ["console"],
            "level": "INFO",
            "propagate": False,
        },
    },
}

# ---------------------------------------------------------------------------
# Compounding / payout frequencies
# ---------------------------------------------------------------------------

PERIODS_PER_YEAR: dict[str, int] = {
    "monthly": 12,
    "quarterly": 4,
    "annually": 1,
}

# ---------------------------------------------------------------------------
# Static rate tables (example rates, percent)
# ---------------------------------------------------------------------------

BANK_INTEREST_RATES: dict[str, float] = {
    "Loan": 7.5,
    "FD": 6.0,
    "RD": 5.8,
}

POST_OFFICE_INTEREST_RATES: dict[str, float] = {
    "MIS": 7.4,
    "RD": 5.8,
    "TD 1 Year": 6.6,
    "TD 2 Year": 6.8,
    "TD 3 Year": 6.9,
    "TD 5 Year": 7.0,
    "NSC": 7.7,
}

# ---------------------------------------------------------------------------
# Scheme parameters
# ---------------------------------------------------------------------------

SSY_DEFAULT_TERM_YEARS = 21
SCSS_DEFAULT_TERM_YEARS = 5
PO_RD_DEFAULT_TENURE_YEARS = 5
MSSC_TENURE_YEARS = 2
MSSC_DEFAULT_RATE = 7.5
NSC_TENURE_YEARS = 5
PM_SYM_RETIREMENT_AGE = 60
SGB_ANNUAL_INTEREST_RATE = 0.025
GRATUITY_FACTOR = 15 / 26

HRA_BASIC_SALARY_CAP: dict[str, float] = {
    "metro": 0.50,
    "non-metro": 0.40,
}

# Level periodic contributions, annuity-due future value.
PERIODIC_SCHEMES: dict[str, dict[str, Any]] = {
    "ppf-fixed": {
        "contribution": "annual_contribution",
        "rate": "annual_interest_rate",
        "term": "term_in_years",
        "periods_per_year": 1,
        "invested": "total_deposits",
        "gain": "total_interest",
        "result": "maturity_amount",
    },
    "ssy": {
        "contribution": "annual_contribution",
        "rate": "annual_interest_rate",
        "term": "term_in_years",
        "periods_per_year": 1,
        "invested": "total_deposits",
        "gain": "total_interest",
        "result": "maturity_amount",
    },
    "sip": {
        "contribution": "monthly_investment",
        "rate": "annual_return_rate",
        "term": "years",
        "periods_per_year": 12,
        "invested": "total_invested",
        "gain": "estimated_returns",
        "result": "maturity_amount",
    },
    "elss": {
        "contribution": "monthly_investment",
        "rate": "annual_return_rate",
        "term": "years",
        "periods_per_year": 12,
        "invested": "total_invested",
        "gain": "estimated_returns",
        "result": "maturity_amount",
    },
    "nps": {
        "contribution": "monthly_contribution",
        "rate": "annual_return_rate",
        "term": "years",
        "periods_per_year": 12,
        "invested": "total_contribution",
        "gain": "total_returns",
        "result": "total_corpus",
    },
    "epf": {
        "contribution": "monthly_contribution",
        "rate": "annual_interest_rate",
        "term": "years",
        "periods_per_year": 12,
        "invested": "total_contribution",
        "gain": "total_interest",
        "result": "epf_total",
    },
}

# Single deposit, annual compounding. term=None means the tenure is fixed.
LUMP_SUM_SCHEMES: dict[str, dict[str, Any]] = {
    "td": {
        "principal": "principal_amount",
        "rate": "annual_interest_rate",
        "term": "tenure",
        "fixed_term": None,
    },
    "nsc": {
        "principal": "principal_amount",
        "rate": "annual_interest_rate",
        "term": None,
        "fixed_term": NSC_TENURE_YEARS,
    },
    "lumpsum": {
        "principal": "initial_investment",
        "rate": "annual_return_rate",
        "term": "investment_duration_years",
        "fixed_term": None,
    },
}

# ---------------------------------------------------------------------------
# Tax tables
# ---------------------------------------------------------------------------

# (upper_bound, marginal rate on income above the previous bound)
INCOME_TAX_SLABS: list[tuple[float, float]] = [
    (250_000, 0.0),
    (500_000, 0.05),
    (1_000_000, 0.20),
    (float("inf"), 0.30),
]

# long_term_months=None: one flat rate regardless of holding period.
# real_estate uses 0.20 for both terms as in the observed rules.
CAPITAL_GAINS_RULES: dict[str, dict[str, Any]] = {
    "equity": {
        "long_term_months": 12,
        "short_rate": 0.15,
        "long_rate": 0.10,
        "long_term_exemption": 100_000,
    },
    "real_estate": {
        "long_term_months": 24,
        "short_rate": 0.20,
        "long_rate": 0.20,
        "long_term_exemption": 0,
    },
    "other": {
        "long_term_months": None,
        "short_rate": 0.30,
        "long_rate": 0.30,
        "long_term_exemption": 0,
    },
}

# ---------------------------------------------------------------------------
# Insurance
# ---------------------------------------------------------------------------

INSURANCE_PLANS: dict[str, dict[str, Any]] = {
    "postal-life-insurance": {
        "age_threshold": 35,
        "younger_premium_rate": 0.02,
        "older_premium_rate": 0.03,
        "annual_bonus_rate": 0.05,
    },
    "rural-postal-life-insurance": {
        "age_threshold": 30,
        "younger_premium_rate": 0.015,
        "older_premium_rate": 0.025,
        "annual_bonus_rate": 0.04,
    },
}

FIXED_PREMIUM_PLANS: dict[str, dict[str, int]] = {
    "pm-jeevan-jyoti-bima": {"sum_assured": 200_000, "annual_premium": 436},
    "pm-suraksha-bima": {"sum_assured": 200_000, "annual_premium": 20},
}

# ---------------------------------------------------------------------------
# Static reference content
# ---------------------------------------------------------------------------

BONDS_OVERVIEW: list[dict[str, str]] = [
    {
        "type": "Floating Rate Saving Bonds",
        "description": (
            "These bonds have an interest rate that adjusts periodically based on "
            "benchmark rates. They are suitable for investors seeking regular income "
            "with protection against interest rate fluctuations."
        ),
    },
    {
        "type": "Sovereign Gold Bond Scheme",
        "description": (
            "A government bond that offers returns linked to gold prices. It is an "
            "alternative to physical gold investment with added interest income."
        ),
    },
    {
        "type": "54EC Bonds (Save Capital Gain Tax)",
        "description": (
            "These bonds help in saving long-term capital gain tax under Section 54EC "
            "of the Income Tax Act. They are generally issued by entities such as REC "
            "and NHAI."
        ),
    },
]

BONDS_54EC_INFO: dict[str, Any] = {
    "description": (
        "54EC bonds are issued by entities like NHAI and REC to help individuals save "
        "tax on long-term capital gains. Investments up to Rs. 50 lakh per financial "
        "year are eligible, and the bonds have a lock-in period of 5 years."
    ),
    "benefits": [
        "Save long-term capital gain tax.",
        "Issued by reputed government-backed entities.",
        "Fixed interest rate (typically 5-6%).",
    ],
}

MUTUAL_FUNDS_OVERVIEW: dict[str, Any] = {
    "definition": (
        "Mutual funds are investment vehicles that pool money from multiple investors "
        "to invest in securities like stocks, bonds, and other assets."
    ),
    "types": [
        "Equity Funds",
        "Debt Funds",
        "Balanced Funds",
        "Index Funds",
        "ELSS (Equity Linked Saving Scheme)",
    ],
    "benefits": ["Diversification", "Professional Management", "Liquidity", "Affordability"],
    "risks": ["Market risk", "Interest rate risk", "Credit risk"],
}

MUTUAL_FUNDS_TOP_LISTING: list[dict[str, str]] = [
    {"name": "ABC Equity Fund", "category": "Equity", "annual_return": "15%", "risk": "High"},
    {"name": "XYZ Debt Fund", "category": "Debt", "annual_return": "7%", "risk": "Low"},
]
