"""
routes/bank.py -- Bank loans and deposits

  GET /loan-basic-calculate                -- level EMI, totals
  GET /loan-advanced-calculate             -- extra payments + dated schedule
  GET /emi-calculate                       -- generic EMI
  GET /fixed-deposit-calculate             -- interest paid out per period
  GET /cumulative-fixed-deposit-calculate  -- interest compounded to maturity
  GET /recurring-deposit-calculate         -- monthly installments
  GET /interest-rates                      -- bank rate table
"""
from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Request

from app.pipeline import compute

router = APIRouter()


@router.get("/loan-basic-calculate")
def loan_basic(request: Request) -> dict:
    """Monthly payment, total payment and total interest for an amortizing loan."""
    return compute("loan-basic", request.query_params)


@router.get("/loan-advanced-calculate")
def loan_advanced(request: Request) -> dict:
    """
    Amortization schedule with an optional extra monthly payment.
    Entries are labeled with calendar months starting from the current month.
    """
    return compute("loan-advanced", request.query_params, today=date.today())


@router.get("/emi-calculate")
def emi(request: Request) -> dict:
    return compute("emi", request.query_params)


@router.get("/fixed-deposit-calculate")
def fixed_deposit(request: Request) -> dict:
    """Non-cumulative FD: per-payout interest for the chosen payout frequency."""
    return compute("fixed-deposit", request.query_params)


@router.get("/cumulative-fixed-deposit-calculate")
def cumulative_fixed_deposit(request: Request) -> dict:
    return compute("cumulative-fixed-deposit", request.query_params)


@router.get("/recurring-deposit-calculate")
def recurring_deposit(request: Request) -> dict:
    return compute("recurring-deposit", request.query_params)


@router.get("/interest-rates")
def interest_rates() -> dict:
    return compute("interest-rates")
