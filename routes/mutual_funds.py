"""
routes/mutual_funds.py -- Mutual fund endpoints

  GET /mutual-funds-overview, /mutual-funds-top-listing   -- static content
  GET /sip-calculate, /elss-calculate                     -- monthly SIP maturity
  GET /lumpsum-calculate, /mutual-fund-returns-calculate
  GET /swp-calculate                                      -- how long withdrawals last
"""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request

from app.pipeline import compute

router = APIRouter()


@router.get("/mutual-funds-overview")
def mutual_funds_overview() -> dict:
    return compute("mutual-funds-overview")


@router.get("/mutual-funds-top-listing")
def mutual_funds_top_listing() -> Any:
    return compute("mutual-funds-top-listing")


@router.get("/sip-calculate")
def sip(request: Request) -> dict:
    return compute("sip", request.query_params)


@router.get("/elss-calculate")
def elss(request: Request) -> dict:
    return compute("elss", request.query_params)


@router.get("/lumpsum-calculate")
def lumpsum(request: Request) -> dict:
    return compute("lumpsum", request.query_params)


@router.get("/mutual-fund-returns-calculate")
def mutual_fund_returns(request: Request) -> dict:
    """Lumpsum or SIP returns, selected by investment_type."""
    return compute("mutual-fund-returns", request.query_params)


@router.get("/swp-calculate")
def swp(request: Request) -> dict:
    """
    Systematic withdrawal plan. Reports how long the investment lasts, or
    depleted=false when withdrawals never exhaust it.
    """
    return compute("swp", request.query_params)
