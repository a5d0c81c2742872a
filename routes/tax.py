"""routes/tax.py -- Income tax and capital gains tax"""
from __future__ import annotations

from fastapi import APIRouter, Request

from app.pipeline import compute

router = APIRouter()


@router.get("/income-tax-calculate")
def income_tax(request: Request) -> dict:
    """Progressive slab tax with a per-slab breakdown."""
    return compute("income-tax", request.query_params)


@router.get("/capital-gains-tax-calculate")
def capital_gains_tax(request: Request) -> dict:
    """Tax on a gain by asset type and holding period (months)."""
    return compute("capital-gains-tax", request.query_params)
