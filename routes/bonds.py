"""routes/bonds.py -- Bond overview and return calculators"""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request

from app.pipeline import compute

router = APIRouter()


@router.get("/bonds-overview")
def bonds_overview() -> Any:
    return compute("bonds-overview")


@router.get("/floating-rate-bonds-calculate")
def floating_rate_bonds(request: Request) -> dict:
    return compute("floating-rate-bonds", request.query_params)


@router.get("/sovereign-gold-bonds-calculate")
def sovereign_gold_bonds(request: Request) -> dict:
    """Gold price growth plus the fixed 2.5% annual interest."""
    return compute("sovereign-gold-bonds", request.query_params)


@router.get("/54ec-bonds-info")
def bonds_54ec_info() -> dict:
    return compute("54ec-bonds-info")
