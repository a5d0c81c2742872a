"""routes/retirement.py -- Retirement schemes (NPS, EPF, APS, PM-SYM, gratuity, planning)"""
from __future__ import annotations

from fastapi import APIRouter, Request

from app.pipeline import compute

router = APIRouter()


@router.get("/nps-calculate")
def nps(request: Request) -> dict:
    return compute("nps", request.query_params)


@router.get("/epf-calculate")
def epf(request: Request) -> dict:
    return compute("epf", request.query_params)


@router.get("/aps-calculate")
def aps(request: Request) -> dict:
    return compute("aps", request.query_params)


@router.get("/pm-sym-calculate")
def pm_sym(request: Request) -> dict:
    """Total contribution until 60 for an entry age between 18 and 40."""
    return compute("pm-sym", request.query_params)


@router.get("/gratuity-calculate")
def gratuity(request: Request) -> dict:
    return compute("gratuity", request.query_params)


@router.get("/retirement-calculate")
def retirement(request: Request) -> dict:
    """Monthly saving required to reach a retirement goal."""
    return compute("retirement", request.query_params)
