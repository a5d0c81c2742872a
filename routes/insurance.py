"""routes/insurance.py -- Postal life insurance and government insurance schemes"""
from __future__ import annotations

from fastapi import APIRouter, Request

from app.pipeline import compute

router = APIRouter()


@router.get("/postal-life-insurance-calculate")
def postal_life_insurance(request: Request) -> dict:
    return compute("postal-life-insurance", request.query_params)


@router.get("/rural-postal-life-insurance-calculate")
def rural_postal_life_insurance(request: Request) -> dict:
    return compute("rural-postal-life-insurance", request.query_params)


@router.get("/pm-jeevan-jyoti-bima-calculate")
def pm_jeevan_jyoti_bima(request: Request) -> dict:
    return compute("pm-jeevan-jyoti-bima", request.query_params)


@router.get("/pm-suraksha-bima-calculate")
def pm_suraksha_bima(request: Request) -> dict:
    return compute("pm-suraksha-bima", request.query_params)
