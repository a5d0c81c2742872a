"""
routes/post_office.py -- Post office and small-savings schemes

  GET  /ppf-fixed-calculate        -- fixed annual PPF contribution
  POST /ppf-variable-calculate     -- JSON body {"contributions": [...], "annual_interest_rate"}
  GET  /ssy-calculate, /scss-calculate, /kvp-calculate, /mssc-calculate
  GET  /mis-calculate, /rd-calculate, /td-calculate, /nsc-calculate
  GET  /post-office-interest-rates
"""
from __future__ import annotations

from fastapi import APIRouter, Request

from app.exceptions import CalculationValidationError
from app.pipeline import compute

router = APIRouter()


@router.get("/ppf-fixed-calculate")
def ppf_fixed(request: Request) -> dict:
    return compute("ppf-fixed", request.query_params)


@router.post("/ppf-variable-calculate")
async def ppf_variable(request: Request) -> dict:
    """PPF with a different contribution each year, passed as a JSON array."""
    try:
        body = await request.json()
    except ValueError:
        raise CalculationValidationError("Request body must be valid JSON") from None
    return compute("ppf-variable", body)


@router.get("/ssy-calculate")
def ssy(request: Request) -> dict:
    """Sukanya Samriddhi Yojana. Term defaults to 21 years."""
    return compute("ssy", request.query_params)


@router.get("/scss-calculate")
def scss(request: Request) -> dict:
    return compute("scss", request.query_params)


@router.get("/kvp-calculate")
def kvp(request: Request) -> dict:
    """Kisan Vikas Patra: years for the deposit to double."""
    return compute("kvp", request.query_params)


@router.get("/mssc-calculate")
def mssc(request: Request) -> dict:
    return compute("mssc", request.query_params)


@router.get("/mis-calculate")
def mis(request: Request) -> dict:
    return compute("mis", request.query_params)


@router.get("/rd-calculate")
def rd(request: Request) -> dict:
    return compute("rd", request.query_params)


@router.get("/td-calculate")
def td(request: Request) -> dict:
    return compute("td", request.query_params)


@router.get("/nsc-calculate")
def nsc(request: Request) -> dict:
    return compute("nsc", request.query_params)


@router.get("/post-office-interest-rates")
def post_office_interest_rates() -> dict:
    return compute("post-office-interest-rates")
