"""
routes/general.py -- General-purpose calculators

  GET /compound-interest, /simple-interest, /inflation
  GET /cagr-calculate, /hra-calculate, /apy-calculate, /gst-calculate
  GET /calculate   -- num1, num2, operation (add|subtract|multiply|divide)
"""
from __future__ import annotations

from fastapi import APIRouter, Request

from app.pipeline import compute

router = APIRouter()


@router.get("/compound-interest")
def compound_interest(request: Request) -> dict:
    return compute("compound-interest", request.query_params)


@router.get("/simple-interest")
def simple_interest(request: Request) -> dict:
    return compute("simple-interest", request.query_params)


@router.get("/inflation")
def inflation(request: Request) -> dict:
    """Present value of current_amount after `years` of inflation."""
    return compute("inflation", request.query_params)


@router.get("/cagr-calculate")
def cagr(request: Request) -> dict:
    return compute("cagr", request.query_params)


@router.get("/hra-calculate")
def hra(request: Request) -> dict:
    return compute("hra", request.query_params)


@router.get("/apy-calculate")
def apy(request: Request) -> dict:
    return compute("apy", request.query_params)


@router.get("/gst-calculate")
def gst(request: Request) -> dict:
    return compute("gst", request.query_params)


@router.get("/calculate")
def calculate(request: Request) -> dict:
    return compute("calculate", request.query_params)
