"""
app/main.py -- FastAPI application entry point.

START_TIME and PROCESS are set at module level (singleton pattern).
All calculator routes are registered under /api.
Every CalculationError becomes {"error": message} with its status code.
"""
from __future__ import annotations

import logging
import logging.config
from datetime import datetime, timezone

import psutil
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app import config
from app.exceptions import CalculationError
from app.models import HealthResponse
from routes import bank as _bank_route
from routes import bonds as _bonds_route
from routes import general as _general_route
from routes import insurance as _insurance_route
from routes import mutual_funds as _mutual_funds_route
from routes import performance as _perf_route
from routes import post_office as _post_office_route
from routes import retirement as _retirement_route
from routes import tax as _tax_route

logging.config.dictConfig(config.LOGGING)
logger = logging.getLogger(__name__)

# Singleton performance tracking -- captured once at boot
START_TIME: datetime = datetime.now(timezone.utc)
PROCESS: psutil.Process = psutil.Process()

app = FastAPI(
    title="Financial Calculators API",
    version="1.0.0",
    description="Loan, deposit, mutual fund, retirement, insurance, bond and tax calculators.",
)

# ---------------------------------------------------------------------------
# Error handlers -- every failure is scoped to its request
# ---------------------------------------------------------------------------

@app.exception_handler(CalculationError)
async def calculation_exception_handler(request: Request, exc: CalculationError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        msg = errors[0].get("msg", "Validation error")
        # Strip "Value error, " prefix added by Pydantic v2 for ValueError
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, "):]
    else:
        msg = "Validation error"
    return JSONResponse(status_code=400, content={"error": msg})


# ---------------------------------------------------------------------------
# Register routes
# ---------------------------------------------------------------------------

BASE = config.API_PREFIX

app.include_router(_bank_route.router, prefix=BASE, tags=["bank"])
app.include_router(_post_office_route.router, prefix=BASE, tags=["post office"])
app.include_router(_mutual_funds_route.router, prefix=BASE, tags=["mutual funds"])
app.include_router(_retirement_route.router, prefix=BASE, tags=["retirement"])
app.include_router(_tax_route.router, prefix=BASE, tags=["tax"])
app.include_router(_insurance_route.router, prefix=BASE, tags=["insurance"])
app.include_router(_bonds_route.router, prefix=BASE, tags=["bonds"])
app.include_router(_general_route.router, prefix=BASE, tags=["general"])
app.include_router(_perf_route.router, prefix=BASE, tags=["diagnostics"])


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok")


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    logger.info("Starting server on %s:%d", config.HOST, config.PORT)
    uvicorn.run("app.main:app", host=config.HOST, port=config.PORT, reload=False)
