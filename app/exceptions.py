"""
app/exceptions.py -- Calculation error hierarchy.

Every error is scoped to a single request. The HTTP layer maps each class to
its status_code and returns {"error": message}.
"""
from __future__ import annotations

from typing import Dict, List, Optional


class CalculationError(Exception):
    """Base class for all request-scoped calculation failures."""

    status_code: int = 400
    default_message: str = "Calculation failed"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class CalculationValidationError(CalculationError):
    """Raised when input parameters fail validation. Always user-correctable."""

    default_message = "Inputs must be valid numbers"

    def __init__(
        self,
        message: Optional[str] = None,
        errors: Optional[List[Dict[str, str]]] = None,
    ) -> None:
        self.errors = errors or []
        if message is None and self.errors:
            message = "; ".join(f"{e['field']}: {e['message']}" for e in self.errors)
        super().__init__(message)


class CalculationDomainError(CalculationError):
    """Raised when a formula would be mathematically undefined for the inputs."""

    default_message = "Calculation is undefined for the given inputs"


class UnknownProductError(CalculationError):
    """Raised when compute() is asked for a product key it does not know."""

    status_code = 404
    default_message = "Unknown calculator"
