"""
utils/validator.py -- Input validation shared by every calculator.

validate_params(model, raw)
  raw   -- any mapping of parameter name -> value (query params, JSON body)
  model -- the product's CalculationParams subclass (its field rules)

  Returns the typed, validated model instance, or raises
  CalculationValidationError listing every failing field:
    - missing required field
    - value not coercible to the declared type
    - value outside declared bounds
    - enumerated value outside its domain
    - malformed sequence
Optional fields fall back to the defaults declared on the model.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Type, TypeVar

from pydantic import ValidationError

from app.exceptions import CalculationValidationError
from app.models import CalculationParams

logger = logging.getLogger(__name__)

MSG_NOT_AN_OBJECT = "Request parameters must be a JSON object"

P = TypeVar("P", bound=CalculationParams)


def _describe(error: Dict[str, Any]) -> Dict[str, str]:
    """Turn one pydantic error into {"field", "message"}."""
    field = ".".join(str(part) for part in error.get("loc", ())) or "params"
    msg = error.get("msg", "Invalid value")
    # Strip "Value error, " prefix added by Pydantic v2 for ValueError
    if msg.startswith("Value error, "):
        msg = msg[len("Value error, "):]
    return {"field": field, "message": msg}


def validate_params(model: Type[P], raw: Any) -> P:
    """Validate a raw parameter mapping against a product's model."""
    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        raise CalculationValidationError(MSG_NOT_AN_OBJECT)

    try:
        return model.model_validate(dict(raw))
    except ValidationError as exc:
        errors: List[Dict[str, str]] = [_describe(e) for e in exc.errors()]
        logger.debug("Validation failed for %s: %s", model.__name__, errors)
        raise CalculationValidationError(errors=errors) from exc
