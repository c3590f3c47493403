"""Evaluate endpoint for Redex expressions."""

import logging
import math
from typing import Dict, Optional, Union

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from redex.config import DEFAULT_CONFIG
from redex.errors import EvaluationError, RedexError
from redex.runtime.interpreter import evaluate

logger = logging.getLogger(__name__)

router = APIRouter()


def is_json_number(value) -> bool:
    """False for inf/nan and for ints too long to print as decimal."""
    if value is None:
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    try:
        str(value)
    except ValueError:
        return False
    return True


class EvaluateRequest(BaseModel):
    """Request body for expression evaluation."""
    expression: str
    context: Dict[str, Union[int, float]] = Field(default_factory=dict)


class EvaluateResponse(BaseModel):
    """Response body for a successful evaluation."""
    success: bool = True
    result: Optional[Union[int, float]] = None
    env: Dict[str, Union[int, float]] = Field(default_factory=dict)
    provenance: Dict[str, str] = Field(default_factory=dict)
    expression: str


@router.post("/evaluate", response_model=EvaluateResponse)
async def evaluate_expression(request: EvaluateRequest):
    """Evaluate a Redex expression with an optional numeric context."""
    expression = request.expression
    limit = DEFAULT_CONFIG.max_expression_length
    if len(expression) > limit:
        raise HTTPException(
            status_code=400,
            detail={"success": False, "error": "ExpressionTooLong", "max_length": limit},
        )

    try:
        result = evaluate(expression, context=request.context)
    except RedexError as e:
        raise HTTPException(
            status_code=400,
            detail={"success": False, **e.to_dict(), "expression": expression},
        )
    except Exception as e:
        logger.exception("Unexpected error evaluating %r", expression)
        raise HTTPException(status_code=500, detail=str(e))

    unrepresentable = [
        name for name, value in [("result", result.result), *result.env.items()]
        if not is_json_number(value)
    ]
    if unrepresentable:
        error = EvaluationError(
            f"value of `{unrepresentable[0]}` cannot be represented as a JSON number"
        )
        raise HTTPException(
            status_code=400,
            detail={"success": False, **error.to_dict(), "expression": expression},
        )

    return EvaluateResponse(
        result=result.result,
        env=result.env,
        provenance=result.provenance,
        expression=expression,
    )
