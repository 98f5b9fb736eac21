"""
Router: POST /evaluate, POST /format
Błędy parsera i ewaluatora obsługują globalne handlery z api/main.py.
"""
from __future__ import annotations

import math

from fastapi import APIRouter, Depends

from adapters.parser.recursive_descent_parser import parse_expression
from adapters.visitors.evaluator import Evaluator
from adapters.visitors.pretty_printer import PrettyPrinter, format_number
from api.dependencies import get_evaluator, get_pretty_printer
from api.schemas import (
    ErrorResponse,
    EvaluateRequest,
    EvaluateResponse,
    FormatRequest,
    FormatResponse,
)

router = APIRouter(tags=["calculator"])

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    422: {"model": ErrorResponse},
}


@router.post("/evaluate", response_model=EvaluateResponse, responses=_ERROR_RESPONSES)
async def evaluate(
    body: EvaluateRequest,
    evaluator: Evaluator = Depends(get_evaluator),
    printer: PrettyPrinter = Depends(get_pretty_printer),
):
    ast = parse_expression(body.expression)
    value = evaluator.visit_expression(ast)
    return EvaluateResponse(
        expression=body.expression,
        value=value if math.isfinite(value) else None,
        formatted=format_number(value),
        pretty=printer.visit_expression(ast),
    )


@router.post("/format", response_model=FormatResponse, responses={422: {"model": ErrorResponse}})
async def format_expression(
    body: FormatRequest,
    printer: PrettyPrinter = Depends(get_pretty_printer),
):
    ast = parse_expression(body.expression)
    return FormatResponse(expression=body.expression, pretty=printer.visit_expression(ast))
