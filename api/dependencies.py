"""
dependencies.py — FastAPI Dependency Injection.
Każda zależność zwraca odpowiedni adapter przez Request.app.state.
"""
from __future__ import annotations

from fastapi import Request

from adapters.visitors.evaluator import Evaluator
from adapters.visitors.pretty_printer import PrettyPrinter


def get_evaluator(request: Request) -> Evaluator:
    return request.app.state.evaluator


def get_pretty_printer(request: Request) -> PrettyPrinter:
    return request.app.state.pretty_printer
