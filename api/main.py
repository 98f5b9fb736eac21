"""
api/main.py — punkt wejścia FastAPI.

Lifespan:
  - Inicjalizuje bezstanowe adaptery (Evaluator, PrettyPrinter) w app.state
  - Parser tworzony jest per żądanie (kursor po tokenach jest jednorazowy)

Błędy ParserError → 422, EvaluatorError → 400 (globalne handlery).
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from adapters.visitors.evaluator import Evaluator
from adapters.visitors.pretty_printer import PrettyPrinter
from api.routers import evaluate
from api.schemas import HealthResponse
from config import Settings
from contracts import EvaluatorError, ParserError

logger = logging.getLogger("calculator.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.evaluator = Evaluator()
    app.state.pretty_printer = PrettyPrinter()

    logger.info("Calculator API ready.")
    yield

    logger.info("Shutting down.")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Routers
    app.include_router(evaluate.router)

    # Health
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health():
        return HealthResponse(status="ok", version=settings.app_version)

    # Globalne handlery błędów
    @app.exception_handler(ParserError)
    async def parser_error_handler(request: Request, exc: ParserError):
        return JSONResponse(status_code=422, content={"detail": str(exc), "error_type": "syntax"})

    @app.exception_handler(EvaluatorError)
    async def evaluator_error_handler(request: Request, exc: EvaluatorError):
        return JSONResponse(status_code=400, content={"detail": str(exc), "error_type": "evaluation"})

    return app


app = create_app()
