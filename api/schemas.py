"""
schemas.py — Request/Response modele FastAPI.
Oddzielone od contracts.py żeby API mogło ewoluować niezależnie.
"""
from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel


# ─────────────────────────── /evaluate ───────────────────────────

class EvaluateRequest(BaseModel):
    expression: str


class EvaluateResponse(BaseModel):
    expression: str
    value: Optional[float] = None  # None dla inf/NaN, JSON ich nie przenosi
    formatted: str
    pretty: str


# ─────────────────────────── /format ─────────────────────────────

class FormatRequest(BaseModel):
    expression: str


class FormatResponse(BaseModel):
    expression: str
    pretty: str


# ─────────────────────────── błędy / health ──────────────────────

class ErrorResponse(BaseModel):
    detail: str
    error_type: Literal["syntax", "evaluation"]


class HealthResponse(BaseModel):
    status: str
    version: str
