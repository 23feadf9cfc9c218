"""
schemas.py — Request/Response modele FastAPI.
Oddzielone od contracts.py żeby API mogło ewoluować niezależnie.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from contracts import CalculatorState, DisplayLines, Event, Operation


# ─────────────────────────── /sessions ───────────────────────────

class SessionView(BaseModel):
    session_id: str
    state: CalculatorState
    display: DisplayLines


class EventRequest(BaseModel):
    event: Event


class KeysRequest(BaseModel):
    keys: str = Field(..., min_length=1, max_length=1_000)  # np. "12+3="


# ─────────────────────────── /evaluate ───────────────────────────

class EvaluateRequest(BaseModel):
    previous_operand: Optional[str] = None
    current_operand: Optional[str] = None
    operation: Operation


class EvaluateResponse(BaseModel):
    result: str  # "" = brak wyniku (operand nie jest liczbą)


# ─────────────────────────── /health ─────────────────────────────

class HealthResponse(BaseModel):
    status: str
    version: str
    sessions: int
