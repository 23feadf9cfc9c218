"""
dependencies.py — FastAPI Dependency Injection.
Każda zależność zwraca odpowiedni adapter przez Request.app.state.
"""
from __future__ import annotations

from fastapi import Request

from adapters.evaluator.float_evaluator import FloatEvaluator
from adapters.formatter.grouping_formatter import GroupingFormatter
from adapters.key_mapper import ButtonKeyMapper
from adapters.reducer.calculator_reducer import CalculatorReducer
from adapters.session_store.in_memory_session_store import InMemorySessionStore


def get_session_store(request: Request) -> InMemorySessionStore:
    return request.app.state.session_store


def get_reducer(request: Request) -> CalculatorReducer:
    return request.app.state.reducer


def get_evaluator(request: Request) -> FloatEvaluator:
    return request.app.state.evaluator


def get_formatter(request: Request) -> GroupingFormatter:
    return request.app.state.formatter


def get_key_mapper(request: Request) -> ButtonKeyMapper:
    return request.app.state.key_mapper
