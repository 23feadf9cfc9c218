"""
api/main.py — punkt wejścia FastAPI.

Lifespan:
  - Tworzy adaptery (Evaluator, Reducer, Formatter, KeyMapper) raz na proces
  - Tworzy magazyn sesji w pamięci (bez trwałości)
  - Przy zamknięciu porzuca wszystkie sesje
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from adapters.evaluator.float_evaluator import FloatEvaluator
from adapters.formatter.grouping_formatter import GroupingFormatter
from adapters.key_mapper import ButtonKeyMapper
from adapters.reducer.calculator_reducer import CalculatorReducer
from adapters.session_store.in_memory_session_store import InMemorySessionStore
from api.routers import evaluate, sessions
from api.schemas import HealthResponse
from config import Settings
from contracts import UnknownKeyError

logger = logging.getLogger("kalkulator")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings

    # Adaptery bezstanowe — tworzone raz
    app.state.evaluator = FloatEvaluator()
    app.state.reducer = CalculatorReducer(evaluator=app.state.evaluator)
    app.state.formatter = GroupingFormatter(grouping_separator=settings.grouping_separator)
    app.state.key_mapper = ButtonKeyMapper()
    app.state.session_store = InMemorySessionStore(max_sessions=settings.max_sessions)

    logger.info("Kalkulator API ready (max_sessions=%d).", settings.max_sessions)
    yield

    logger.info("Shutting down, dropping %d session(s).", len(app.state.session_store))


def create_app() -> FastAPI:
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Routers
    app.include_router(sessions.router)
    app.include_router(evaluate.router)

    # Health
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health(request: Request):
        return HealthResponse(
            status="ok",
            version=settings.app_version,
            sessions=len(request.app.state.session_store),
        )

    # Globalne handlery błędów
    @app.exception_handler(KeyError)
    async def key_error_handler(request: Request, exc: KeyError):
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(UnknownKeyError)
    async def unknown_key_handler(request: Request, exc: UnknownKeyError):
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    return app


app = create_app()
