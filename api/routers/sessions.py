"""
Router: /sessions
Sesje kalkulatora: tworzenie, podgląd, zdarzenia, klawisze, usuwanie.

Stan sesji jest czytany, redukowany i zapisywany bez `await` pomiędzy,
więc na jednej pętli zdarzeń przejścia jednej sesji nie przeplatają się.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException

from adapters.session import CalculatorSession
from api.dependencies import get_formatter, get_key_mapper, get_reducer, get_session_store
from api.schemas import EventRequest, KeysRequest, SessionView

router = APIRouter(prefix="/sessions", tags=["sessions"])
logger = logging.getLogger("kalkulator.api.sessions")


def _view(session_id: str, session: CalculatorSession) -> SessionView:
    return SessionView(session_id=session_id, state=session.state, display=session.display)


def _open(session_id: str, store, reducer, formatter, key_mapper) -> CalculatorSession:
    try:
        state = store.get(session_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Session not found: {session_id}")
    return CalculatorSession(
        reducer=reducer, formatter=formatter, key_mapper=key_mapper, state=state,
    )


@router.post("", response_model=SessionView, status_code=201)
async def create_session(
    store=Depends(get_session_store),
    reducer=Depends(get_reducer),
    formatter=Depends(get_formatter),
    key_mapper=Depends(get_key_mapper),
) -> SessionView:
    session_id = store.create()
    logger.info("Session created: %s", session_id)
    session = _open(session_id, store, reducer, formatter, key_mapper)
    return _view(session_id, session)


@router.get("", response_model=list[str])
async def list_sessions(store=Depends(get_session_store)) -> list[str]:
    return store.list_ids()


@router.get("/{session_id}", response_model=SessionView)
async def get_session(
    session_id: str,
    store=Depends(get_session_store),
    reducer=Depends(get_reducer),
    formatter=Depends(get_formatter),
    key_mapper=Depends(get_key_mapper),
) -> SessionView:
    session = _open(session_id, store, reducer, formatter, key_mapper)
    return _view(session_id, session)


@router.post("/{session_id}/events", response_model=SessionView)
async def post_event(
    session_id: str,
    body: EventRequest,
    store=Depends(get_session_store),
    reducer=Depends(get_reducer),
    formatter=Depends(get_formatter),
    key_mapper=Depends(get_key_mapper),
) -> SessionView:
    session = _open(session_id, store, reducer, formatter, key_mapper)
    store.put(session_id, session.dispatch(body.event))
    return _view(session_id, session)


@router.post("/{session_id}/keys", response_model=SessionView)
async def post_keys(
    session_id: str,
    body: KeysRequest,
    store=Depends(get_session_store),
    reducer=Depends(get_reducer),
    formatter=Depends(get_formatter),
    key_mapper=Depends(get_key_mapper),
) -> SessionView:
    session = _open(session_id, store, reducer, formatter, key_mapper)
    store.put(session_id, session.press_many(body.keys))
    return _view(session_id, session)


@router.delete("/{session_id}", status_code=204)
async def delete_session(
    session_id: str,
    store=Depends(get_session_store),
) -> None:
    try:
        store.delete(session_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Session not found: {session_id}")
    logger.info("Session deleted: %s", session_id)
