"""
Adapter: InMemorySessionStore
Implementuje port SessionStore — słownik w pamięci procesu, bez trwałości.

Kolejność wstawiania = kolejność wieku; po przekroczeniu max_sessions
usuwana jest najstarsza sesja.
"""
from __future__ import annotations

import logging
import uuid

from contracts import INITIAL_STATE, CalculatorState

logger = logging.getLogger("kalkulator.session_store")


class InMemorySessionStore:
    """Sesje kalkulatora trzymane w dict[session_id, CalculatorState]."""

    def __init__(self, max_sessions: int = 1000) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions musi być >= 1")
        self._max_sessions = max_sessions
        self._sessions: dict[str, CalculatorState] = {}

    # -- SessionStore protocol ---------------------------------------------

    def create(self) -> str:
        session_id = str(uuid.uuid4())
        self._sessions[session_id] = INITIAL_STATE
        while len(self._sessions) > self._max_sessions:
            oldest = next(iter(self._sessions))
            del self._sessions[oldest]
            logger.info("Session limit reached, evicted %s.", oldest)
        return session_id

    def get(self, session_id: str) -> CalculatorState:
        return self._sessions[self._known(session_id)]

    def put(self, session_id: str, state: CalculatorState) -> None:
        self._sessions[self._known(session_id)] = state

    def delete(self, session_id: str) -> None:
        del self._sessions[self._known(session_id)]

    def list_ids(self) -> list[str]:
        return list(self._sessions)

    def __len__(self) -> int:
        return len(self._sessions)

    # -- Prywatne ----------------------------------------------------------

    def _known(self, session_id: str) -> str:
        if session_id not in self._sessions:
            raise KeyError(f"Sesja nie istnieje: {session_id}")
        return session_id
