"""
Port: SessionStore
Odpowiedzialność: przechowywanie bieżącego stanu sesji kalkulatora (tylko w pamięci).
"""
from typing import Protocol, runtime_checkable

from contracts import CalculatorState


@runtime_checkable
class SessionStore(Protocol):
    def create(self) -> str:
        """Creates a session in the initial state. Returns its session_id."""
        ...

    def get(self, session_id: str) -> CalculatorState:
        """Returns the current state. Raises KeyError if unknown."""
        ...

    def put(self, session_id: str, state: CalculatorState) -> None:
        """Replaces the session's state wholesale. Raises KeyError if unknown."""
        ...

    def delete(self, session_id: str) -> None:
        """Removes the session. Raises KeyError if unknown."""
        ...

    def list_ids(self) -> list[str]:
        """Session ids, oldest first."""
        ...
