"""
Port: Reducer
Odpowiedzialność: czysta funkcja przejścia (stan, zdarzenie) → nowy stan.
"""
from typing import Protocol, runtime_checkable

from contracts import CalculatorState, Event


@runtime_checkable
class Reducer(Protocol):
    def reduce(self, state: CalculatorState, event: Event) -> CalculatorState:
        """
        Returns the next state for `event`.
        No-op events return the very same `state` object.
        Never raises for a well-formed event; unknown event kinds are ignored.
        """
        ...
