"""
session.py — CalculatorSession: sterownik warstwy widoku.

Trzyma jedyną referencję do bieżącego stanu i podmienia ją w całości po
każdym zdarzeniu. Zdarzenia są przetwarzane synchronicznie, w kolejności
wywołań. Ślad (zdarzenie, stan) żyje tylko w pamięci sesji.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from adapters.formatter.grouping_formatter import GroupingFormatter
from adapters.key_mapper import ButtonKeyMapper
from adapters.reducer.calculator_reducer import CalculatorReducer
from contracts import INITIAL_STATE, CalculatorState, DisplayLines, Event
from ports.formatter import Formatter
from ports.key_mapper import KeyMapper
from ports.reducer import Reducer


@dataclass
class TraceEntry:
    event: Event
    state: CalculatorState


@dataclass
class CalculatorSession:
    reducer: Reducer = field(default_factory=CalculatorReducer)
    formatter: Formatter = field(default_factory=GroupingFormatter)
    key_mapper: KeyMapper = field(default_factory=ButtonKeyMapper)
    state: CalculatorState = INITIAL_STATE
    trace: list[TraceEntry] = field(default_factory=list)

    def dispatch(self, event: Event) -> CalculatorState:
        self.state = self.reducer.reduce(self.state, event)
        self.trace.append(TraceEntry(event=event, state=self.state))
        return self.state

    def press(self, key: str) -> CalculatorState:
        return self.dispatch(self.key_mapper.to_event(key))

    def press_many(self, keys: str) -> CalculatorState:
        """
        Naciska sekwencję klawiszy, np. "12+3=".
        Cała sekwencja jest walidowana przed pierwszym zdarzeniem, więc
        błędny klawisz (UnknownKeyError) nie zostawia sesji w połowie.
        """
        for event in self.key_mapper.parse(keys):
            self.dispatch(event)
        return self.state

    @property
    def display(self) -> DisplayLines:
        return self.formatter.render(self.state)
