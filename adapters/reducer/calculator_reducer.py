"""
Adapter: CalculatorReducer
Implementuje port Reducer — przejścia stanu kalkulatora.

Każde przejście zwraca nową migawkę (model_copy z nadpisanymi polami);
zdarzenie bez efektu zwraca TEN SAM obiekt stanu. Reguły sprawdzane są
w kolejności priorytetu, pierwsza pasująca wygrywa.

  AddDigit        — dopisz cyfrę / zacznij nową liczbę po wyniku
  ChooseOperation — zapamiętaj operand i operację, łańcuch od lewej do prawej
  Clear           — stan początkowy
  Evaluate        — policz oczekującą operację, wynik do current_operand
  DeleteDigit     — usuń ostatni znak / skasuj świeży wynik
"""
from __future__ import annotations

import logging

from contracts import (
    INITIAL_STATE,
    AddDigit,
    CalculatorState,
    ChooseOperation,
    Clear,
    DeleteDigit,
    Evaluate,
    Event,
)
from adapters.evaluator.float_evaluator import FloatEvaluator
from ports.evaluator import Evaluator

logger = logging.getLogger("kalkulator.reducer")


class CalculatorReducer:
    """Czysta maszyna stanów kalkulatora; ewaluator wstrzykiwany."""

    def __init__(self, evaluator: Evaluator | None = None) -> None:
        self._evaluator = evaluator or FloatEvaluator()

    # -- Reducer protocol --------------------------------------------------

    def reduce(self, state: CalculatorState, event: Event) -> CalculatorState:
        if isinstance(event, AddDigit):
            return self._add_digit(state, event.digit)
        if isinstance(event, ChooseOperation):
            return self._choose_operation(state, event.operation)
        if isinstance(event, Clear):
            return INITIAL_STATE
        if isinstance(event, Evaluate):
            return self._evaluate(state)
        if isinstance(event, DeleteDigit):
            return self._delete_digit(state)

        logger.debug("Ignoring unknown event: %r", event)
        return state

    # -- Prywatne ----------------------------------------------------------

    def _add_digit(self, state: CalculatorState, digit: str) -> CalculatorState:
        if state.overwrite:
            return state.model_copy(update={"current_operand": digit, "overwrite": False})

        current = state.current_operand
        if digit == "0" and current == "0":
            return state
        if digit == "." and current is not None and "." in current:
            return state

        return state.model_copy(update={"current_operand": (current or "") + digit})

    def _choose_operation(self, state: CalculatorState, operation: str) -> CalculatorState:
        if state.current_operand is None and state.previous_operand is None:
            return state

        # Zmiana operatora przed wpisaniem drugiego operandu
        if state.current_operand is None:
            return state.model_copy(update={"operation": operation})

        if state.previous_operand is None:
            return state.model_copy(update={
                "previous_operand": state.current_operand,
                "operation": operation,
                "current_operand": None,
            })

        return state.model_copy(update={
            "previous_operand": self._compute(state),
            "operation": operation,
            "current_operand": None,
        })

    def _evaluate(self, state: CalculatorState) -> CalculatorState:
        if (
            state.operation is None
            or state.previous_operand is None
            or state.current_operand is None
        ):
            return state

        return state.model_copy(update={
            "overwrite": True,
            "previous_operand": None,
            "operation": None,
            "current_operand": self._compute(state),
        })

    def _delete_digit(self, state: CalculatorState) -> CalculatorState:
        if state.overwrite:
            return state.model_copy(update={"overwrite": False, "current_operand": None})

        current = state.current_operand
        if current is None:
            return state
        if len(current) == 1:
            return state.model_copy(update={"current_operand": None})

        return state.model_copy(update={"current_operand": current[:-1]})

    def _compute(self, state: CalculatorState) -> str:
        return self._evaluator.evaluate(
            state.previous_operand, state.current_operand, state.operation,
        )


_DEFAULT = CalculatorReducer()


def reduce(state: CalculatorState, event: Event) -> CalculatorState:
    """Funkcyjny skrót do CalculatorReducer().reduce()."""
    return _DEFAULT.reduce(state, event)
