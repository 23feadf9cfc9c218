"""
contracts.py — Jedyne źródło prawdy dla typów danych Kalkulatora.
Stan, zdarzenia wejściowe i widok wyświetlacza; wszystkie moduły importują stąd.
"""
from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

CONTRACTS_VERSION = "1.0.0"

Operation = Literal["+", "-", "*", "/"]
Digit = Literal["0", "1", "2", "3", "4", "5", "6", "7", "8", "9", "."]

OPERATIONS: tuple[str, ...] = ("+", "-", "*", "/")
DIGITS: tuple[str, ...] = ("0", "1", "2", "3", "4", "5", "6", "7", "8", "9", ".")


# ─────────────────────────── Stan ────────────────────────────────────────

class CalculatorState(BaseModel):
    """
    Niemutowalna migawka stanu kalkulatora.
    None = pole nieobecne (nigdy pusty string zamiast braku).
    """
    model_config = ConfigDict(frozen=True)

    current_operand: Optional[str] = None   # wpisywany operand
    previous_operand: Optional[str] = None  # operand sprzed wyboru operacji
    operation: Optional[Operation] = None
    overwrite: bool = False                 # następna cyfra zastępuje wynik


INITIAL_STATE = CalculatorState()


# ─────────────────────────── Zdarzenia ───────────────────────────────────

class AddDigit(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["add-digit"] = "add-digit"
    digit: Digit


class ChooseOperation(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["choose-operation"] = "choose-operation"
    operation: Operation


class Clear(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["clear"] = "clear"


class Evaluate(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["evaluate"] = "evaluate"


class DeleteDigit(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["delete-digit"] = "delete-digit"


Event = Annotated[
    Union[AddDigit, ChooseOperation, Clear, Evaluate, DeleteDigit],
    Field(discriminator="type"),
]


# ─────────────────────────── Wyświetlacz ─────────────────────────────────

class DisplayLines(BaseModel):
    previous: str            # "1,234 +" albo " " gdy pusto
    current: Optional[str]   # None = brak bieżącego operandu


# Układ przycisków: (etykieta, szerokość w kolumnach)
KEYPAD_LAYOUT: tuple[tuple[tuple[str, int], ...], ...] = (
    (("AC", 2), ("DEL", 1), ("/", 1)),
    (("1", 1), ("2", 1), ("3", 1), ("*", 1)),
    (("4", 1), ("5", 1), ("6", 1), ("+", 1)),
    (("7", 1), ("8", 1), ("9", 1), ("-", 1)),
    ((".", 1), ("0", 1), ("=", 2)),
)


# ─────────────────────────── Błędy ───────────────────────────────────────

class UnknownOperationError(ValueError):
    """Operacja spoza {+, -, *, /} dotarła do ewaluatora — błąd kontraktu."""


class UnknownKeyError(ValueError):
    """Etykieta klawisza, której nie ma na klawiaturze."""
