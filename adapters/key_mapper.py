"""
key_mapper.py - map keypad button labels to calculator events.

Labels follow the keypad grid in contracts.KEYPAD_LAYOUT, plus a few
keyboard-friendly aliases ("C" for AC, "<" for DEL, "x" for "*").
"""
from __future__ import annotations

import re

from contracts import (
    DIGITS,
    OPERATIONS,
    AddDigit,
    ChooseOperation,
    Clear,
    DeleteDigit,
    Evaluate,
    Event,
    UnknownKeyError,
)

_ALIASES = {
    "c": "AC",
    "ac": "AC",
    "del": "DEL",
    "<": "DEL",
    "x": "*",
    "×": "*",
    "÷": "/",
    ",": ".",
}

# Multi-letter labels first, then any single non-space character.
_TOKEN_RE = re.compile(r"AC|DEL|\S", re.IGNORECASE)


class ButtonKeyMapper:
    """Translate button presses into Event objects."""

    def to_event(self, key: str) -> Event:
        label = key.strip()
        label = _ALIASES.get(label.lower(), label)

        if label in DIGITS:
            return AddDigit(digit=label)
        if label in OPERATIONS:
            return ChooseOperation(operation=label)
        if label == "AC":
            return Clear()
        if label == "DEL":
            return DeleteDigit()
        if label == "=":
            return Evaluate()
        raise UnknownKeyError(f"Unknown key: {key!r}")

    def parse(self, keys: str) -> list[Event]:
        return [self.to_event(token) for token in _TOKEN_RE.findall(keys)]
