"""
Port: KeyMapper
Odpowiedzialność: tłumaczenie etykiet przycisków na zdarzenia kalkulatora.
"""
from typing import Protocol, runtime_checkable

from contracts import Event


@runtime_checkable
class KeyMapper(Protocol):
    def to_event(self, key: str) -> Event:
        """
        Maps a single button label ("7", "+", "AC", "DEL", "=") to an Event.
        Raises UnknownKeyError for labels that are not on the keypad.
        """
        ...

    def parse(self, keys: str) -> list[Event]:
        """Tokenises a compact key string such as "12+3=" into events."""
        ...
