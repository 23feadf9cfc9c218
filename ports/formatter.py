"""
Port: Formatter
Odpowiedzialność: prezentacja operandów (separatory tysięcy). Bez wpływu na stan.
"""
from typing import Optional, Protocol, runtime_checkable

from contracts import CalculatorState, DisplayLines


@runtime_checkable
class Formatter(Protocol):
    def format_operand(self, operand: Optional[str]) -> Optional[str]:
        """
        Groups the integer part with thousands separators and appends the
        decimal part verbatim. None in, None out.
        """
        ...

    def render(self, state: CalculatorState) -> DisplayLines:
        """Builds the two display lines (previous + operation, current)."""
        ...
