"""
Adapter: GroupingFormatter
Implementuje port Formatter — separatory tysięcy w części całkowitej.

Część dziesiętna jest doklejana dosłownie (bez zaokrąglania), więc "5."
i "0.10" zostają na wyświetlaczu tak, jak je wpisano.
"""
from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Optional

from contracts import CalculatorState, DisplayLines


class GroupingFormatter:
    """Formatowanie operandów dla wyświetlacza (domyślnie en-US)."""

    def __init__(self, grouping_separator: str = ",") -> None:
        self.grouping_separator = grouping_separator

    # -- Formatter protocol ------------------------------------------------

    def format_operand(self, operand: Optional[str]) -> Optional[str]:
        if operand is None:
            return None

        integer, dot, decimal = operand.partition(".")
        if not dot:
            return self._format_integer(integer)
        return f"{self._format_integer(integer)}.{decimal}"

    def render(self, state: CalculatorState) -> DisplayLines:
        previous = self.format_operand(state.previous_operand) or ""
        return DisplayLines(
            previous=f"{previous} {state.operation or ''}",
            current=self.format_operand(state.current_operand),
        )

    # -- Prywatne ----------------------------------------------------------

    def _format_integer(self, integer: str) -> str:
        # "" (np. operand ".5") liczy się jako 0
        try:
            value = Decimal(integer) if integer.strip() else Decimal(0)
        except InvalidOperation:
            return "NaN"

        if value.is_nan():
            return "NaN"
        if value.is_infinite():
            return "-∞" if value.is_signed() else "∞"

        grouped = f"{value:,.0f}"
        if self.grouping_separator != ",":
            grouped = grouped.replace(",", self.grouping_separator)
        return grouped
