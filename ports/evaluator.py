"""
Port: Evaluator
Odpowiedzialność: obliczenie jednej oczekującej operacji dwuargumentowej.
"""
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class Evaluator(Protocol):
    def evaluate(
        self,
        previous_operand: Optional[str],
        current_operand: Optional[str],
        operation: Optional[str],
    ) -> str:
        """
        Computes `previous <operation> current` on floats and returns the
        canonical decimal text of the result.
        Returns "" when either operand is absent or not a number.
        Raises UnknownOperationError for an operation outside {+, -, *, /}.
        """
        ...
