"""
Adapter: FloatEvaluator
Implementuje port Evaluator — jedna operacja dwuargumentowa na float.

Operandy to tekst z wyświetlacza; nieparsowalny operand daje "" (brak wyniku),
a nie wyjątek. Dzielenie przez zero nie jest obsługiwane specjalnie:
wynik to inf / -inf / nan, zapisany jako "Infinity" / "-Infinity" / "NaN".

Wynik jest zapisywany najkrótszą reprezentacją round-trip, w notacji
Number.prototype.toString: "8" zamiast "8.0", "1.5e-7" zamiast "1.5e-07".
"""
from __future__ import annotations

import logging
import math
from decimal import Decimal
from typing import Optional

from contracts import UnknownOperationError

logger = logging.getLogger("kalkulator.evaluator")

# Mapowanie symboli operatorów na operacje float
_OP_FUNCS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": lambda a, b: _ieee_div(a, b),
}

# Zakres wykładników dziesiętnych zapisywanych bez notacji wykładniczej
_MIN_PLAIN_EXP = -6
_MAX_PLAIN_EXP = 21


def _ieee_div(a: float, b: float) -> float:
    # Python rzuca ZeroDivisionError, IEEE 754 daje inf/nan.
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _parse_operand(text: Optional[str]) -> Optional[float]:
    """Zwraca float albo None gdy operand nieobecny / nie jest liczbą."""
    if text is None:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if math.isnan(value):
        return None
    return value


def number_to_text(value: float) -> str:
    """Najkrótsza reprezentacja dziesiętna float, zgodna z Number#toString."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    # repr() daje najkrótszy zapis round-trip; Decimal rozbija go na cyfry.
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = exponent + k  # pozycja przecinka względem pierwszej cyfry

    if k <= n <= _MAX_PLAIN_EXP:
        return sign + digits + "0" * (n - k)
    if 0 < n <= _MAX_PLAIN_EXP:
        return sign + digits[:n] + "." + digits[n:]
    if _MIN_PLAIN_EXP < n <= 0:
        return sign + "0." + "0" * (-n) + digits

    e = n - 1
    exp_text = ("e+" if e >= 0 else "e-") + str(abs(e))
    if k == 1:
        return sign + digits + exp_text
    return sign + digits[0] + "." + digits[1:] + exp_text


class FloatEvaluator:
    """Ewaluator pojedynczej oczekującej operacji kalkulatora."""

    # -- Evaluator protocol ------------------------------------------------

    def evaluate(
        self,
        previous_operand: Optional[str],
        current_operand: Optional[str],
        operation: Optional[str],
    ) -> str:
        prev = _parse_operand(previous_operand)
        curr = _parse_operand(current_operand)
        if prev is None or curr is None:
            logger.debug(
                "No result for %r %s %r: operand is not a number.",
                previous_operand, operation, current_operand,
            )
            return ""

        fn = _OP_FUNCS.get(operation)  # type: ignore[arg-type]
        if fn is None:
            raise UnknownOperationError(f"Nieznana operacja: {operation!r}")

        return number_to_text(fn(prev, curr))


_DEFAULT = FloatEvaluator()


def evaluate(
    previous_operand: Optional[str],
    current_operand: Optional[str],
    operation: Optional[str],
) -> str:
    """Funkcyjny skrót do FloatEvaluator().evaluate()."""
    return _DEFAULT.evaluate(previous_operand, current_operand, operation)
