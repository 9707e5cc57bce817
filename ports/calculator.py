"""
Port: ExpressionCalculator
Odpowiedzialność: pełny potok tekst → liczba, z jednolitym "brak wyniku".
"""
from typing import Optional, Protocol, runtime_checkable

from contracts import EvalOutcome


@runtime_checkable
class ExpressionCalculator(Protocol):
    def parse_and_evaluate(self, expression: str) -> Optional[float]:
        """
        Tokenizes, converts and evaluates an expression.
        Returns the number, or None for any failure (malformed input,
        division by zero, empty expression, NaN result).
        Never raises.
        """
        ...

    def explain(self, expression: str) -> EvalOutcome:
        """
        Same pipeline as parse_and_evaluate, but keeps the diagnostics:
        the failing stage's error code or the reduction steps.
        Never raises.
        """
        ...
