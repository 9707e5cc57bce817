"""
Port: PostfixEvaluator
Odpowiedzialność: deterministyczne liczenie wyrażeń postfiksowych na stosie.
"""
from typing import Protocol, runtime_checkable

from contracts import EvalResult, Token


@runtime_checkable
class PostfixEvaluator(Protocol):
    def eval_postfix(self, postfix: list[Token]) -> EvalResult:
        """
        Reduces a postfix token sequence to a single float.
        Returns EvalResult with:
          - value: the final number
          - steps: one "a op b = c" line per applied operator
        Raises DivisionByZero when a divisor is exactly 0.
        Raises StructurallyInvalidPostfix for missing operands or an empty input.
        Raises UnknownOperator for an operator outside '+ - * /'.
        """
        ...
