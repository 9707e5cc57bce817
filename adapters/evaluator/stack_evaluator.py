"""
Adapter: StackEvaluator
Implementuje port PostfixEvaluator: jednoprzebiegowa redukcja RPN na stosie.

Liczba → push. Operator → pop b, pop a, push (a op b).
Dzielenie przez dokładne zero → DivisionByZero (nie inf/NaN).

Nadmiarowe wartości na stosie po przejściu (np. "1 2"):
  strict_operands=False: zwracany jest wierzchołek, reszta odrzucana
  strict_operands=True:  StructurallyInvalidPostfix
"""
from __future__ import annotations

import logging
import math
import operator
from typing import Callable

from contracts import (
    DivisionByZero,
    EvalResult,
    NotANumber,
    NumberToken,
    OperatorToken,
    StructurallyInvalidPostfix,
    Token,
    UnknownOperator,
    format_number,
)

logger = logging.getLogger("exprcalc.evaluator")


def _safe_div(a: float, b: float) -> float:
    if b == 0:
        raise DivisionByZero("Division by zero")
    return a / b


# Mapowanie symboli operatorów na operacje float
_OP_FUNCS: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _safe_div,
}


class StackEvaluator:
    """Ewaluator wyrażeń postfiksowych (IEEE-754 double)."""

    def __init__(self, strict_operands: bool = False) -> None:
        self._strict_operands = strict_operands

    # -- PostfixEvaluator protocol ------------------------------------------

    def eval_postfix(self, postfix: list[Token]) -> EvalResult:
        stack: list[float] = []
        steps: list[str] = []

        for token in postfix:
            if isinstance(token, NumberToken):
                stack.append(token.value)
                continue
            if not isinstance(token, OperatorToken):
                raise StructurallyInvalidPostfix(
                    f"Unexpected token in postfix: {token.symbol!r}"
                )

            fn = _OP_FUNCS.get(token.op)
            if fn is None:
                raise UnknownOperator(f"Unknown operator: {token.op!r}")
            if len(stack) < 2:
                raise StructurallyInvalidPostfix(
                    f"Operator {token.op!r} needs 2 operands, got {len(stack)}"
                )

            b = stack.pop()
            a = stack.pop()
            result = fn(a, b)
            steps.append(f"{format_number(a)} {token.op} {format_number(b)} = {format_number(result)}")
            stack.append(result)

        if not stack:
            raise StructurallyInvalidPostfix("Empty expression")
        if len(stack) > 1:
            if self._strict_operands:
                raise StructurallyInvalidPostfix(
                    f"{len(stack) - 1} operand(s) left without an operator"
                )
            logger.debug("Dropping %d leftover operand(s): %r", len(stack) - 1, stack[:-1])

        value = stack[-1]
        if math.isnan(value):
            raise NotANumber("Expression evaluated to NaN")
        return EvalResult(value=value, steps=steps)
