"""
Adapter: PipelineCalculator
Implements ExpressionCalculator by chaining Tokenizer → NotationConverter → PostfixEvaluator.

Every ExpressionError from any stage collapses into a single "no result"
(None) at this boundary. explain() keeps the failing stage's error code.
"""
from __future__ import annotations

import logging
import math
from typing import Optional

from config import Settings
from contracts import (
    EvalOutcome,
    EvalResult,
    ExpressionError,
    NotANumber,
    format_number,
)
from adapters.evaluator.stack_evaluator import StackEvaluator
from adapters.notation_converter.shunting_yard import ShuntingYardConverter
from adapters.tokenizer.char_scan_tokenizer import CharScanTokenizer
from ports.evaluator import PostfixEvaluator
from ports.notation_converter import NotationConverter
from ports.tokenizer import Tokenizer

logger = logging.getLogger("exprcalc.calculator")


class PipelineCalculator:
    """
    Stateless four-operator calculator.
    Stages are injected; defaults are the lax char-scan/shunting-yard/stack trio.
    """

    def __init__(
        self,
        tokenizer: Tokenizer | None = None,
        converter: NotationConverter | None = None,
        evaluator: PostfixEvaluator | None = None,
    ) -> None:
        self._tokenizer = tokenizer or CharScanTokenizer()
        self._converter = converter or ShuntingYardConverter()
        self._evaluator = evaluator or StackEvaluator()

    @classmethod
    def from_settings(cls, settings: Settings) -> "PipelineCalculator":
        return cls(
            tokenizer=CharScanTokenizer(strict_characters=settings.strict_characters),
            evaluator=StackEvaluator(strict_operands=settings.strict_operands),
        )

    # -- ExpressionCalculator protocol --------------------------------------

    def parse_and_evaluate(self, expression: str) -> Optional[float]:
        try:
            return self.evaluate(expression).value
        except ExpressionError as exc:
            logger.debug("No result for %r: %s (%s)", expression, exc.code, exc)
            return None

    def explain(self, expression: str) -> EvalOutcome:
        try:
            result = self.evaluate(expression)
        except ExpressionError as exc:
            logger.debug("No result for %r: %s (%s)", expression, exc.code, exc)
            return EvalOutcome(expression=expression, ok=False, error_code=exc.code)
        return EvalOutcome(
            expression=expression,
            ok=True,
            value=result.value,
            answer=format_number(result.value),
            steps=result.steps,
        )

    # -- Public, raising ----------------------------------------------------

    def evaluate(self, expression: str) -> EvalResult:
        """Runs all three stages; raises the failing stage's ExpressionError."""
        tokens = self._tokenizer.tokenize(expression)
        postfix = self._converter.to_postfix(tokens)
        result = self._evaluator.eval_postfix(postfix)
        if math.isnan(result.value):
            raise NotANumber("Expression evaluated to NaN")
        return result


_DEFAULT = PipelineCalculator()


def parse_and_evaluate(expression: str) -> Optional[float]:
    """Module-level entry point with default (lax) settings. Never raises."""
    return _DEFAULT.parse_and_evaluate(expression)
