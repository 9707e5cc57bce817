"""
contracts.py — Jedyne źródło prawdy dla wszystkich typów danych w ExprCalc.
Wszystkie moduły importują WYŁĄCZNIE stąd. Nie modyfikować bez versioning.
"""
from __future__ import annotations

import math
from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

CONTRACTS_VERSION = "1.0.0"

OperatorSymbol = Literal["+", "-", "*", "/"]


# ─────────────────────────── Helpers ─────────────────────────────────────

def format_number(value: float) -> str:
    """Liczba → tekst dziesiętny: 4.0 → "4", 2.5 → "2.5", inf → "Infinity"."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    return repr(value)


# ─────────────────────────── Tokens ──────────────────────────────────────

class NumberToken(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["number"] = "number"
    value: float

    @property
    def symbol(self) -> str:
        return format_number(self.value)


class OperatorToken(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["operator"] = "operator"
    op: OperatorSymbol

    @property
    def symbol(self) -> str:
        return self.op


class LeftParenToken(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["lparen"] = "lparen"

    @property
    def symbol(self) -> str:
        return "("


class RightParenToken(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["rparen"] = "rparen"

    @property
    def symbol(self) -> str:
        return ")"


Token = Union[NumberToken, OperatorToken, LeftParenToken, RightParenToken]


def render_tokens(tokens: list[Token]) -> str:
    """Tokeny → tekst rozdzielony spacjami, np. "3 4 2 * +"."""
    return " ".join(t.symbol for t in tokens)


# ─────────────────────────── Errors ──────────────────────────────────────

class ExpressionError(ValueError):
    """Bazowy błąd potoku wyrażeń. `code` jest stabilny, używany w testach i logach."""
    code = "EXPRESSION_ERROR"


class UnbalancedParentheses(ExpressionError):
    code = "UNBALANCED_PARENTHESES"


# Kontrakt tokenizera mówi o "malformed expression"
MalformedExpression = UnbalancedParentheses


class UnrecognizedCharacter(ExpressionError):
    code = "UNRECOGNIZED_CHARACTER"


class DivisionByZero(ExpressionError, ZeroDivisionError):
    code = "DIVISION_BY_ZERO"


class StructurallyInvalidPostfix(ExpressionError):
    code = "INVALID_POSTFIX"


class UnknownOperator(ExpressionError):
    code = "UNKNOWN_OPERATOR"


class NotANumber(ExpressionError):
    code = "NOT_A_NUMBER"


# ─────────────────────────── Evaluator ───────────────────────────────────

class EvalResult(BaseModel):
    value: float
    steps: list[str] = Field(default_factory=list)  # czytelne kroki, np. "10 / 5 = 2"


class EvalOutcome(BaseModel):
    """Wynik diagnostyczny: albo liczba, albo kod błędu, nigdy oba."""
    expression: str
    ok: bool
    value: Optional[float] = None
    answer: Optional[str] = None       # value jako tekst dziesiętny
    error_code: Optional[str] = None
    steps: list[str] = Field(default_factory=list)


# ─────────────────────────── Problems ────────────────────────────────────

class ProblemType(str, Enum):
    EXPRESSION = "expression"   # "1- (10/5)* 2 +7", odpowiedź liczona
    RIDDLE = "riddle"           # zagadka, odpowiedź z konfiguracji


class WrongExpression(ValueError):
    def __init__(self, problem_text: str) -> None:
        super().__init__(f"Error! Wrong expression ({problem_text})!")
        self.problem_text = problem_text


class WrongProblemType(ValueError):
    def __init__(self, problem_type: str) -> None:
        super().__init__(f"Error! Wrong type of the problem ({problem_type})!")
        self.problem_type = problem_type
