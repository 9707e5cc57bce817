"""
Port: NotationConverter
Odpowiedzialność: infiks → postfiks (RPN) z zachowaniem priorytetów.
"""
from typing import Protocol, runtime_checkable

from contracts import Token


@runtime_checkable
class NotationConverter(Protocol):
    def to_postfix(self, tokens: list[Token]) -> list[Token]:
        """
        Converts an infix token sequence to the equivalent postfix sequence.
        '+' and '-' bind weaker than '*' and '/'; all four are left-associative.
        Parentheses are consumed and never appear in the output.
        Does not check operand counts; that surfaces during evaluation.
        """
        ...
