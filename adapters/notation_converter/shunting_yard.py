"""
Adapter: ShuntingYardConverter
Implementuje port NotationConverter: algorytm stacji rozrządowej (Dijkstra).

  liczba  → wyjście
  '('     → stos
  ')'     → zdejmuj ze stosu do '(' ; '(' wyrzucany
  op      → zdejmuj operatory o priorytecie ≥ op (lewostronne wiązanie), push op
  koniec  → zdejmij resztę stosu na wyjście

Zbalansowanie nawiasów sprawdza już tokenizer.
"""
from __future__ import annotations

from contracts import (
    LeftParenToken,
    NumberToken,
    OperatorToken,
    RightParenToken,
    Token,
    UnknownOperator,
)

PRECEDENCE: dict[str, int] = {"+": 1, "-": 1, "*": 2, "/": 2}


def precedence(op: str) -> int:
    try:
        return PRECEDENCE[op]
    except KeyError:
        raise UnknownOperator(f"Unknown operator: {op!r}") from None


class ShuntingYardConverter:
    """Konwersja infiks → postfiks. Bezstanowy, jedna instancja wystarczy."""

    # -- NotationConverter protocol -----------------------------------------

    def to_postfix(self, tokens: list[Token]) -> list[Token]:
        output: list[Token] = []
        stack: list[Token] = []

        for token in tokens:
            if isinstance(token, NumberToken):
                output.append(token)
            elif isinstance(token, LeftParenToken):
                stack.append(token)
            elif isinstance(token, RightParenToken):
                while stack and not isinstance(stack[-1], LeftParenToken):
                    output.append(stack.pop())
                if stack:
                    stack.pop()
            elif isinstance(token, OperatorToken):
                prec = precedence(token.op)
                while (
                    stack
                    and isinstance(stack[-1], OperatorToken)
                    and precedence(stack[-1].op) >= prec
                ):
                    output.append(stack.pop())
                stack.append(token)
            else:
                raise TypeError(f"Nieznany typ tokenu: {type(token)}")

        while stack:
            top = stack.pop()
            # '(' bez pary może zostać tylko przy ręcznie zbudowanych tokenach
            if isinstance(top, OperatorToken):
                output.append(top)

        return output
