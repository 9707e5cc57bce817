"""
Adapter: CharScanTokenizer
Implementuje port Tokenizer: skanowanie znak po znaku, od lewej do prawej.

  cyfry i '.'          → bufor liczby
  + - * / ( )          → token operatora / nawiasu
  wszystko inne        → pominięte (spacje, litery, ...)

Każdy znak spoza [0-9.] zamyka bufor liczby, więc "1 2" to dwie liczby.
Bufor jest czytany jak w parseFloat: najdłuższy prefiks cyfry[.cyfry]
("1.2.3" → 1.2); bufor bez cyfr (".") daje NaN.

Licznik głębokości nawiasów nie może spaść poniżej zera ani skończyć
się na wartości dodatniej, wtedy UnbalancedParentheses.
"""
from __future__ import annotations

import logging
import re

from contracts import (
    LeftParenToken,
    NumberToken,
    OperatorToken,
    RightParenToken,
    Token,
    UnbalancedParentheses,
    UnrecognizedCharacter,
)

logger = logging.getLogger("exprcalc.tokenizer")

_NUMBER_CHARS = frozenset("0123456789.")
_OPERATOR_CHARS = frozenset("+-*/")
_WHITESPACE = frozenset(" \t\r\n")

_DECIMAL_PREFIX_RE = re.compile(r"\d*\.?\d*")


def parse_decimal(buffer: str) -> float:
    """Najdłuższy poprawny prefiks dziesiętny bufora; NaN gdy brak cyfr."""
    prefix = _DECIMAL_PREFIX_RE.match(buffer).group(0)
    if not any(ch.isdigit() for ch in prefix):
        return float("nan")
    return float(prefix)


class CharScanTokenizer:
    """
    Tokenizer wyrażeń czterodziałaniowych.
    strict_characters=True: nieznany znak (poza białymi) → UnrecognizedCharacter.
    """

    def __init__(self, strict_characters: bool = False) -> None:
        self._strict_characters = strict_characters

    # -- Tokenizer protocol -------------------------------------------------

    def tokenize(self, text: str) -> list[Token]:
        tokens: list[Token] = []
        buffer = ""
        depth = 0

        for pos, ch in enumerate(text):
            if ch in _NUMBER_CHARS:
                buffer += ch
                continue

            if buffer:
                tokens.append(NumberToken(value=parse_decimal(buffer)))
                buffer = ""

            if ch in _OPERATOR_CHARS:
                tokens.append(OperatorToken(op=ch))
            elif ch == "(":
                depth += 1
                tokens.append(LeftParenToken())
            elif ch == ")":
                depth -= 1
                if depth < 0:
                    raise UnbalancedParentheses(
                        f"Mismatched parentheses: unexpected ')' at position {pos}"
                    )
                tokens.append(RightParenToken())
            elif ch not in _WHITESPACE:
                if self._strict_characters:
                    raise UnrecognizedCharacter(
                        f"Unrecognized character {ch!r} at position {pos}"
                    )
                logger.debug("Skipping character %r at position %d", ch, pos)

        if depth != 0:
            raise UnbalancedParentheses(f"Mismatched parentheses: {depth} unclosed '('")
        if buffer:
            tokens.append(NumberToken(value=parse_decimal(buffer)))
        return tokens
