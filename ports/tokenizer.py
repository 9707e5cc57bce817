"""
Port: Tokenizer
Odpowiedzialność: tekst wyrażenia → sekwencja tokenów, kontrola nawiasów.
"""
from typing import Protocol, runtime_checkable

from contracts import Token


@runtime_checkable
class Tokenizer(Protocol):
    def tokenize(self, text: str) -> list[Token]:
        """
        Scans an infix expression left to right into typed tokens.
        Digits and '.' accumulate into numbers; '+ - * / ( )' become
        operator/parenthesis tokens; whitespace and unknown characters
        are dropped (unless the adapter runs in strict mode).
        Raises UnbalancedParentheses on an unmatched ')' or unclosed '('.
        """
        ...
