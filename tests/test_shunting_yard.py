from __future__ import annotations

import pytest

from adapters.notation_converter.shunting_yard import ShuntingYardConverter, precedence
from adapters.tokenizer.char_scan_tokenizer import CharScanTokenizer
from contracts import UnknownOperator, render_tokens


def _postfix(text: str) -> str:
    tokens = CharScanTokenizer().tokenize(text)
    return render_tokens(ShuntingYardConverter().to_postfix(tokens))


@pytest.mark.parametrize(
    ("infix", "postfix"),
    [
        ("3 + 4 * 2", "3 4 2 * +"),
        ("(3 + 4) * 2", "3 4 + 2 *"),
        ("1 - 2 - 3", "1 2 - 3 -"),
        ("8 / 4 / 2", "8 4 / 2 /"),
        ("2 * 3 + 4 * 5", "2 3 * 4 5 * +"),
        ("1- (10/5)* 2 +7", "1 10 5 / 2 * - 7 +"),
        ("((7))", "7"),
    ],
)
def test_to_postfix_honours_precedence_and_left_associativity(infix, postfix):
    assert _postfix(infix) == postfix


def test_to_postfix_keeps_operator_without_operands():
    # "-3" nie ma minusa unarnego, błąd wyjdzie dopiero przy ewaluacji
    assert _postfix("-3 + 5") == "3 - 5 +"


def test_to_postfix_of_empty_sequence_is_empty():
    assert ShuntingYardConverter().to_postfix([]) == []


def test_precedence_table():
    assert precedence("+") == precedence("-") == 1
    assert precedence("*") == precedence("/") == 2
    with pytest.raises(UnknownOperator):
        precedence("^")
