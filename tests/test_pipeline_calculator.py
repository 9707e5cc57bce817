from __future__ import annotations

import pytest

from adapters.calculator.pipeline_calculator import PipelineCalculator, parse_and_evaluate
from adapters.evaluator.stack_evaluator import StackEvaluator
from config import Settings
from contracts import DivisionByZero, NotANumber, UnbalancedParentheses
from ports.calculator import ExpressionCalculator
from ports.evaluator import PostfixEvaluator
from ports.notation_converter import NotationConverter
from ports.tokenizer import Tokenizer


@pytest.mark.parametrize(
    ("expression", "expected"),
    [
        ("3 + 4 * 2", 11),
        ("(3 + 4) * 2", 14),
        ("  1   +   2  ", 3),
        ("1.5 + 2.5", 4),
        ("1- (10/5)* 2 +7", 4),
        ("10 / 4", 2.5),
        ("2 * (3 + (4 - 1)) / 3", 4),
        ("abc1+2", 3),
    ],
)
def test_parse_and_evaluate_returns_number(expression, expected):
    assert parse_and_evaluate(expression) == expected


@pytest.mark.parametrize(
    "expression",
    [
        "5 / 0",
        "(1 + 2",
        "1 + 2)",
        "-3 + 5",
        "",
        "   ",
        "1 +",
        "*",
        "()",
        ".",
        "(1 + 2) / (3 - 3)",
    ],
)
def test_parse_and_evaluate_collapses_failures_to_none(expression):
    assert parse_and_evaluate(expression) is None


def test_parse_and_evaluate_is_idempotent():
    results = {parse_and_evaluate("1- (10/5)* 2 +7") for _ in range(5)}

    assert results == {4}


def test_leftover_operands_keep_top_value_by_default():
    assert parse_and_evaluate("1 2") == 2


def test_leftover_operands_fail_with_strict_settings():
    calc = PipelineCalculator.from_settings(Settings(strict_operands=True))

    assert calc.parse_and_evaluate("1 2") is None
    assert calc.parse_and_evaluate("1 + 2") == 3


def test_unknown_characters_fail_with_strict_settings():
    calc = PipelineCalculator.from_settings(Settings(strict_characters=True))

    assert calc.parse_and_evaluate("abc1+2") is None
    assert calc.explain("abc1+2").error_code == "UNRECOGNIZED_CHARACTER"


def test_evaluate_raises_the_failing_stage_error():
    calc = PipelineCalculator()

    with pytest.raises(UnbalancedParentheses):
        calc.evaluate("(1 + 2")
    with pytest.raises(DivisionByZero):
        calc.evaluate("5 / 0")
    with pytest.raises(NotANumber):
        calc.evaluate(". + 1")


@pytest.mark.parametrize(
    ("expression", "code"),
    [
        ("(1 + 2", "UNBALANCED_PARENTHESES"),
        ("5 / 0", "DIVISION_BY_ZERO"),
        ("-3 + 5", "INVALID_POSTFIX"),
        ("", "INVALID_POSTFIX"),
        (".", "NOT_A_NUMBER"),
    ],
)
def test_explain_keeps_error_code(expression, code):
    outcome = PipelineCalculator().explain(expression)

    assert outcome.ok is False
    assert outcome.value is None
    assert outcome.answer is None
    assert outcome.error_code == code


def test_explain_success_has_answer_text_and_steps():
    outcome = PipelineCalculator().explain("1- (10/5)* 2 +7")

    assert outcome.ok is True
    assert outcome.value == 4
    assert outcome.answer == "4"
    assert outcome.steps == ["10 / 5 = 2", "2 * 2 = 4", "1 - 4 = -3", "-3 + 7 = 4"]
    assert outcome.error_code is None


def test_custom_stages_are_used():
    calc = PipelineCalculator(evaluator=StackEvaluator(strict_operands=True))

    assert calc.parse_and_evaluate("1 2") is None


def test_adapters_satisfy_ports():
    calc = PipelineCalculator()

    assert isinstance(calc, ExpressionCalculator)
    assert isinstance(calc._tokenizer, Tokenizer)
    assert isinstance(calc._converter, NotationConverter)
    assert isinstance(calc._evaluator, PostfixEvaluator)
