from __future__ import annotations

import pytest

from adapters.calculator.pipeline_calculator import PipelineCalculator
from adapters.problem_answers import derive_answer
from contracts import WrongExpression, WrongProblemType, format_number


def test_derive_answer_for_expression_is_decimal_text():
    answer = derive_answer("expression", "1- (10/5)* 2 +7", PipelineCalculator(), "42")

    assert answer == "4"


def test_derive_answer_for_fractional_expression():
    assert derive_answer("expression", "7 / 2", PipelineCalculator(), "42") == "3.5"


def test_derive_answer_for_riddle_uses_configured_answer():
    answer = derive_answer("riddle", "What has keys but no locks?", PipelineCalculator(), "piano")

    assert answer == "piano"


def test_derive_answer_wrong_expression_message():
    with pytest.raises(WrongExpression) as exc_info:
        derive_answer("expression", "5 / 0", PipelineCalculator(), "42")

    assert str(exc_info.value) == "Error! Wrong expression (5 / 0)!"


def test_derive_answer_wrong_type_message():
    with pytest.raises(WrongProblemType) as exc_info:
        derive_answer("puzzle", "1 + 1", PipelineCalculator(), "42")

    assert str(exc_info.value) == "Error! Wrong type of the problem (puzzle)!"


@pytest.mark.parametrize(
    ("value", "text"),
    [
        (4.0, "4"),
        (-3.0, "-3"),
        (2.5, "2.5"),
        (0.1 + 0.2, "0.30000000000000004"),
        (float("inf"), "Infinity"),
        (float("-inf"), "-Infinity"),
    ],
)
def test_format_number(value, text):
    assert format_number(value) == text
