"""
problem_answers.py - derive the stored answer key for a new or edited problem.

expression -> evaluated result as decimal text ("1- (10/5)* 2 +7" -> "4")
riddle     -> fixed answer from settings
other      -> WrongProblemType
"""
from __future__ import annotations

from contracts import ProblemType, WrongExpression, WrongProblemType, format_number
from ports.calculator import ExpressionCalculator


def derive_answer(
    problem_type: str,
    problem_text: str,
    calculator: ExpressionCalculator,
    riddle_answer: str,
) -> str:
    """Return the answer key, or raise WrongExpression / WrongProblemType."""
    try:
        kind = ProblemType(problem_type)
    except ValueError:
        raise WrongProblemType(problem_type) from None

    if kind is ProblemType.RIDDLE:
        return riddle_answer

    value = calculator.parse_and_evaluate(problem_text)
    if value is None:
        raise WrongExpression(problem_text)
    return format_number(value)
