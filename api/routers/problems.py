"""
Router: POST /problems/answer
Wylicza klucz odpowiedzi dla problemu typu "expression" lub "riddle".
Zapis problemu (baza, autoryzacja) jest poza tym serwisem.
"""
from fastapi import APIRouter, Depends, HTTPException

from adapters.calculator.pipeline_calculator import PipelineCalculator
from adapters.problem_answers import derive_answer
from api.dependencies import get_calculator, get_settings
from api.schemas import AnswerKeyRequest, AnswerKeyResponse
from config import Settings
from contracts import WrongExpression, WrongProblemType

router = APIRouter(prefix="/problems", tags=["problems"])


@router.post("/answer", response_model=AnswerKeyResponse)
async def answer_key(
    body: AnswerKeyRequest,
    calculator: PipelineCalculator = Depends(get_calculator),
    settings: Settings = Depends(get_settings),
):
    if len(body.problem_text) > settings.max_expression_length:
        raise HTTPException(
            status_code=413,
            detail=f"Problem text longer than {settings.max_expression_length} characters",
        )

    try:
        answer = derive_answer(body.type, body.problem_text, calculator, settings.riddle_answer)
    except (WrongExpression, WrongProblemType) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return AnswerKeyResponse(type=body.type, answer=answer)
