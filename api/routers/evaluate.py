"""
Router: POST /evaluate
Liczy wyrażenie; błąd dowolnego etapu → ok=false (bez rozróżnienia przyczyny).
"""
import math

from fastapi import APIRouter, Depends, HTTPException

from adapters.calculator.pipeline_calculator import PipelineCalculator
from api.dependencies import get_calculator, get_settings
from api.schemas import EvaluateRequest, EvaluateResponse
from config import Settings

router = APIRouter(prefix="/evaluate", tags=["evaluate"])


@router.post("", response_model=EvaluateResponse)
async def evaluate(
    body: EvaluateRequest,
    calculator: PipelineCalculator = Depends(get_calculator),
    settings: Settings = Depends(get_settings),
):
    if len(body.expression) > settings.max_expression_length:
        raise HTTPException(
            status_code=413,
            detail=f"Expression longer than {settings.max_expression_length} characters",
        )

    outcome = calculator.explain(body.expression)
    return EvaluateResponse(
        expression=body.expression,
        ok=outcome.ok,
        answer=outcome.answer,
        # JSON nie przenosi inf; tekst "Infinity" zostaje w answer
        value=outcome.value if outcome.ok and math.isfinite(outcome.value) else None,
        steps=outcome.steps if body.explain else [],
    )
