"""
schemas.py — Request/Response modele FastAPI.
Oddzielone od contracts.py żeby API mogło ewoluować niezależnie.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ─────────────────────────── /evaluate ───────────────────────────

class EvaluateRequest(BaseModel):
    expression: str
    explain: bool = False       # dołącza kroki redukcji


class EvaluateResponse(BaseModel):
    expression: str
    ok: bool                    # False = brak wyniku (jednolity)
    answer: Optional[str] = None
    value: Optional[float] = None
    steps: list[str] = []


# ─────────────────────────── /problems ───────────────────────────

class AnswerKeyRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: str
    problem_text: str = Field(..., alias="problemText")


class AnswerKeyResponse(BaseModel):
    type: str
    answer: str


# ─────────────────────────── /health ─────────────────────────────

class HealthResponse(BaseModel):
    status: str
    version: str
