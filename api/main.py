"""
api/main.py — punkt wejścia FastAPI.

Lifespan:
  - Tworzy bezstanowy PipelineCalculator z ustawień (tryby strict)
  - Kalkulator jest współdzielony przez wszystkie żądania (brak stanu)
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from adapters.calculator.pipeline_calculator import PipelineCalculator
from api.routers import evaluate, problems
from api.schemas import HealthResponse
from config import Settings

logger = logging.getLogger("exprcalc")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings

    app.state.calculator = PipelineCalculator.from_settings(settings)
    logger.info(
        "ExprCalc API ready (strict_operands=%s, strict_characters=%s).",
        settings.strict_operands,
        settings.strict_characters,
    )
    yield

    logger.info("Shutting down.")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Routers
    app.include_router(evaluate.router)
    app.include_router(problems.router)

    # Health
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health():
        return HealthResponse(status="ok", version=settings.app_version)

    return app


app = create_app()
