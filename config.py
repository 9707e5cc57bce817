"""
config.py — Konfiguracja aplikacji przez zmienne środowiskowe.
Wszystkie zmienne mają prefiks EXPRCALC_.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Evaluator (domyślnie tryb łagodny, zgodny z dotychczasowym zachowaniem)
    strict_operands: bool = False      # nadmiarowe liczby na stosie → błąd
    strict_characters: bool = False    # nieznane znaki → błąd zamiast pominięcia

    # Problems
    riddle_answer: str = "42"

    # API
    max_expression_length: int = 10_000

    # Logging
    log_level: str = "INFO"

    # App
    app_title: str = "ExprCalc"
    app_version: str = "0.1.0"

    model_config = SettingsConfigDict(env_prefix="EXPRCALC_", env_file=".env", extra="ignore")
