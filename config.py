"""
config.py — Konfiguracja kalkulatora przez zmienne środowiskowe.
Wszystkie zmienne mają prefiks CALCULATOR_.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    log_level: str = "WARNING"

    # Pętla REPL
    banner: str = "### Calculator ver. 1.0 ###"
    prompt: str = ">>> "
    exit_command: str = "EXIT"  # porównywane bez względu na wielkość liter

    # App
    app_title: str = "Calculator"
    app_version: str = "1.0.0"

    model_config = SettingsConfigDict(env_prefix="CALCULATOR_", env_file=".env", extra="ignore")
