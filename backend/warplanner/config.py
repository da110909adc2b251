"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    warplanner_env: str = "development"
    warplanner_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Base size overrides keyed by unit name, written by the army importer
    base_sizes_file: str = "base_sizes.json"

    # Mission rounds, one board per round
    rounds: list[str] = ["terraform", "purge", "supplies", "linchpin", "take"]

    # Aura range for units without an explicit distance (inches)
    default_aura_inches: float = 6.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
