"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    pathwalk_env: str = "development"
    pathwalk_log_level: str = "info"

    # Flatness tolerance handed to every query, in path-space units
    pathwalk_tolerance: float = 1e-5

    # Upper bound for /api/sample
    max_samples: int = 1000

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
