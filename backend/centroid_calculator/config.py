"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    centroid_env: str = "development"
    centroid_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:8080"]

    # Tolerance for closure, deletion matching and the zero-area cutoff
    shape_epsilon: float = 1e-9

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
