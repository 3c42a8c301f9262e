"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    squircle_env: str = "development"
    squircle_log_level: str = "info"

    # Default boundary samples for generate_path()
    squircle_accuracy: int = 101

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
