"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from zellij.engine.config import EngineConfig


class Settings(BaseSettings):
    zellij_env: str = "development"
    zellij_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Filler library JSON; empty means the bundled sample library
    filler_library_path: str = ""

    # Blank border around the pattern, in canvas units
    canvas_margin: float = 60.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def engine_config(self) -> EngineConfig:
        return EngineConfig(canvas_margin=self.canvas_margin)


settings = Settings()
