"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Train Planner: training plan generation and progressive overload."
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = ["Train Planner contributors"]
    PROJECT_URL: str = ""

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Dev server
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Plan generation
    DEFAULT_PLAN_WEEKS: int = 8
    MAX_PLAN_WEEKS: int = 52
    AVOID_BACK_TO_BACK: bool = False
    ENFORCE_MOVEMENT_VARIETY: bool = True
    ENFORCE_EQUIPMENT_VARIETY: bool = True

    # Feedback progression
    PROGRESSION_LOG_IN_RESPONSE: bool = True

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Global settings instance
settings = Settings()
