"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Athlete Tracker"
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = ["Athlete Tracker contributors"]

    LOG_LEVEL: str = "INFO"

    # Insights windows (number of sessions)
    RECENT_WINDOW: int = 5
    CHART_WINDOW: int = 10
    LEADERBOARD_SIZE: int = 5

    # Participation (days since last session, monthly testing cadence)
    ACTIVE_DAYS: int = 35
    NEEDS_CHECKIN_DAYS: int = 65
    RECENT_ACTIVITY_DAYS: int = 90
    TEAM_RECENT_DAYS: int = 7

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Global settings instance
settings = Settings()
