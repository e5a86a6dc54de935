"""Application configuration using Pydantic settings."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.session import TURN_DETECTION_PRESETS


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # API Keys
    openai_api_key: str = Field(..., min_length=1)

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 3000

    # Upstream realtime API
    openai_realtime_url: str = "https://api.openai.com/v1/realtime/sessions"
    turn_detection_preset: str = "patient"

    @field_validator("turn_detection_preset")
    @classmethod
    def _known_preset(cls, value: str) -> str:
        if value not in TURN_DETECTION_PRESETS:
            known = ", ".join(sorted(TURN_DETECTION_PRESETS))
            raise ValueError(f"unknown turn detection preset '{value}' (expected one of: {known})")
        return value


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
