"""
Markov Text Configuration
"""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # ===== Logging =====
    LOG_LEVEL: str = Field(default="info")

    # ===== Generation =====
    SENTENCE_COUNT: int = Field(default=1000, ge=0)
    # None = walk until the end marker or a dead end
    MAX_WALK_STEPS: Optional[int] = Field(default=None, ge=1)

    # ===== Markers =====
    BEGIN_MARKER: str = Field(default="^")
    END_MARKER: str = Field(default="$")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
