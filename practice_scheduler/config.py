"""
Configuration settings for the practice scheduler.

Uses Pydantic Settings for environment variable management with .env file support.
All variables are prefixed with PRACTICE_ (e.g. PRACTICE_BREAK_DURATION_MS).
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from practice_scheduler import constants as C
from practice_scheduler.models import MicrobreakConfig


class Settings(BaseSettings):
    """Scheduler settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PRACTICE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Microbreak timing
    # ========================================
    min_session_duration_ms: int = Field(
        default=C.DEFAULT_MIN_SESSION_DURATION_MS,
        gt=0,
        description="Time without a break before one is recommended",
    )
    max_session_duration_ms: int = Field(
        default=C.DEFAULT_MAX_SESSION_DURATION_MS,
        gt=0,
        description="Time without a break before one is strongly recommended",
    )
    break_duration_ms: int = Field(
        default=C.DEFAULT_BREAK_DURATION_MS,
        gt=0,
        description="Base break duration before fatigue adjustment",
    )

    # ========================================
    # Adaptation switches
    # ========================================
    adapt_to_performance: bool = Field(
        default=True,
        description="Reserved: adjust break timing to performance degradation",
    )
    adapt_to_cognitive_load: bool = Field(
        default=True,
        description="Reserved: account for question difficulty in break timing",
    )

    # ========================================
    # Break types
    # ========================================
    enable_breathing: bool = Field(default=True, description="Offer breathing exercises")
    enable_movement: bool = Field(default=True, description="Offer movement breaks")
    enable_mindfulness: bool = Field(default=True, description="Offer mindfulness moments")
    enable_gaze_shift: bool = Field(default=True, description="Offer eye-rest breaks")
    seated_only: bool = Field(
        default=False,
        description="Only suggest movement exercises that can be done seated",
    )

    # ========================================
    # Sampling
    # ========================================
    random_seed: Optional[int] = Field(
        default=None,
        description="Seed for session generation and variation draws (None = OS entropy)",
    )
    questions_per_skill: int = Field(
        default=3,
        ge=1,
        description="Default questions per skill for interleaved sessions",
    )

    def get_microbreak_config(self) -> MicrobreakConfig:
        """Build the MicrobreakConfig consumed by the break recommender."""
        return MicrobreakConfig(
            min_session_duration_ms=self.min_session_duration_ms,
            max_session_duration_ms=self.max_session_duration_ms,
            break_duration_ms=self.break_duration_ms,
            adapt_to_performance=self.adapt_to_performance,
            adapt_to_cognitive_load=self.adapt_to_cognitive_load,
            enable_breathing=self.enable_breathing,
            enable_movement=self.enable_movement,
            enable_mindfulness=self.enable_mindfulness,
            enable_gaze_shift=self.enable_gaze_shift,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
