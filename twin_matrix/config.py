"""Application configuration with validation."""
from typing import Optional, Literal
from functools import lru_cache
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Scoring core settings, read from the environment or a .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Twin Matrix Scoring Core"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # Score scale
    MAX_SCORE: int = Field(default=255, ge=1)
    OUT_OF_RANGE_POLICY: Literal["clamp", "reject", "ignore"] = "clamp"

    # Smoothing parameters
    SMOOTHING_ALPHA: float = Field(default=0.3, gt=0, le=1)
    DECAY_FACTOR: float = Field(default=0.95, gt=0, le=1)
    PRIOR_BASELINE: int = Field(default=128, ge=0)

    # Registry overrides (None = packaged tables)
    CATEGORY_REGISTRY_PATH: Optional[str] = None
    DIMENSION_NAMES_PATH: Optional[str] = None

    @model_validator(mode="after")
    def validate_prior_baseline(self):
        """Prior baseline has to sit on the score scale."""
        if self.PRIOR_BASELINE > self.MAX_SCORE:
            raise ValueError(
                f"PRIOR_BASELINE ({self.PRIOR_BASELINE}) exceeds MAX_SCORE ({self.MAX_SCORE})"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
