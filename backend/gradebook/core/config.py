"""
Application configuration settings.
"""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Self


# Tolerance for floating-point weight summation checks
_WEIGHT_SUM_TOLERANCE = 1e-6


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "Gradebook Analysis API"
    APP_VERSION: str = "0.1.0"
    ENV: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # API
    API_V1_PREFIX: str = "/v1"

    # CORS
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    # Item analysis
    # Upper bound on students × items accepted by the item-analysis endpoint.
    # Grade grids are a few thousand cells; anything far larger is a client bug.
    MAX_ANALYSIS_CELLS: int = Field(
        default=100_000,
        gt=0,
        description="Maximum number of grid cells accepted per analysis request",
    )

    # Final grade (Nilai Akhir): weighted TP average plus end-of-term exam (UAS)
    FINAL_GRADE_TP_WEIGHT: float = 0.7
    FINAL_GRADE_EXAM_WEIGHT: float = 0.3
    # Minimum passing grade (KKM) and the band below it shown as "near"
    FINAL_GRADE_KKM: float = Field(default=75.0, ge=0.0, le=100.0)
    KKM_WARNING_MARGIN: float = Field(default=15.0, ge=0.0)

    # Sentry Error Tracking
    SENTRY_DSN: str = Field(
        default="",
        description="Sentry DSN for error tracking (leave empty to disable)",
    )
    SENTRY_TRACES_SAMPLE_RATE: float = Field(
        default=0.1,
        ge=0.0,
        le=1.0,
        description="Sentry traces sample rate (0.0-1.0, 0.1 = 10% of transactions)",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # Ignore extra fields from .env not defined in Settings
    )

    @model_validator(mode="after")
    def validate_final_grade_weights(self) -> Self:
        """Validate final grade weights: positive values summing to 1.0."""
        weights = {
            "FINAL_GRADE_TP_WEIGHT": self.FINAL_GRADE_TP_WEIGHT,
            "FINAL_GRADE_EXAM_WEIGHT": self.FINAL_GRADE_EXAM_WEIGHT,
        }
        non_positive = [k for k, v in weights.items() if v <= 0]
        if non_positive:
            raise ValueError(
                f"Final grade weights must be positive, got non-positive: {non_positive}"
            )
        total = sum(weights.values())
        if abs(total - 1.0) > _WEIGHT_SUM_TOLERANCE:
            raise ValueError(f"Final grade weights must sum to 1.0, got {total}")
        return self


settings = Settings()
