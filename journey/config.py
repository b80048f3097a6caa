"""
Settings for the projection API.

Values come from ``JOURNEY_*`` environment variables or a local ``.env``
file. Goal defaults apply when a request leaves them out.
"""

from datetime import date
from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from journey.constants import (
    DEFAULT_INVESTMENT_INTEREST_RATE,
    ON_TRACK_CONTRIBUTION_RATIO,
    TARGET_AMOUNT_USD,
    TARGET_DATE,
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="JOURNEY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    target_amount_usd: float = Field(
        default=TARGET_AMOUNT_USD,
        description="Goal used when a request does not name one",
    )
    target_date: date = Field(
        default=TARGET_DATE,
        description="Goal date used when a request does not name one",
    )
    default_growth_rate: float = Field(
        default=DEFAULT_INVESTMENT_INTEREST_RATE,
        ge=0,
        le=100,
        description="Annual percent for investments without their own rate",
    )
    on_track_ratio: float = Field(
        default=ON_TRACK_CONTRIBUTION_RATIO,
        gt=0,
        description="Monthly contribution / net worth below which a plan counts as on track",
    )
    cors_origins: List[str] = Field(
        default=[
            "http://localhost:3000",
            "http://localhost:5173",
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5173",
        ],
    )
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"log_level must be one of {sorted(allowed)}")
        return v.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()
