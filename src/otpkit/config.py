"""Defaults for the command line, loaded from environment variables.

Every variable uses the ``OTPKIT_`` prefix, e.g. ``OTPKIT_DIGITS=8``. The
engines themselves never read these settings; callers pass values in.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from otpkit.models import MAX_DIGITS, MIN_DIGITS, Algorithm


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="OTPKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Code generation
    digits: int = Field(default=6, ge=MIN_DIGITS, le=MAX_DIGITS)
    time_step: float = Field(default=30, gt=0)
    algorithm: Algorithm = Algorithm.SHA1

    # Validation
    window: int = Field(default=1, ge=0)

    # Provisioning
    issuer: str = "otpkit"

    log_level: str = "WARNING"

    @field_validator("algorithm", mode="before")
    @classmethod
    def _parse_algorithm(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


settings = Settings()
