"""Solver configuration.

Settings are read from `CHANGE_SOLVER_*` environment variables or a `.env`
file in the working directory. The algorithm never reads them; only the
service layer does, so the table fill stays a pure function of its inputs.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MAX_TARGET = 10_000_000


class SolverSettings(BaseSettings):
    """Typed, validated settings for the change solver."""

    model_config = SettingsConfigDict(
        env_prefix="CHANGE_SOLVER_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    max_target: int = Field(
        default=DEFAULT_MAX_TARGET,
        ge=0,
        description="Largest target accepted; total work is target x |denominations|.",
    )
    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Logging level name (DEBUG, INFO, WARNING, ...).",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"):
            raise ValueError(f"unknown log level: {value!r}")
        return level
