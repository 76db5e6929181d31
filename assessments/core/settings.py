"""Application settings with environment variable support.

Uses pydantic-settings for typed configuration validation. These settings
only tune logging and terminal output; analysis inputs live in
``assessments.config``.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    """Operational configuration loaded from environment variables."""

    # Logging
    log_level: str = Field(default="WARNING", description="Logging level")
    json_logs: bool = Field(default=False, description="Render log records as JSON")

    # Terminal output
    color_output: bool = Field(default=True, description="Highlight rounded cells when writing to a TTY")

    model_config = {
        "env_prefix": "ASSESSMENTS_",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> AppSettings:
    """Get cached application settings."""
    return AppSettings()
