# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolien
"""
Logging settings, read from ``JOLIEN_LOGGING_*`` environment variables.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from jolien.logging.level import LogLevel


class LoggingSettings(BaseSettings):
    """How the ``jolien`` logger namespace is configured.

    Example:
        ``JOLIEN_LOGGING_LEVEL=debug JOLIEN_LOGGING_JSON_FORMAT=true``
    """

    model_config = SettingsConfigDict(
        env_prefix="JOLIEN_LOGGING_",
        extra="ignore",
        case_sensitive=False,
    )

    level: str = Field(default=LogLevel.WARNING.value, description="Minimum level emitted")
    json_format: bool = Field(default=False, description="One JSON object per record")
    include_timestamp: bool = Field(default=True, description="Prefix records with their time")
    include_level: bool = Field(default=True, description="Show the level name")
    console_enabled: bool = Field(
        default=True, description="Write to stderr; otherwise records are discarded"
    )

    @field_validator("level", mode="before")
    @classmethod
    def _normalise_level(cls, value: Any) -> str:
        if isinstance(value, LogLevel):
            return value.value
        if isinstance(value, str):
            return LogLevel.from_string(value).value
        raise ValueError(f"level must be a level name, got {type(value).__name__}")

    @classmethod
    def load(cls) -> LoggingSettings:
        """Read the settings from the environment."""
        return cls()
