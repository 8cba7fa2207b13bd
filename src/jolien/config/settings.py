# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolien
"""
Container-wide settings.

Values are read from ``JOLIEN_``-prefixed environment variables and cached
for the life of the process; tests call :func:`clear_settings_cache` after
changing the environment.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ContainerSettings(BaseSettings):
    """Settings controlling registry and advice defaults."""

    model_config = SettingsConfigDict(
        env_prefix="JOLIEN_",
        extra="ignore",
        case_sensitive=False,
    )

    strict_proceed: bool = Field(
        default=False,
        description="Fail around advice whose body never calls proceed()",
    )
    default_scope: Literal["singleton", "prototype"] = Field(
        default="singleton",
        description="Scope used when register() is called without one",
    )
    check_cycles: bool = Field(
        default=True,
        description="Run the circular dependency check on registration",
    )


@lru_cache(maxsize=1)
def get_settings() -> ContainerSettings:
    """Return the cached container settings."""
    return ContainerSettings()


def clear_settings_cache() -> None:
    """Forget cached settings so the next access re-reads the environment."""
    get_settings.cache_clear()
