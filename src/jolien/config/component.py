# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolien
"""
Environment-driven configuration components.

A subclass of :class:`ComponentSettings` reads its fields from
``APP_``-prefixed environment variables when it is constructed, and the
resulting instance can be registered in a container like any other
component::

    class DatabaseConfig(ComponentSettings):
        url: str = "postgresql://localhost:5432"
        pool_size: int = 10

    register(DatabaseConfig())

The container treats the values as opaque.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from jolien.di.component import Component


class ComponentSettings(BaseSettings, Component):
    """Base class for configuration values registered as components."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )
