# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolien
"""
The deployment environment a process runs in.
"""

from __future__ import annotations

import os
from enum import Enum

from jolien.config.errors import CONFIG_ENVIRONMENT_ERROR, ConfigError

# Variables consulted by Environment.get_current, highest priority first
ENVIRONMENT_VARIABLES = ("JOLIEN_ENV", "ENVIRONMENT", "ENV")


class Environment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"

    @classmethod
    def from_string(cls, value: str | None) -> Environment:
        """Parse an environment name or one of its short aliases.

        ``None`` means development.

        Raises:
            ConfigError: If ``value`` is not a known environment
        """
        if value is None:
            return cls.DEVELOPMENT

        key = value.strip().lower()
        try:
            return _ALIASES.get(key) or cls(key)
        except ValueError:
            raise ConfigError(
                f"Unknown environment: {value}",
                code=CONFIG_ENVIRONMENT_ERROR,
                context={"provided_value": value},
            ) from None

    @classmethod
    def get_current(cls) -> Environment:
        """The environment named by the first of ``ENVIRONMENT_VARIABLES`` that is set."""
        for name in ENVIRONMENT_VARIABLES:
            value = os.environ.get(name)
            if value:
                return cls.from_string(value)
        return cls.DEVELOPMENT


_ALIASES = {
    "dev": Environment.DEVELOPMENT,
    "test": Environment.TESTING,
    "prod": Environment.PRODUCTION,
}
