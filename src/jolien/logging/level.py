# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolien
"""Log levels accepted by :class:`~jolien.logging.config.LoggingSettings`."""

from __future__ import annotations

import logging
from enum import Enum


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_stdlib_level(self) -> int:
        """The matching :mod:`logging` level number."""
        return logging.getLevelNamesMapping()[self.value]

    @classmethod
    def from_string(cls, value: str) -> LogLevel:
        """Parse a level name, ignoring case.

        Raises:
            ValueError: If ``value`` names no level
        """
        try:
            return cls[value.strip().upper()]
        except KeyError:
            raise ValueError(f"Invalid log level: {value}") from None
