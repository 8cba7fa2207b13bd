# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolien

"""
Public API for the jolien logging system.

Structured logging on top of the standard library, configured from the
environment.
"""

from __future__ import annotations

from jolien.logging.config import LoggingSettings
from jolien.logging.level import LogLevel
from jolien.logging.logger import (
    ROOT_LOGGER_NAME,
    StructuredFormatter,
    configure_logging,
    current_log_context,
    get_logger,
    log_context,
)

__all__ = [
    "LogLevel",
    "LoggingSettings",
    "ROOT_LOGGER_NAME",
    "StructuredFormatter",
    "configure_logging",
    "current_log_context",
    "get_logger",
    "log_context",
]
