# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolien
"""
Configuration-specific error classes for jolien.
"""

from __future__ import annotations

from typing import Any, Final

from jolien.errors.base import ErrorCategory, ErrorCode, ErrorSeverity, JolienError

CONFIG: Final = ErrorCategory.get_or_create("CONFIG")
CONFIG_ERROR: Final = ErrorCode.get_or_create("CONFIG_ERROR", CONFIG)
CONFIG_ENVIRONMENT_ERROR: Final = ErrorCode.get_or_create(
    "CONFIG_ENVIRONMENT_ERROR", CONFIG
)


class ConfigError(JolienError):
    """Base class for all configuration-related errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = CONFIG_ERROR,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message,
            code=code,
            severity=severity,
            context=context,
            **kwargs,
        )
