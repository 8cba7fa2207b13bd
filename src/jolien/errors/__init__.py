# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolien

"""
Error handling for jolien.
"""

from __future__ import annotations

from jolien.errors.base import (
    INTERNAL,
    INTERNAL_ERROR,
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
    JolienError,
)
from jolien.errors.registry import ErrorRegistry, registry

__all__ = [
    "ErrorCategory",
    "ErrorCode",
    "ErrorRegistry",
    "ErrorSeverity",
    "INTERNAL",
    "INTERNAL_ERROR",
    "JolienError",
    "registry",
]
