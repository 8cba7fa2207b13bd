# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolien
"""
Error classes for the jolien advice engine.
"""

from __future__ import annotations

from typing import Any, Final

from jolien.errors.base import ErrorCategory, ErrorCode, ErrorSeverity, JolienError

AOP: Final = ErrorCategory.get_or_create("AOP")
AOP_ERROR: Final = ErrorCode.get_or_create("AOP_ERROR", AOP)
AOP_PROCEED_MISUSE: Final = ErrorCode.get_or_create("AOP_PROCEED_MISUSE", AOP)


class AdviceError(JolienError):
    """Base class for advice engine errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = AOP_ERROR,
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


class ProceedMisuseError(AdviceError):
    """Raised when ``proceed()`` is used outside an around body, or when a
    strict around body returns without proceeding."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message, code=AOP_PROCEED_MISUSE, **kwargs)

    @classmethod
    def outside_around(cls) -> ProceedMisuseError:
        return cls("proceed() can only be called within around advice")

    @classmethod
    def never_proceeded(cls, callee: str) -> ProceedMisuseError:
        return cls(f"Around advice on {callee} must call proceed()", callee=callee)
