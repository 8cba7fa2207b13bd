# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolien
"""Process-wide interning of error categories and codes."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from jolien.errors.base import ErrorCategory, ErrorCode

logger = logging.getLogger(__name__)


class ErrorRegistry:
    """Singleton holding every :class:`ErrorCategory` and :class:`ErrorCode` by name.

    ``ErrorRegistry()`` always returns the same instance.
    """

    _instance: ErrorRegistry | None = None
    _lock = threading.RLock()

    _categories: dict[str, ErrorCategory]
    _codes: dict[str, ErrorCode]

    def __new__(cls) -> ErrorRegistry:
        with cls._lock:
            if cls._instance is None:
                created = super().__new__(cls)
                created._categories = {}
                created._codes = {}
                cls._instance = created
            return cls._instance

    def get_category(self, name: str, parent: Any = None) -> ErrorCategory:
        """Return the category called ``name``, creating it under ``parent`` if new."""
        from jolien.errors.base import ErrorCategory

        with self._lock:
            category = self._categories.get(name)
            if category is None:
                category = self._categories[name] = ErrorCategory(name, parent)
            return category

    def get_code(self, code: str, category_name: str = "INTERNAL") -> ErrorCode:
        """Return the code ``code``, creating it in ``category_name`` if new."""
        from jolien.errors.base import ErrorCode

        with self._lock:
            error_code = self._codes.get(code)
            if error_code is None:
                error_code = self._codes[code] = ErrorCode(
                    code, self.get_category(category_name)
                )
            return error_code

    def lookup_code(self, code: str) -> ErrorCode | None:
        with self._lock:
            error_code = self._codes.get(code)
        if error_code is None:
            logger.warning("Error code %r is not registered", code)
        return error_code

    def lookup_category(self, name: str) -> ErrorCategory | None:
        with self._lock:
            return self._categories.get(name)

    def get_all_categories(self) -> list[ErrorCategory]:
        with self._lock:
            return list(self._categories.values())

    def get_all_codes(self) -> list[ErrorCode]:
        with self._lock:
            return list(self._codes.values())


registry = ErrorRegistry()
