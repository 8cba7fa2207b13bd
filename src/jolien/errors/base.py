# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolien
"""
Structured errors for jolien.

Every error raised by the container, the advice engine or the configuration
layer is a :class:`JolienError` carrying an :class:`ErrorCode`. Codes belong
to an :class:`ErrorCategory`; both are interned in the process-wide error
registry, so a package declares its category and codes once at import time
and every later ``get_or_create`` returns the same objects.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import UTC, datetime
from enum import Enum
from typing import Any, Final, Generic, TypeVar

from jolien.errors.registry import registry

N = TypeVar("N", bound="_Node")


class ErrorSeverity(str, Enum):
    """How serious an error is."""

    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    FATAL = "fatal"


class _Node(ABC, Generic[N]):
    """Shared parent-chain behaviour of categories and codes."""

    parent: N | None

    @abstractmethod
    def _identity(self) -> str:
        """The value a node is compared, hashed and printed by."""

    def _descends_from(self, ancestor: N) -> bool:
        node: Any = self
        while node is not None:
            if node == ancestor:
                return True
            node = node.parent
        return False

    def __str__(self) -> str:
        return self._identity()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._identity()!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return False
        return self._identity() == other._identity()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._identity()))


class ErrorCategory(_Node["ErrorCategory"]):
    """A named group of error codes, optionally nested under a parent.

    Args:
        name: Category name, unique across the process
        parent: Enclosing category
    """

    def __init__(self, name: str, parent: ErrorCategory | None = None) -> None:
        self.name = name
        self.parent = parent

    def _identity(self) -> str:
        return self.name

    def is_subcategory_of(self, category: ErrorCategory) -> bool:
        """True if this is ``category`` or lies beneath it."""
        return self._descends_from(category)

    @classmethod
    def get_by_name(cls, name: str) -> ErrorCategory | None:
        return registry.lookup_category(name)

    @classmethod
    def get_or_create(
        cls, name: str, parent: ErrorCategory | None = None
    ) -> ErrorCategory:
        """Return the interned category called ``name``, creating it on first use."""
        return registry.get_category(name, parent)


INTERNAL: Final = ErrorCategory.get_or_create("INTERNAL")


class ErrorCode(_Node["ErrorCode"]):
    """A machine-readable error identifier.

    Args:
        code: Identifier, unique across the process
        category: Owning category; ``INTERNAL`` if omitted
        parent: More general code this one refines
    """

    def __init__(
        self,
        code: str,
        category: ErrorCategory | None = None,
        parent: ErrorCode | None = None,
    ) -> None:
        self.code = code
        self.category = category or registry.get_category("INTERNAL")
        self.parent = parent

    def _identity(self) -> str:
        return self.code

    def is_subcode_of(self, parent_code: ErrorCode) -> bool:
        """True if this is ``parent_code`` or refines it."""
        return self._descends_from(parent_code)

    @classmethod
    def get_by_code(
        cls, code: str, *, raise_if_missing: bool = True
    ) -> ErrorCode | None:
        """Find an interned code by its identifier.

        Raises:
            ValueError: If the code is unknown and ``raise_if_missing`` is set
        """
        found = registry.lookup_code(code)
        if found is None and raise_if_missing:
            raise ValueError(f"Unknown error code: {code}")
        return found

    @classmethod
    def get_or_create(cls, name: str, category: ErrorCategory) -> ErrorCode:
        """Return the interned code ``name`` in ``category``, creating it on first use."""
        return registry.get_code(name, category.name)


INTERNAL_ERROR: Final = ErrorCode.get_or_create("INTERNAL_ERROR", INTERNAL)


class JolienError(Exception):
    """Root of every jolien error.

    Abstract: raise one of the package-specific subclasses instead.

    Attributes:
        message: Human-readable description
        code: The :class:`ErrorCode`
        category: The code's category
        severity: How serious the error is
        context: Diagnostic key/value pairs
        timestamp: When the error was created (UTC)
    """

    message: str
    code: ErrorCode
    category: ErrorCategory
    severity: ErrorSeverity
    context: dict[str, Any]
    timestamp: datetime

    def __new__(cls, *args: Any, **kwargs: Any) -> JolienError:
        if cls is JolienError:
            raise TypeError("JolienError is abstract; raise a subclass instead")
        return super().__new__(cls)

    def __init__(
        self,
        message: str,
        code: ErrorCode = INTERNAL_ERROR,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        """
        Args:
            message: Human-readable description
            code: Error code; its category becomes the error's category
            severity: How serious the error is
            context: Diagnostic key/value pairs
            **kwargs: Further context entries, merged over ``context``
        """
        if not isinstance(code, ErrorCode):
            raise TypeError(
                f"code must be an ErrorCode, got {type(code).__name__}"
            )

        super().__init__(message)
        self.message = message
        self.code = code
        self.category = code.category
        self.severity = severity
        self.context = {**(context or {}), **kwargs}
        self.timestamp = datetime.now(UTC)

    def add_context(self, key: str, value: Any) -> JolienError:
        """Record one more context entry; returns the error for chaining."""
        self.context[key] = value
        return self

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Serialisable view of the error."""
        return {
            "code": str(self.code),
            "message": self.message,
            "category": str(self.category),
            "severity": self.severity.value,
            "context": dict(self.context),
            "timestamp": self.timestamp.isoformat(),
        }
