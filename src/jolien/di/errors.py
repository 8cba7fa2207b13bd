# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolien
"""
Error classes for the jolien component container.

All of these are recoverable conditions surfaced to the immediate caller of
the failing operation; registration failures leave the container unchanged.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Final

from jolien.errors.base import ErrorCategory, ErrorCode, ErrorSeverity, JolienError

DI: Final = ErrorCategory.get_or_create("DI")
DI_ERROR: Final = ErrorCode.get_or_create("DI_ERROR", DI)
DI_COMPONENT_NOT_FOUND: Final = ErrorCode.get_or_create("DI_COMPONENT_NOT_FOUND", DI)
DI_DUPLICATE_COMPONENT: Final = ErrorCode.get_or_create("DI_DUPLICATE_COMPONENT", DI)
DI_INVALID_COMPONENT: Final = ErrorCode.get_or_create("DI_INVALID_COMPONENT", DI)
DI_CIRCULAR_DEPENDENCY: Final = ErrorCode.get_or_create("DI_CIRCULAR_DEPENDENCY", DI)
DI_INVALID_ASPECT: Final = ErrorCode.get_or_create("DI_INVALID_ASPECT", DI)
DI_PROTOTYPE_COPY: Final = ErrorCode.get_or_create("DI_PROTOTYPE_COPY", DI)


def _type_name(value: Any) -> str:
    return getattr(value, "__qualname__", None) or str(value)


class DIError(JolienError):
    """Base class for all container errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = DI_ERROR,
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


class ComponentNotFoundError(DIError):
    """Raised when looking up a type that has no registration."""

    def __init__(self, component_type: type, **kwargs: Any) -> None:
        self.component_type = component_type
        super().__init__(
            f"Component not found: {_type_name(component_type)}",
            code=DI_COMPONENT_NOT_FOUND,
            component_type_name=_type_name(component_type),
            **kwargs,
        )


class DuplicateComponentError(DIError):
    """Raised when registering a type that is already registered."""

    def __init__(self, component_type: type, **kwargs: Any) -> None:
        self.component_type = component_type
        super().__init__(
            f"Component already registered: {_type_name(component_type)}",
            code=DI_DUPLICATE_COMPONENT,
            component_type_name=_type_name(component_type),
            **kwargs,
        )


class InvalidComponentError(DIError):
    """Raised when a value does not satisfy the component capability."""

    def __init__(self, component_type: type, **kwargs: Any) -> None:
        self.component_type = component_type
        super().__init__(
            f"Not a component: {_type_name(component_type)}",
            code=DI_INVALID_COMPONENT,
            component_type_name=_type_name(component_type),
            **kwargs,
        )


class CircularDependencyError(DIError):
    """Raised when the cycle detector finds a back-edge.

    Attributes:
        chain: The component types that closed the cycle, in traversal order
    """

    def __init__(self, chain: Sequence[type], **kwargs: Any) -> None:
        self.chain = tuple(chain)
        names = [_type_name(t) for t in self.chain]
        super().__init__(
            f"Circular dependency detected: {' -> '.join(names)}",
            code=DI_CIRCULAR_DEPENDENCY,
            dependency_chain=names,
            **kwargs,
        )


class InvalidAspectError(DIError):
    """Raised when registering a value that is not an aspect."""

    def __init__(self, aspect_type: type, **kwargs: Any) -> None:
        self.aspect_type = aspect_type
        super().__init__(
            f"Not an aspect: {_type_name(aspect_type)}",
            code=DI_INVALID_ASPECT,
            aspect_type_name=_type_name(aspect_type),
            **kwargs,
        )


class PrototypeCopyError(DIError):
    """Raised when a prototype registered without a factory cannot be copied."""

    def __init__(self, component_type: type, reason: str, **kwargs: Any) -> None:
        self.component_type = component_type
        super().__init__(
            f"Cannot copy prototype component {_type_name(component_type)} "
            f"({reason}); register it with factory=",
            code=DI_PROTOTYPE_COPY,
            component_type_name=_type_name(component_type),
            reason=reason,
            **kwargs,
        )
