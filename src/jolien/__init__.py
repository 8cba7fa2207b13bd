# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolien

"""
jolien: a small component container with aspect-oriented advice.

Register components by type under a singleton or prototype scope, look them
up again, and wrap any callable with before, after and around advice.

Example:
    ```python
    from dataclasses import dataclass
    from jolien import Component, around, lookup, register

    @dataclass
    class Config(Component):
        host: str

    register(Config("localhost"))
    lookup(Config).host  # "localhost"

    def double(x: int) -> int:
        return x * 2

    traced = around(double, lambda jp: jp.proceed())
    traced(5)  # 10
    ```
"""

from __future__ import annotations

from jolien.errors import ErrorCategory, ErrorCode, ErrorSeverity, JolienError
from jolien.config import ComponentSettings, ContainerSettings, Environment, get_settings
from jolien.di import (
    Autowired,
    CircularDependencyError,
    Component,
    ComponentAdapter,
    ComponentNotFoundError,
    Container,
    DIError,
    DuplicateComponentError,
    InvalidAspectError,
    InvalidComponentError,
    PrototypeCopyError,
    RegistryEntry,
    Scope,
    adapt,
    autowired,
    component,
    detect_cycle,
    get_container,
    lookup,
    register,
    register_aspect,
    reset,
)
from jolien.aop import (
    AdviceError,
    Aspect,
    JoinPoint,
    ProceedMisuseError,
    after,
    apply_aspects,
    around,
    before,
    current_join_point,
    proceed,
    weave,
)

__version__ = "0.3.0"

__all__ = [
    "AdviceError",
    "Aspect",
    "Autowired",
    "CircularDependencyError",
    "Component",
    "ComponentAdapter",
    "ComponentNotFoundError",
    "ComponentSettings",
    "Container",
    "ContainerSettings",
    "DIError",
    "DuplicateComponentError",
    "Environment",
    "ErrorCategory",
    "ErrorCode",
    "ErrorSeverity",
    "InvalidAspectError",
    "InvalidComponentError",
    "JoinPoint",
    "JolienError",
    "ProceedMisuseError",
    "PrototypeCopyError",
    "RegistryEntry",
    "Scope",
    "adapt",
    "after",
    "apply_aspects",
    "around",
    "autowired",
    "before",
    "component",
    "current_join_point",
    "detect_cycle",
    "get_container",
    "get_settings",
    "lookup",
    "proceed",
    "register",
    "register_aspect",
    "reset",
    "weave",
]
