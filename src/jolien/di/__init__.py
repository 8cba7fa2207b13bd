# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolien

"""
Public API for the jolien component container.
"""

from __future__ import annotations

from jolien.di.errors import (
    CircularDependencyError,
    ComponentNotFoundError,
    DIError,
    DuplicateComponentError,
    InvalidAspectError,
    InvalidComponentError,
    PrototypeCopyError,
)
from jolien.di.component import (
    Component,
    ComponentAdapter,
    adapt,
    component,
    component_key,
    dependencies_of,
    is_component,
)
from jolien.di.scope import Scope
from jolien.di.registration import RegistryEntry
from jolien.di.cycles import detect_cycle
from jolien.di.container import (
    Container,
    get_container,
    lookup,
    register,
    register_aspect,
    reset,
)
from jolien.di.autowired import Autowired, autowired

__all__ = [
    "Autowired",
    "CircularDependencyError",
    "Component",
    "ComponentAdapter",
    "ComponentNotFoundError",
    "Container",
    "DIError",
    "DuplicateComponentError",
    "InvalidAspectError",
    "InvalidComponentError",
    "PrototypeCopyError",
    "RegistryEntry",
    "Scope",
    "adapt",
    "autowired",
    "component",
    "component_key",
    "dependencies_of",
    "detect_cycle",
    "get_container",
    "is_component",
    "lookup",
    "register",
    "register_aspect",
    "reset",
]
