# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolien
"""
Circular dependency detection over component fields.

The walk is depth-first from the component being checked. Each component is
a node and its edges are :func:`~jolien.di.component.dependencies_of`. A
neighbour that is already on the current path closes a cycle. A neighbour is
descended into when its type is registered, even if it is not the
registered instance (a prototype lookup, or a second instance of the type).
A neighbour of an unregistered type is checked when that type gets registered.

Each branch works on its own copy of the visited set, so a dependency shared
by two branches (a diamond) is not mistaken for a cycle.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from jolien.di.component import component_key, dependencies_of
from jolien.di.errors import CircularDependencyError

if TYPE_CHECKING:
    from jolien.di.container import Container


def detect_cycle(
    component: Any,
    visited: set[int] | None = None,
    *,
    container: Container | None = None,
) -> None:
    """Raise if ``component`` reaches itself or an ancestor through its fields.

    Args:
        component: The component whose graph is checked
        visited: Identities (``id()``) already on the path; a fresh set if None
        container: Container deciding which neighbours are descended into;
            the process-wide container if None

    Raises:
        CircularDependencyError: Carrying the type chain that closed the cycle
    """
    if container is None:
        from jolien.di.container import get_container

        container = get_container()

    _walk(component, set() if visited is None else set(visited), [], container)


def _walk(
    component: Any, visited: set[int], path: list[type], container: Container
) -> None:
    visited.add(id(component))
    path = [*path, component_key(component)]

    for neighbour in dependencies_of(component):
        if id(neighbour) in visited:
            raise CircularDependencyError([*path, component_key(neighbour)])

        if component_key(neighbour) in container:
            _walk(neighbour, set(visited), path, container)
