# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolien
"""
Lazy access to registered components.

``autowired(T)`` is a zero-argument accessor and a class-level descriptor;
either way the lookup happens on access, so the entry's scope applies each
time::

    db_service = autowired(DatabaseService)
    db_service().config.host

    class Controller:
        service = autowired(UserService)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar, overload

if TYPE_CHECKING:
    from jolien.di.container import Container

T = TypeVar("T")


class Autowired(Generic[T]):
    """Accessor resolving ``component_type`` from a container on demand."""

    def __init__(
        self, component_type: type[T], container: Container | None = None
    ) -> None:
        if not isinstance(component_type, type):
            raise TypeError("autowired() requires a type")
        self.component_type = component_type
        self._container = container

    @property
    def container(self) -> Container:
        if self._container is not None:
            return self._container
        from jolien.di.container import get_container

        return get_container()

    def __call__(self) -> T:
        return self.container.lookup(self.component_type)

    @overload
    def __get__(self, instance: None, owner: type) -> Autowired[T]: ...

    @overload
    def __get__(self, instance: object, owner: type) -> T: ...

    def __get__(self, instance: Any, owner: type) -> Any:
        if instance is None:
            return self
        return self()

    def __repr__(self) -> str:
        return f"autowired({self.component_type.__qualname__})"


def autowired(
    component_type: type[T], *, container: Container | None = None
) -> Autowired[T]:
    """Create an accessor for ``component_type``.

    Args:
        component_type: The registered type to resolve
        container: Container to resolve from; the process-wide one if None
    """
    return Autowired(component_type, container)
