# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolien
"""
Component container for jolien.

The container maps a component's type to a :class:`RegistryEntry` and keeps
an ordered list of aspects. It supports two scopes:
- Singleton: the registered instance is returned by every lookup
- Prototype: every lookup returns a freshly built instance

Registration is all-or-nothing and mutually exclusive with every other
registration, lookup and reset on the same container.
"""

from __future__ import annotations

import copy
import threading
from collections.abc import Callable, Iterator
from typing import Any, TypeVar, cast

from jolien.config.settings import get_settings
from jolien.di.component import component_key, is_component
from jolien.di.cycles import detect_cycle
from jolien.di.errors import (
    ComponentNotFoundError,
    DuplicateComponentError,
    InvalidAspectError,
    InvalidComponentError,
    PrototypeCopyError,
)
from jolien.di.registration import RegistryEntry
from jolien.di.scope import Scope
from jolien.logging import get_logger

T = TypeVar("T")
C = TypeVar("C")

logger = get_logger(__name__)


class Container:
    """Registry of components keyed by type, plus the ordered aspect list.

    Attributes:
        _entries: dict[type, RegistryEntry]
            Committed registrations in insertion order.
        _aspects: list[Any]
            Registered aspects in registration order.
        _lock: threading.RLock
            Guards every read and write of the two collections above.
    """

    def __init__(self) -> None:
        self._entries: dict[type, RegistryEntry] = {}
        self._aspects: list[Any] = []
        self._lock = threading.RLock()

    def register(
        self,
        component: C,
        scope: Scope | str | None = None,
        *,
        factory: Callable[[], C] | None = None,
    ) -> C:
        """Register a component under its concrete type.

        Args:
            component: The instance to register
            scope: Scope of the entry; the configured default scope if None
            factory: Construction rule for prototype entries. Without one,
                each lookup deep-copies the state the component had when it
                was registered.

        Returns:
            The same ``component`` object

        Raises:
            InvalidComponentError: If ``component`` is not a component
            DuplicateComponentError: If its type is already registered
            CircularDependencyError: If its field graph contains a cycle
            PrototypeCopyError: If a prototype without ``factory`` cannot be
                deep-copied
            ValueError: If ``factory`` is given for a singleton registration
        """
        settings = get_settings()
        scope = Scope(scope if scope is not None else settings.default_scope)

        if factory is not None and scope is not Scope.PROTOTYPE:
            raise ValueError("A factory can only be given for prototype components")

        with self._lock:
            if not is_component(component):
                raise InvalidComponentError(type(component))

            key = component_key(component)
            if key in self._entries:
                logger.warning(
                    "Duplicate registration rejected",
                    extra={"component_type": key},
                )
                raise DuplicateComponentError(key)

            if settings.check_cycles:
                detect_cycle(component, container=self)

            if scope is Scope.PROTOTYPE and factory is None:
                factory = self._template_factory(component)

            self._entries[key] = RegistryEntry(key, component, scope, factory)

        logger.debug(
            "Registered component",
            extra={"component_type": key, "scope": scope.value},
        )
        return component

    def lookup(self, component_type: type[T]) -> T:
        """Return the component registered under ``component_type``.

        Singleton entries return the registered instance itself; prototype
        entries return a new instance on every call.

        Raises:
            ComponentNotFoundError: If nothing is registered for the type
        """
        with self._lock:
            entry = self._entries.get(component_type)

        if entry is None:
            logger.debug(
                "Lookup of unregistered component",
                extra={"component_type": component_type},
            )
            raise ComponentNotFoundError(component_type)

        return cast(T, entry.resolve())

    def reset(self) -> None:
        """Remove every component and aspect."""
        with self._lock:
            self._entries.clear()
            self._aspects.clear()
        logger.debug("Container reset")

    def register_aspect(self, aspect: Any) -> Any:
        """Append ``aspect`` to the ordered aspect list and return it.

        Raises:
            InvalidAspectError: If ``aspect`` is not an aspect
        """
        from jolien.aop.aspect import Aspect

        if not isinstance(aspect, Aspect):
            raise InvalidAspectError(type(aspect))

        with self._lock:
            self._aspects.append(aspect)

        logger.debug("Registered aspect", extra={"aspect_type": type(aspect)})
        return aspect

    @property
    def aspects(self) -> tuple[Any, ...]:
        """Snapshot of the registered aspects in registration order."""
        with self._lock:
            return tuple(self._aspects)

    def entry(self, component_type: type) -> RegistryEntry:
        """Return the committed entry for ``component_type``.

        Raises:
            ComponentNotFoundError: If nothing is registered for the type
        """
        with self._lock:
            try:
                return self._entries[component_type]
            except KeyError:
                raise ComponentNotFoundError(component_type) from None

    def registered_types(self) -> list[type]:
        """Registered component types in registration order."""
        with self._lock:
            return list(self._entries)

    def __contains__(self, component_type: object) -> bool:
        with self._lock:
            return component_type in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __iter__(self) -> Iterator[type]:
        return iter(self.registered_types())

    def _shared_instances(self) -> dict[int, Any]:
        # Seeds deepcopy's memo so registered singletons are referenced, not copied.
        with self._lock:
            return {
                id(entry.component): entry.component
                for entry in self._entries.values()
                if entry.scope is Scope.SINGLETON
            }

    def _template_factory(self, component: C) -> Callable[[], C]:
        try:
            template = copy.deepcopy(component, self._shared_instances())
        except (TypeError, copy.Error) as exc:
            raise PrototypeCopyError(component_key(component), str(exc)) from exc

        def build() -> C:
            return copy.deepcopy(template, self._shared_instances())

        return build


_GLOBAL_CONTAINER = Container()


def get_container() -> Container:
    """Return the process-wide container."""
    return _GLOBAL_CONTAINER


def register(
    component: C,
    scope: Scope | str | None = None,
    *,
    factory: Callable[[], C] | None = None,
) -> C:
    """Register ``component`` in the process-wide container."""
    return _GLOBAL_CONTAINER.register(component, scope, factory=factory)


def lookup(component_type: type[T]) -> T:
    """Look up ``component_type`` in the process-wide container."""
    return _GLOBAL_CONTAINER.lookup(component_type)


def reset() -> None:
    """Clear the process-wide container."""
    _GLOBAL_CONTAINER.reset()


def register_aspect(aspect: Any) -> Any:
    """Register ``aspect`` in the process-wide container."""
    return _GLOBAL_CONTAINER.register_aspect(aspect)
