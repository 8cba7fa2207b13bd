# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolien
"""
The component capability.

A value is usable as a component when it is an instance of :class:`Component`,
either because its class derives from it or because the class was declared a
virtual subclass with :func:`component`. Types that can be neither subclassed
nor declared are wrapped in a :class:`ComponentAdapter`.

The edges walked by the cycle detector come from
:meth:`Component.component_dependencies`; the default implementation lists
the direct fields of the instance that are themselves components.
"""

from __future__ import annotations

from abc import ABC
from collections.abc import Iterator
from typing import Any, TypeVar

T = TypeVar("T", bound=type)

__all__ = [
    "Component",
    "ComponentAdapter",
    "adapt",
    "component",
    "component_key",
    "dependencies_of",
    "is_component",
]


class Component(ABC):
    """Marker base class for registrable components."""

    __slots__ = ()

    def component_dependencies(self) -> list[Any]:
        """Return the components this instance holds directly.

        Override to declare the edge list explicitly; the default walks the
        instance fields.
        """
        return list(_component_fields(self))


class ComponentAdapter(Component):
    """Component wrapper for values whose type cannot be changed.

    Attribute access is delegated to the wrapped value, and the adapter is
    registered and looked up under the wrapped value's type.
    """

    def __init__(self, target: Any) -> None:
        if isinstance(target, Component):
            raise TypeError(f"{type(target).__qualname__} is already a component")
        self._target = target

    @property
    def target(self) -> Any:
        return self._target

    def __getattr__(self, name: str) -> Any:
        # Protocol lookups (copy, pickle) must see the adapter, not the target
        if name.startswith("__") and name.endswith("__"):
            raise AttributeError(name)
        try:
            target = self.__dict__["_target"]
        except KeyError:
            raise AttributeError(name) from None
        return getattr(target, name)

    def component_dependencies(self) -> list[Any]:
        return list(_component_fields(self._target))

    def __repr__(self) -> str:
        return f"ComponentAdapter({self._target!r})"


def component(cls: T) -> T:
    """Class decorator declaring ``cls`` a component without subclassing.

    Example:
        ```python
        @component
        @dataclass
        class Config:
            host: str
        ```
    """
    if not isinstance(cls, type):
        raise TypeError("@component can only decorate classes")
    Component.register(cls)
    return cls


def adapt(value: Any) -> Component:
    """Return ``value`` if it is a component, otherwise wrap it in an adapter."""
    if isinstance(value, Component):
        return value
    return ComponentAdapter(value)


def is_component(value: Any) -> bool:
    """Capability check: can ``value`` be registered as a component?"""
    return isinstance(value, Component)


def component_key(value: Any) -> type:
    """Return the type a component is registered and looked up under."""
    if isinstance(value, ComponentAdapter):
        return type(value.target)
    return type(value)


def dependencies_of(value: Any) -> list[Any]:
    """Return the component-valued edges of ``value``.

    Virtual subclasses declared with :func:`component` do not inherit
    :meth:`Component.component_dependencies`, so they get the field walk.
    """
    declared = getattr(value, "component_dependencies", None)
    if callable(declared):
        return [dep for dep in declared() if dep is not None and is_component(dep)]
    return list(_component_fields(value))


def _component_fields(value: Any) -> Iterator[Any]:
    for field_value in _field_values(value):
        if field_value is not None and is_component(field_value):
            yield field_value


def _field_values(value: Any) -> Iterator[Any]:
    instance_dict = getattr(value, "__dict__", None)
    if isinstance(instance_dict, dict):
        yield from list(instance_dict.values())

    seen: set[str] = set()
    for klass in type(value).__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if slot in seen or slot in ("__dict__", "__weakref__"):
                continue
            seen.add(slot)
            try:
                yield object.__getattribute__(value, slot)
            except AttributeError:
                continue
