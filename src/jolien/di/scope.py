# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolien
"""
Scope policies deciding what a lookup returns.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from jolien.di.registration import RegistryEntry


class Scope(str, Enum):
    """Component lifetime options."""

    SINGLETON = "singleton"
    PROTOTYPE = "prototype"


class ScopePolicy(Protocol):
    def get_instance(self, entry: RegistryEntry) -> Any: ...


class SingletonPolicy:
    """One instance, shared by every lookup until the container is reset."""

    def get_instance(self, entry: RegistryEntry) -> Any:
        return entry.component


class PrototypePolicy:
    """A freshly built instance on every lookup."""

    def get_instance(self, entry: RegistryEntry) -> Any:
        if entry.factory is None:
            raise RuntimeError(
                f"Prototype entry for {entry.key.__qualname__} has no factory"
            )
        return entry.factory()


SCOPE_POLICY_MAP: dict[Scope, ScopePolicy] = {
    Scope.SINGLETON: SingletonPolicy(),
    Scope.PROTOTYPE: PrototypePolicy(),
}
