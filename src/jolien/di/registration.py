# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolien
"""
Registry entries.

This module defines the RegistryEntry class used to track component
registrations in the container.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from jolien.di.scope import SCOPE_POLICY_MAP, Scope, ScopePolicy


@dataclass(frozen=True)
class RegistryEntry:
    """A committed registration.

    Attributes:
        key: The type the component is looked up under
        component: The instance passed to ``register``
        scope: The scope chosen at registration time
        factory: Construction rule for prototype entries, ``None`` for singletons
    """

    key: type
    component: Any
    scope: Scope
    factory: Callable[[], Any] | None = field(default=None, compare=False)

    @property
    def policy(self) -> ScopePolicy:
        return SCOPE_POLICY_MAP[self.scope]

    def resolve(self) -> Any:
        """Produce the value a lookup of this entry returns."""
        return self.policy.get_instance(self)
