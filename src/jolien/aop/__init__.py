# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolien

"""
Public API for the jolien advice engine.
"""

from __future__ import annotations

from jolien.aop.errors import AdviceError, ProceedMisuseError
from jolien.aop.join_point import (
    AsyncJoinPoint,
    JoinPoint,
    callee_name,
    current_join_point,
    proceed,
)
from jolien.aop.advice import after, around, before
from jolien.aop.aspect import Aspect, apply_aspects, weave

__all__ = [
    "AdviceError",
    "Aspect",
    "AsyncJoinPoint",
    "JoinPoint",
    "ProceedMisuseError",
    "after",
    "apply_aspects",
    "around",
    "before",
    "callee_name",
    "current_join_point",
    "proceed",
    "weave",
]
