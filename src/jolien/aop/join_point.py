# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolien
"""
Join points and the ``proceed`` primitive.

Every call of an around-wrapped callable builds a :class:`JoinPoint` holding
the callee name, the call's arguments and a ``proceed`` bound to the wrapped
target. The join point is passed to the advice body and also installed as
the current join point for the duration of the body, so code running inside
the body can use the module-level :func:`proceed`.

The current join point lives in a :class:`~contextvars.ContextVar`: nested
advice restores the outer join point on every exit path, and concurrent
threads or asyncio tasks never see each other's join point.
"""

from __future__ import annotations

import contextlib
from collections.abc import Callable, Iterator
from contextvars import ContextVar
from typing import Any

from jolien.aop.errors import ProceedMisuseError

_CURRENT_JOIN_POINT: ContextVar[JoinPoint | None] = ContextVar(
    "jolien_current_join_point", default=None
)


def callee_name(target: Callable[..., Any]) -> str:
    """Name token identifying ``target`` in join points and logs."""
    return getattr(target, "__name__", None) or type(target).__name__


class JoinPoint:
    """Context of a single around-advised invocation.

    Attributes:
        target: The callable being advised
        name: Callee-name token of ``target``
        args: Positional arguments of the invocation
        kwargs: Keyword arguments of the invocation
        proceed_count: How many times ``proceed`` has been called
        result: Value returned by the latest ``proceed``
    """

    def __init__(
        self,
        target: Callable[..., Any],
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
        name: str | None = None,
    ) -> None:
        self.target = target
        self.name = name or callee_name(target)
        self.args = args
        self.kwargs = kwargs
        self.proceed_count = 0
        self.result: Any = None

    @property
    def proceeded(self) -> bool:
        return self.proceed_count > 0

    def _call_arguments(
        self, args: tuple[Any, ...], kwargs: dict[str, Any]
    ) -> tuple[tuple[Any, ...], dict[str, Any]]:
        if args or kwargs:
            return args, kwargs
        return self.args, self.kwargs

    def proceed(self, *args: Any, **kwargs: Any) -> Any:
        """Invoke the target.

        Without arguments the invocation's own arguments are reused; with
        arguments they replace them for this call only.
        """
        call_args, call_kwargs = self._call_arguments(args, kwargs)
        self.proceed_count += 1
        self.result = self.target(*call_args, **call_kwargs)
        return self.result

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name}, args={self.args!r})"


class AsyncJoinPoint(JoinPoint):
    """Join point for coroutine targets; ``proceed`` must be awaited."""

    async def proceed(self, *args: Any, **kwargs: Any) -> Any:
        call_args, call_kwargs = self._call_arguments(args, kwargs)
        self.proceed_count += 1
        self.result = await self.target(*call_args, **call_kwargs)
        return self.result


@contextlib.contextmanager
def installed(join_point: JoinPoint) -> Iterator[JoinPoint]:
    """Make ``join_point`` current for the block, restoring the previous one after."""
    token = _CURRENT_JOIN_POINT.set(join_point)
    try:
        yield join_point
    finally:
        _CURRENT_JOIN_POINT.reset(token)


def current_join_point() -> JoinPoint:
    """Return the join point of the innermost active around body.

    Raises:
        ProceedMisuseError: If no around body is active
    """
    join_point = _CURRENT_JOIN_POINT.get()
    if join_point is None:
        raise ProceedMisuseError.outside_around()
    return join_point


def proceed(*args: Any, **kwargs: Any) -> Any:
    """Invoke the target of the innermost active around body.

    Raises:
        ProceedMisuseError: If called outside an around body
    """
    return current_join_point().proceed(*args, **kwargs)
