# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolien
"""
Before, after and around advice.

Each builder returns a new callable wrapping ``target``; the target and any
previously built wrapper are left untouched, so chains compose by nesting::

    traced = around(before(fetch, audit), time_call)

For ``outer(middle(inner(base)))`` the outermost before-phase runs first,
``proceed`` unwinds through every inner layer down to ``base`` and the
after-phases run innermost first.

When ``target`` is a coroutine function the wrapper is a coroutine function
too, and actions or bodies may be either plain or async callables. Errors
raised by the target or by an advice propagate through every layer.
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar, cast

from jolien.aop.errors import ProceedMisuseError
from jolien.aop.join_point import AsyncJoinPoint, JoinPoint, callee_name, installed
from jolien.config.settings import get_settings
from jolien.logging import get_logger

F = TypeVar("F", bound=Callable[..., Any])

logger = get_logger(__name__)

__all__ = ["after", "around", "before"]


def before(target: F, action: Callable[[], Any]) -> F:
    """Run ``action()`` before every call of ``target``.

    The action cannot see the arguments, suppress the call or alter its result.
    """
    if inspect.iscoroutinefunction(target):

        @functools.wraps(target)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            await _resolve(action())
            return await target(*args, **kwargs)

        return cast(F, async_wrapper)

    _require_sync(action, target)

    @functools.wraps(target)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        action()
        return target(*args, **kwargs)

    return cast(F, wrapper)


def after(
    target: F, action: Callable[..., Any], *, with_result: bool = False
) -> F:
    """Run ``action`` after every successful call of ``target``.

    Args:
        target: The callable to wrap
        action: Called with no arguments, or with the result when
            ``with_result`` is set. Its return value is ignored; rewriting
            results is done with :func:`around`.
        with_result: Pass the target's result to ``action``

    Returns:
        A wrapper returning the target's result unchanged
    """

    def notify(result: Any) -> Any:
        return action(result) if with_result else action()

    if inspect.iscoroutinefunction(target):

        @functools.wraps(target)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            result = await target(*args, **kwargs)
            await _resolve(notify(result))
            return result

        return cast(F, async_wrapper)

    _require_sync(action, target)

    @functools.wraps(target)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        result = target(*args, **kwargs)
        notify(result)
        return result

    return cast(F, wrapper)


def around(
    target: F,
    body: Callable[..., Any],
    *,
    strict: bool | None = None,
) -> F:
    """Let ``body`` decide whether, when and how often ``target`` runs.

    ``body`` receives the call's :class:`JoinPoint` (a body declared without
    parameters is called with none and reaches the join point through the
    module-level ``proceed()``). The wrapper returns whatever ``body``
    returns.

    If ``body`` returns without proceeding, strict mode raises
    :class:`ProceedMisuseError`; otherwise ``target`` is invoked once
    automatically and its result is returned.

    Args:
        target: The callable to wrap
        body: The advice body
        strict: Proceed policy; ``ContainerSettings.strict_proceed`` if None
    """
    strict_mode = get_settings().strict_proceed if strict is None else strict
    name = callee_name(target)
    call_body = _body_caller(body)

    if inspect.iscoroutinefunction(target):

        @functools.wraps(target)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            join_point = AsyncJoinPoint(target, args, kwargs, name)
            with installed(join_point):
                result = await _resolve(call_body(join_point))
                if not join_point.proceeded:
                    _check_not_strict(strict_mode, name)
                    result = await join_point.proceed()
            return result

        return cast(F, async_wrapper)

    _require_sync(body, target)

    @functools.wraps(target)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        join_point = JoinPoint(target, args, kwargs, name)
        with installed(join_point):
            result = call_body(join_point)
            if not join_point.proceeded:
                _check_not_strict(strict_mode, name)
                result = join_point.proceed()
        return result

    return cast(F, wrapper)


def _check_not_strict(strict_mode: bool, name: str) -> None:
    if strict_mode:
        logger.warning("Around advice returned without proceeding", extra={"callee": name})
        raise ProceedMisuseError.never_proceeded(name)


def _body_caller(body: Callable[..., Any]) -> Callable[[JoinPoint], Any]:
    if _accepts_argument(body):
        return body
    return lambda _join_point: body()


def _accepts_argument(fn: Callable[..., Any]) -> bool:
    try:
        parameters = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError):
        return True
    return any(
        p.kind
        in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
            inspect.Parameter.VAR_POSITIONAL,
        )
        for p in parameters
    )


def _require_sync(advice: Callable[..., Any], target: Callable[..., Any]) -> None:
    if inspect.iscoroutinefunction(advice):
        raise TypeError(
            f"Async advice {callee_name(advice)} needs a coroutine target, "
            f"got {callee_name(target)}"
        )


async def _resolve(value: Any | Awaitable[Any]) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value
