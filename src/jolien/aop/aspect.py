# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolien
"""
Aspects: stateful cross-cutting behaviour applied to any callable.

An aspect is an instance of :class:`Aspect` defining any of three hooks:

- ``before(join_point)`` runs before the target
- ``after(join_point, result)`` runs after the target returns
- ``around(join_point)`` controls the call through ``join_point.proceed()``

Aspects registered in a container run in reverse registration order:
:func:`weave` layers them in registration order, so the most recently
registered aspect ends up outermost and its advice runs first. Within one
aspect the around hook is layered first, then before, then after.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, TypeVar

from jolien.aop.advice import around
from jolien.aop.join_point import JoinPoint

if TYPE_CHECKING:
    from jolien.di.container import Container

F = TypeVar("F", bound=Callable[..., Any])

HOOKS = ("around", "before", "after")


class Aspect:
    """Base class for aspects.

    Subclasses keep whatever state their hooks need (counters, logs, caches)
    and define only the hooks they use.
    """

    def hooks(self) -> list[str]:
        """Names of the hooks this aspect defines, in layering order."""
        return [name for name in HOOKS if callable(getattr(self, name, None))]


def weave(
    target: F,
    aspects: Iterable[Aspect] | None = None,
    *,
    container: Container | None = None,
) -> F:
    """Wrap ``target`` with every aspect's hooks.

    Args:
        target: The callable to advise
        aspects: Aspects in registration order; the container's if None
        container: Container supplying the aspects; the process-wide one if None

    Returns:
        The advised callable
    """
    if aspects is None:
        if container is None:
            from jolien.di.container import get_container

            container = get_container()
        aspects = container.aspects

    is_async = inspect.iscoroutinefunction(target)
    woven: Any = target
    for aspect in aspects:
        for hook in aspect.hooks():
            if hook == "around":
                woven = around(woven, aspect.around)
            elif hook == "before":
                woven = around(woven, _before_body(aspect.before, is_async), strict=False)
            else:
                woven = around(woven, _after_body(aspect.after, is_async), strict=False)
    return woven


def apply_aspects(target: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """Weave the process-wide container's aspects around ``target`` and call it."""
    return weave(target)(*args, **kwargs)


def _before_body(hook: Callable[[JoinPoint], Any], is_async: bool) -> Callable[[JoinPoint], Any]:
    if is_async:

        async def async_body(join_point: JoinPoint) -> Any:
            outcome = hook(join_point)
            if inspect.isawaitable(outcome):
                await outcome
            return await join_point.proceed()

        return async_body

    def body(join_point: JoinPoint) -> Any:
        hook(join_point)
        return join_point.proceed()

    return body


def _after_body(
    hook: Callable[[JoinPoint, Any], Any], is_async: bool
) -> Callable[[JoinPoint], Any]:
    if is_async:

        async def async_body(join_point: JoinPoint) -> Any:
            result = await join_point.proceed()
            outcome = hook(join_point, result)
            if inspect.isawaitable(outcome):
                await outcome
            return result

        return async_body

    def body(join_point: JoinPoint) -> Any:
        result = join_point.proceed()
        hook(join_point, result)
        return result

    return body
