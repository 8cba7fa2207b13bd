"""Tests for advice on coroutine functions."""

from __future__ import annotations

import asyncio
import inspect
from typing import Any

import pytest

from jolien.aop import (
    Aspect,
    AsyncJoinPoint,
    JoinPoint,
    ProceedMisuseError,
    after,
    around,
    before,
    current_join_point,
    proceed,
    weave,
)


async def fetch(key: str) -> str:
    await asyncio.sleep(0)
    return f"value:{key}"


@pytest.mark.asyncio
async def test_before_with_sync_and_async_actions() -> None:
    log: list[str] = []

    async def async_action() -> None:
        log.append("async")

    wrapped = before(before(fetch, async_action), lambda: log.append("sync"))

    assert inspect.iscoroutinefunction(wrapped)
    assert await wrapped("a") == "value:a"
    assert log == ["sync", "async"]


@pytest.mark.asyncio
async def test_after_with_result() -> None:
    seen: list[str] = []

    async def observe(result: str) -> None:
        seen.append(result)

    wrapped = after(fetch, observe, with_result=True)

    assert await wrapped("b") == "value:b"
    assert seen == ["value:b"]


@pytest.mark.asyncio
async def test_around_async_body() -> None:
    async def body(jp: AsyncJoinPoint) -> str:
        assert isinstance(jp, AsyncJoinPoint)
        result = await jp.proceed()
        return result.upper()

    assert await around(fetch, body)("c") == "VALUE:C"


@pytest.mark.asyncio
async def test_around_sync_body_returning_awaitable() -> None:
    wrapped = around(fetch, lambda jp: jp.proceed())
    assert await wrapped("d") == "value:d"


@pytest.mark.asyncio
async def test_ambient_proceed_in_async_body() -> None:
    async def body() -> str:
        assert current_join_point().name == "fetch"
        return await proceed("override")

    assert await around(fetch, body)("e") == "value:override"


@pytest.mark.asyncio
async def test_permissive_auto_proceed() -> None:
    async def body(jp: JoinPoint) -> None:
        return None

    assert await around(fetch, body, strict=False)("f") == "value:f"


@pytest.mark.asyncio
async def test_strict_requires_proceed() -> None:
    async def body(jp: JoinPoint) -> None:
        return None

    with pytest.raises(ProceedMisuseError):
        await around(fetch, body, strict=True)("g")


@pytest.mark.asyncio
async def test_concurrent_tasks_are_isolated() -> None:
    async def body(jp: AsyncJoinPoint) -> str:
        await asyncio.sleep(0)
        assert current_join_point() is jp
        return await proceed()

    wrapped = around(fetch, body)
    results = await asyncio.gather(*(wrapped(str(i)) for i in range(10)))

    assert results == [f"value:{i}" for i in range(10)]
    with pytest.raises(ProceedMisuseError):
        current_join_point()


@pytest.mark.asyncio
async def test_errors_propagate() -> None:
    async def broken() -> None:
        raise LookupError("gone")

    wrapped = around(after(broken, lambda: None), lambda jp: jp.proceed())

    with pytest.raises(LookupError, match="gone"):
        await wrapped()


@pytest.mark.asyncio
async def test_weave_async_target() -> None:
    log: list[str] = []

    class Audit(Aspect):
        async def before(self, join_point: JoinPoint) -> None:
            log.append(f"before:{join_point.args[0]}")

        def after(self, join_point: JoinPoint, result: Any) -> None:
            log.append(f"after:{result}")

    woven = weave(fetch, [Audit()])

    assert await woven("h") == "value:h"
    assert log == ["before:h", "after:value:h"]


def test_async_body_on_sync_target_rejected() -> None:
    def target() -> None:
        pass

    async def body(jp: JoinPoint) -> None:
        pass

    with pytest.raises(TypeError):
        around(target, body)
