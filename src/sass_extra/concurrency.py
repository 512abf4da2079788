"""Ordered, fail-fast fan-out over anyio task groups."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from typing import TypeVar

import anyio

T = TypeVar("T")


def first_error(group: BaseExceptionGroup) -> BaseException:
    error: BaseException = group
    while isinstance(error, BaseExceptionGroup):
        error = error.exceptions[0]
    return error


async def gather_ordered(calls: Sequence[Callable[[], Awaitable[T]]]) -> list[T]:
    """
    Run every call concurrently and return results in call order.
    The first failure cancels the pending siblings and is re-raised as-is,
    not wrapped in an ExceptionGroup.
    """
    results: list[T | None] = [None] * len(calls)

    async def _run(index: int, call: Callable[[], Awaitable[T]]) -> None:
        results[index] = await call()

    try:
        async with anyio.create_task_group() as tg:
            for index, call in enumerate(calls):
                tg.start_soon(_run, index, call)
    except BaseExceptionGroup as group:
        raise first_error(group) from None
    return results  # type: ignore[return-value]
