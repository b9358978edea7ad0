"""
Async Utilities.

Provides:
- Parallel execution with asyncio.TaskGroup, collecting failures as values
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Awaitable

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def gather_with_errors(*coros: Awaitable[T]) -> list[T | Exception]:
    """
    Execute coroutines in parallel using TaskGroup.

    A coroutine that raises contributes its exception in place of a result,
    so one failure never cancels the others. Results are returned in the
    order the coroutines were passed.

    Args:
        *coros: Coroutines to execute

    Returns:
        List of results or exceptions

    Example:
        definitions, summary = await gather_with_errors(
            dictionary.fetch("hello"),
            wikipedia.fetch("hello"),
        )
    """
    results: list[T | Exception | None] = [None] * len(coros)

    async def safe_run(coro: Awaitable[T], index: int) -> None:
        try:
            results[index] = await coro
        except Exception as e:
            logger.debug(f"Task {index} failed: {e!r}")
            results[index] = e

    async with asyncio.TaskGroup() as tg:
        for i, coro in enumerate(coros):
            tg.create_task(safe_run(coro, i))
    return results  # type: ignore[return-value]


__all__ = ["gather_with_errors"]
