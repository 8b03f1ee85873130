"""
Bridging futures into kungfu.

Await asyncio or concurrent futures as Result so they compose with
LazyCoroResult pipelines instead of raising.
"""

from __future__ import annotations

import asyncio
import concurrent.futures

from kungfu import LazyCoroResult

from .._helpers import outcome_of
from .._types import Outcome


def outcome[T](future: asyncio.Future[T] | concurrent.futures.Future[T]) -> Outcome[T]:
    """
    Read a done future as Result.

    Example:
        match outcome(fut):
            case Ok(value): ...
            case Error(exc): ...
    """
    if not future.done():
        raise ValueError("outcome() requires a done future")
    return outcome_of(future)


async def as_result[T](future: asyncio.Future[T] | concurrent.futures.Future[T]) -> Outcome[T]:
    """
    Wait for future without raising its error.

    Cancelling the awaiting task still raises CancelledError in the caller;
    only the future's own outcome is turned into a value.
    """
    awaitable: asyncio.Future[T]
    if isinstance(future, concurrent.futures.Future):
        awaitable = asyncio.wrap_future(future)
    else:
        awaitable = future
    await asyncio.wait([awaitable])
    return outcome_of(awaitable)


def to_lazy[T](
    future: asyncio.Future[T] | concurrent.futures.Future[T],
) -> LazyCoroResult[T, BaseException]:
    """
    Lift future into LazyCoroResult.

    **When to use:** Continuing a kungfu pipeline from a future produced by
    a lower layer.

    Example:
        values = await to_lazy(sequence(reads)).map(len)

    NOTE: The future is already running; laziness only defers the wait.
    """
    async def run() -> Outcome[T]:
        return await as_result(future)

    return LazyCoroResult(run)


__all__ = ("as_result", "outcome", "to_lazy")
