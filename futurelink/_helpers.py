"""Internal helpers for futurelink.

Reading outcomes out of futures, settling futures from outcomes,
and turning execution contexts into a single dispatch function.
These are not part of the public API but can be used for custom runtimes."""

from __future__ import annotations

import asyncio
import concurrent.futures
import typing
from collections.abc import Sequence

from kungfu import Error, Ok

from ._types import Execute, ExecutionContext, FutureLike, Outcome, Task

_CANCELLED = (asyncio.CancelledError, concurrent.futures.CancelledError)
_INVALID_STATE = (asyncio.InvalidStateError, concurrent.futures.InvalidStateError)

# Extract (done future -> Outcome)
def outcome_of[T](future: FutureLike[T]) -> Outcome[T]:
    """
    Read the terminal state of a done future as Result.

    A cancelled future reads as Error(CancelledError).
    """
    try:
        error = future.exception()
    except _CANCELLED as exc:
        return Error(exc)
    if error is not None:
        return Error(error)
    return Ok(future.result())

# Settle (Outcome -> pending future)
def settle[T](target: FutureLike[T], outcome: Outcome[T]) -> bool:
    """
    Resolve or fail target with outcome.

    Returns False when target was already done (e.g. cancelled by its owner);
    the outcome is dropped rather than assigned twice.
    """
    if target.done():
        return False
    try:
        match outcome:
            case Ok(value):
                target.set_result(value)
            case Error(error):
                target.set_exception(error)
    except _INVALID_STATE:
        return False
    return True

# Execution contexts
def dispatcher(ctx: ExecutionContext) -> Execute:
    """
    Normalize an execution context into `execute(task)`.

    - concurrent.futures.Executor: task is submitted
    - asyncio event loop: task is scheduled thread-safely on the loop
    - any other callable: called with the task (execute-style)
    """
    if isinstance(ctx, concurrent.futures.Executor):
        executor = ctx

        def submit(task: Task) -> None:
            executor.submit(task)

        return submit
    if isinstance(ctx, asyncio.AbstractEventLoop):
        return ctx.call_soon_threadsafe
    if callable(ctx):
        return ctx
    raise TypeError(f"not an execution context: {ctx!r}")

# Loop resolution for asyncio sugar
def loop_for(
    loop: asyncio.AbstractEventLoop | None,
    futures: Sequence[asyncio.Future[typing.Any]] = (),
) -> asyncio.AbstractEventLoop:
    """Explicit loop, else the loop of the first future, else the running loop."""
    if loop is not None:
        return loop
    if futures:
        return futures[0].get_loop()
    return asyncio.get_running_loop()

__all__ = (
    # Extract / settle
    "outcome_of",
    "settle",
    # Execution contexts
    "dispatcher",
    # asyncio
    "loop_for",
)
