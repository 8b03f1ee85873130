"""
Core type definitions for futurelink.

Types and aliases shared across the library.
"""

from __future__ import annotations

import asyncio
import typing
from collections.abc import Callable
from concurrent.futures import Executor

from kungfu import Result

# ============================================================================
# Future protocol
# ============================================================================


@typing.runtime_checkable
class FutureLike[T](typing.Protocol):
    """
    Write-once result cell with completion callbacks.

    Both asyncio.Future and concurrent.futures.Future satisfy it.
    The runtime owns single assignment; this library only reads outcomes
    and settles futures it was handed to settle.
    """

    def done(self) -> bool: ...

    def cancelled(self) -> bool: ...

    def result(self) -> T: ...

    def exception(self) -> BaseException | None: ...

    def set_result(self, result: T, /) -> None: ...

    def set_exception(self, exception: BaseException, /) -> None: ...

    def add_done_callback(self, fn: Callable[[typing.Any], object], /) -> None: ...


# ============================================================================
# Type aliases
# ============================================================================

# Outcome = terminal state of a future as a value
type Outcome[T] = Result[T, BaseException]

# Task = zero-arg action handed to an execution context
type Task = Callable[[], object]

# Execute = "run this task somewhere" function
type Execute = Callable[[Task], object]

# ExecutionContext = anything a settle action can be dispatched through
type ExecutionContext = Executor | asyncio.AbstractEventLoop | Execute

# New = factory for a fresh pending future
type New[F] = Callable[[], F]

__all__ = (
    # Protocol
    "FutureLike",
    # Type aliases
    "Outcome",
    "Task",
    "Execute",
    "ExecutionContext",
    "New",
)
