"""
Lifting outcomes into already-done futures.

Functions that build futures which are resolved or failed at construction,
for callers that need to short-circuit without real asynchronous work.
"""

from __future__ import annotations

import asyncio
import concurrent.futures
import typing

from .._errors import StatusError
from .._helpers import loop_for
from .._types import FutureLike, New
from ..status import StatusCode

# ============================================================================
# Generic constructors
# ============================================================================


def completedM[M: FutureLike[typing.Any], T](value: T, *, new: New[M]) -> M:
    """Fresh future from `new`, resolved with value."""
    future = new()
    future.set_result(value)
    return future


def failedM[M: FutureLike[typing.Any]](error: BaseException, *, new: New[M]) -> M:
    """Fresh future from `new`, failed with error."""
    future = new()
    future.set_exception(error)
    return future


def failed_statusM[M: FutureLike[typing.Any]](
    code: int | StatusCode,
    cause: BaseException | None = None,
    *,
    new: New[M],
) -> M:
    """Fresh future from `new`, failed with StatusError(code, cause)."""
    return failedM(StatusError(code, cause), new=new)


# ============================================================================
# Sugar for asyncio.Future
# ============================================================================


def completed[T](
    value: T,
    *,
    loop: asyncio.AbstractEventLoop | None = None,
) -> asyncio.Future[T]:
    """
    Create already-resolved future. Dual of failed().

    **When to use:** A cache hit or a constant answer where callers expect
    a future.

    Example:
        def read(node: NodeId) -> asyncio.Future[DataValue]:
            if node in cache:
                return completed(cache[node])
            return session.read(node)
    """
    return completedM(value, new=loop_for(loop).create_future)


def failed[T](
    error: BaseException,
    *,
    loop: asyncio.AbstractEventLoop | None = None,
) -> asyncio.Future[T]:
    """
    Create already-failed future carrying error verbatim.

    **When to use:** When you need to return a future but already know
    the call cannot succeed.

    Example:
        def browse(node: NodeId) -> asyncio.Future[list[Reference]]:
            if not session.is_open:
                return failed(ConnectionError("session closed"))
            return session.browse(node)

    NOTE: Observers added later still receive the failure exactly once.
          Needs a loop: pass `loop=` or call from inside a running loop.
    """
    return failedM(error, new=loop_for(loop).create_future)


def failed_status[T](
    code: int | StatusCode,
    cause: BaseException | None = None,
    *,
    loop: asyncio.AbstractEventLoop | None = None,
) -> asyncio.Future[T]:
    """
    Create future failed with StatusError built from code.

    **When to use:** Reporting a protocol-level status (Bad_Timeout,
    Bad_NodeIdUnknown, ...) through a future.

    Example:
        return failed_status(0x80340000)                  # no cause
        return failed_status(0x80020000, cause=exc)       # chained cause

    The error's `status_code` holds the code; `__cause__` holds the cause.
    """
    return failed_statusM(code, cause, new=loop_for(loop).create_future)


# ============================================================================
# Sugar for concurrent.futures.Future
# ============================================================================


def completed_cf[T](value: T) -> concurrent.futures.Future[T]:
    """Create already-resolved concurrent future."""
    return completedM(value, new=concurrent.futures.Future)


def failed_cf[T](error: BaseException) -> concurrent.futures.Future[T]:
    """Create already-failed concurrent future carrying error verbatim."""
    return failedM(error, new=concurrent.futures.Future)


def failed_status_cf[T](
    code: int | StatusCode,
    cause: BaseException | None = None,
) -> concurrent.futures.Future[T]:
    """Create concurrent future failed with StatusError built from code."""
    return failed_statusM(code, cause, new=concurrent.futures.Future)


__all__ = (
    "completed",
    "failed",
    "failed_status",
    "completed_cf",
    "failed_cf",
    "failed_status_cf",
    "completedM",
    "failedM",
    "failed_statusM",
)
