"""
Sequence combinators
====================

Flip structure: [Future[T]] -> Future[list[T]], with the new + observe pattern.
"""

from __future__ import annotations

import asyncio
import concurrent.futures
import functools
import threading
import typing
from collections.abc import Callable, Iterable

from kungfu import Error, Ok

from .._helpers import loop_for, outcome_of, settle
from .._types import FutureLike, New, Outcome
from ..lift.failed import completedM


# ============================================================================
# Generic combinator (new + observe pattern)
# ============================================================================


def sequenceM[M: FutureLike[typing.Any], T](
    futures: Iterable[FutureLike[T]],
    *,
    new: New[M],
) -> M:
    """
    Generic sequence combinator.

    Resolve with all values in input order once every input resolved.
    Fail-fast on the first failure observed.

    Args:
        futures: Inputs; any iterable, consumed once at call time
        new: Factory for the pending aggregate future

    NOTE: When several inputs fail, the surfaced error is the first one
          whose done-callback ran (completion order, not index order).
          Other failures are ignored; pending inputs are left untouched.
    """
    inputs = list(futures)
    if not inputs:
        return completedM([], new=new)

    aggregate = new()
    values: list[typing.Any] = [None] * len(inputs)
    remaining = len(inputs)
    settled = False
    lock = threading.Lock()

    def on_done(index: int, future: FutureLike[T]) -> None:
        nonlocal remaining, settled
        outcome = outcome_of(future)
        final: Outcome[list[T]]

        with lock:
            if settled:
                return
            match outcome:
                case Ok(value):
                    values[index] = value
                    remaining -= 1
                    if remaining:
                        return
                    final = Ok(list(values))
                case Error(error):
                    final = Error(error)
            settled = True

        # outside the lock: concurrent futures run observers inline
        settle(aggregate, final)

    for index, future in enumerate(inputs):
        future.add_done_callback(functools.partial(on_done, index))

    return aggregate


# ============================================================================
# Sugar for asyncio.Future
# ============================================================================


def sequence[T](
    futures: Iterable[asyncio.Future[T]],
    *,
    loop: asyncio.AbstractEventLoop | None = None,
) -> asyncio.Future[list[T]]:
    """
    Wait for all futures, collect values in input order.

    The aggregate lives on `loop`, else on the loop of the first input,
    else on the running loop.

    Example:
        reads = [session.read(node) for node in nodes]
        values = await sequence(reads)
    """
    inputs = list(futures)
    create: Callable[[], asyncio.Future[list[T]]] = loop_for(loop, inputs).create_future
    return sequenceM(inputs, new=create)


# ============================================================================
# Sugar for concurrent.futures.Future
# ============================================================================


def sequence_cf[T](
    futures: Iterable[concurrent.futures.Future[T]],
) -> concurrent.futures.Future[list[T]]:
    """Wait for all futures, collect values in input order. Thread-safe."""
    return sequenceM(futures, new=concurrent.futures.Future)


__all__ = ("sequence", "sequence_cf", "sequenceM")
