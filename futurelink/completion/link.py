"""
Completion forwarding
=====================

Wire the outcome of a source future into a separately created target.

Two steps so the target can be handed out before its source exists:

    target = loop.create_future()
    register(request_id, target)
    link(target).from_(send(request))
"""

from __future__ import annotations

import asyncio
import concurrent.futures
import logging
import threading
import typing

from kungfu import Error

from .._errors import LinkAlreadyUsedError
from .._helpers import dispatcher, outcome_of, settle
from .._types import ExecutionContext, FutureLike

logger = logging.getLogger(__name__)


class CompletionLink[F: FutureLike[typing.Any]]:
    """
    Single-use binding of a pending target to one source.

    The first from_/from_using claims the link; any later call raises
    LinkAlreadyUsedError and registers nothing, so the target is never
    settled twice by this link.
    """

    __slots__ = ("_target", "_used", "_lock")

    def __init__(self, target: F) -> None:
        self._target = target
        self._used = False
        self._lock = threading.Lock()

    @property
    def target(self) -> F:
        return self._target

    @property
    def used(self) -> bool:
        return self._used

    def from_(self, source: FutureLike[typing.Any]) -> F:
        """
        Settle target with the outcome of source.

        Runs inline on whatever thread (or loop callback) completes source.
        Returns target for chaining.

        An asyncio target fed by a concurrent.futures source is rejected with
        TypeError: the source completes on a worker thread, and asyncio futures
        may only be settled on their loop. Use from_using(source, loop).
        """
        if isinstance(source, concurrent.futures.Future) and isinstance(self._target, asyncio.Future):
            raise TypeError(
                "asyncio target cannot be settled from a concurrent.futures source inline; "
                "use from_using(source, loop)"
            )
        self._claim()
        target = self._target
        logger.debug("forwarding %r -> %r", source, target)

        def on_done(done: FutureLike[typing.Any]) -> None:
            settle(target, outcome_of(done))

        source.add_done_callback(on_done)
        return target

    def from_using(
        self,
        source: FutureLike[typing.Any],
        ctx: ExecutionContext,
    ) -> F:
        """
        Settle target with the outcome of source, dispatched through ctx.

        **When to use:** source completes on a thread that must not run
        foreign code (network I/O thread, a reentrancy-sensitive lock holder).

        ctx may be a concurrent.futures.Executor, an asyncio event loop
        (required when target is an asyncio.Future owned by another thread),
        or any execute-style callable taking a zero-arg task.

        If ctx refuses the task (shut-down executor, closed loop), target
        fails inline with that error, chained to the source error if any.
        """
        execute = dispatcher(ctx)
        self._claim()
        target = self._target
        logger.debug("forwarding %r -> %r via %r", source, target, ctx)

        def on_done(done: FutureLike[typing.Any]) -> None:
            outcome = outcome_of(done)
            try:
                execute(lambda: settle(target, outcome))
            except Exception as exc:
                match outcome:
                    case Error(error):
                        exc.__cause__ = exc.__cause__ or error
                settle(target, Error(exc))

        source.add_done_callback(on_done)
        return target

    def _claim(self) -> None:
        with self._lock:
            if self._used:
                raise LinkAlreadyUsedError(self._target)
            self._used = True

    def __repr__(self) -> str:
        state = "used" if self._used else "unbound"
        return f"<CompletionLink {state} target={self._target!r}>"


def link[F: FutureLike[typing.Any]](target: F) -> CompletionLink[F]:
    """
    Bind a pending target for later forwarding.

    Example:
        pending = loop.create_future()
        link(pending).from_(transport.request(msg))
        response = await pending
    """
    if target.done():
        raise ValueError(f"link target is already done: {target!r}")
    return CompletionLink(target)


def forward[F: FutureLike[typing.Any]](
    target: F,
    source: FutureLike[typing.Any],
    ctx: ExecutionContext | None = None,
) -> F:
    """
    One-call form of link(target).from_(source) / .from_using(source, ctx).

    Without ctx the same pairing rule as CompletionLink.from_ applies.
    """
    bound = link(target)
    if ctx is None:
        return bound.from_(source)
    return bound.from_using(source, ctx)


__all__ = ("CompletionLink", "forward", "link")
