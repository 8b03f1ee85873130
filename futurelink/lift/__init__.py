"""
Lift helpers: values and errors into futures, futures into Result.

Examples:
    from futurelink import lift as L

    f = L.failed_status(0x80340000)
    r = await L.as_result(f)        # Error(StatusError(...))
    lazy = L.to_lazy(f)             # LazyCoroResult[T, BaseException]
"""

from __future__ import annotations

from .bridge import as_result, outcome, to_lazy
from .failed import (
    # asyncio.Future
    completed,
    failed,
    failed_status,
    # concurrent.futures.Future
    completed_cf,
    failed_cf,
    failed_status_cf,
    # Generic
    completedM,
    failedM,
    failed_statusM,
)

__all__ = (
    # Bridge
    "as_result",
    "outcome",
    "to_lazy",
    # asyncio.Future
    "completed",
    "failed",
    "failed_status",
    # concurrent.futures.Future
    "completed_cf",
    "failed_cf",
    "failed_status_cf",
    # Generic
    "completedM",
    "failedM",
    "failed_statusM",
)
