"""
Future combinators for request/response plumbing.

Building blocks for composing futures produced by a protocol stack:
aggregate in-flight futures, build already-failed futures, and forward
one future's outcome into another.

Architecture:
- Generic combinators (*M functions) work with any future via the `new` hook
- Sugar functions for asyncio.Future (no suffix)
- Sugar functions for concurrent.futures.Future (*_cf suffix)
"""

# Core types
from ._types import ExecutionContext, FutureLike, Outcome

# Internal helpers (for custom runtimes)
from . import _helpers

# Status codes
from .status import StatusCode

# Lift helpers
from . import lift
from .lift import (
    # Bridge
    as_result,
    outcome,
    to_lazy,
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

# Collection operations
from .collection import sequence, sequence_cf, sequenceM

# Completion forwarding
from .completion import CompletionLink, forward, link

# Errors
from ._errors import LinkAlreadyUsedError, StatusError

__all__ = (
    # Types
    "ExecutionContext",
    "FutureLike",
    "Outcome",
    "StatusCode",
    # Internal helpers (for custom runtimes)
    "_helpers",
    # Lift module (namespace import)
    "lift",
    # Lift - bridge
    "as_result",
    "outcome",
    "to_lazy",
    # Lift - asyncio.Future
    "completed",
    "failed",
    "failed_status",
    # Lift - concurrent.futures.Future
    "completed_cf",
    "failed_cf",
    "failed_status_cf",
    # Lift - Generic
    "completedM",
    "failedM",
    "failed_statusM",
    # Collection
    "sequence",
    "sequence_cf",
    "sequenceM",
    # Completion
    "CompletionLink",
    "forward",
    "link",
    # Errors
    "LinkAlreadyUsedError",
    "StatusError",
)
