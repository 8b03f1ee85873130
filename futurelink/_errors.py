from __future__ import annotations

import typing

from .status import StatusCode

class StatusError(Exception):
    """Failure identified by a status code, optionally chaining a cause."""

    status_code: StatusCode

    def __init__(self, code: int | StatusCode, cause: BaseException | None = None) -> None:
        self.status_code = StatusCode.of(code)
        super().__init__(f"status {self.status_code}")
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

class LinkAlreadyUsedError(Exception):
    """CompletionLink was asked to forward a second source into its target."""

    target: typing.Any

    def __init__(self, target: typing.Any) -> None:
        self.target = target
        super().__init__(f"completion link for {target!r} is already bound to a source")

__all__ = ("LinkAlreadyUsedError", "StatusError")
