"""
StatusCode - 32-bit status value
================================

Layout of the high bits follows OPC UA status codes:
bits 31..30 hold severity (00 good, 01 uncertain, 10 bad).
"""

from __future__ import annotations

from dataclasses import dataclass

SEVERITY_MASK = 0xC0000000
SEVERITY_GOOD = 0x00000000
SEVERITY_UNCERTAIN = 0x40000000
SEVERITY_BAD = 0x80000000

_MAX = 0xFFFFFFFF


@dataclass(frozen=True, slots=True)
class StatusCode:
    """Unsigned 32-bit status code."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= _MAX:
            raise ValueError(f"StatusCode.value must be in 0..0x{_MAX:08X}, got {self.value!r}")

    @staticmethod
    def of(code: int | StatusCode) -> StatusCode:
        """Normalize a raw int or an existing StatusCode."""
        if isinstance(code, StatusCode):
            return code
        return StatusCode(code)

    @property
    def is_good(self) -> bool:
        return (self.value & SEVERITY_MASK) == SEVERITY_GOOD

    @property
    def is_uncertain(self) -> bool:
        return (self.value & SEVERITY_MASK) == SEVERITY_UNCERTAIN

    @property
    def is_bad(self) -> bool:
        return (self.value & SEVERITY_BAD) == SEVERITY_BAD

    def __str__(self) -> str:
        return f"0x{self.value:08X}"


__all__ = (
    "SEVERITY_BAD",
    "SEVERITY_GOOD",
    "SEVERITY_MASK",
    "SEVERITY_UNCERTAIN",
    "StatusCode",
)
