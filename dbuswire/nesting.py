"""Nesting depth accounting required by the D-Bus specification."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

__all__ = ["Nesting", "is_aligned", "STRUCT_ALIGNMENT"]

STRUCT_ALIGNMENT = 8


@dataclass
class Nesting:
    """Counts open arrays, structs and variants and checks their limits.

    The ``begin_*`` methods always count the new level and return False
    when a limit is exceeded.
    """

    ARRAY_MAX: ClassVar[int] = 32
    PAREN_MAX: ClassVar[int] = 32
    TOTAL_MAX: ClassVar[int] = 64

    array: int = 0
    paren: int = 0
    variant: int = 0

    def begin_array(self) -> bool:
        self.array += 1
        return self.array <= self.ARRAY_MAX and self.total() <= self.TOTAL_MAX

    def end_array(self) -> None:
        if self.array < 1:
            raise ValueError("no array is open")
        self.array -= 1

    def begin_paren(self) -> bool:
        self.paren += 1
        return self.paren <= self.PAREN_MAX and self.total() <= self.TOTAL_MAX

    def end_paren(self) -> None:
        if self.paren < 1:
            raise ValueError("no struct is open")
        self.paren -= 1

    def begin_variant(self) -> bool:
        self.variant += 1
        return self.total() <= self.TOTAL_MAX

    def end_variant(self) -> None:
        if self.variant < 1:
            raise ValueError("no variant is open")
        self.variant -= 1

    def total(self) -> int:
        return self.array + self.paren + self.variant


def is_aligned(value: int, alignment: int) -> bool:
    """True if ``value`` is a multiple of ``alignment`` (1, 2, 4 or 8)."""
    if alignment not in (1, 2, 4, 8):
        raise ValueError(f"alignment must be 1, 2, 4 or 8, not {alignment}")
    return value & (alignment - 1) == 0