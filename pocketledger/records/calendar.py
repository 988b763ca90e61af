"""Mini README: Calendar day values used by every ledger record.

Structure:
    * LedgerDate - immutable (day, month, year) triple with ordering helpers.

Ledger dates perform no calendar validation. ``31/2/2024`` or a
month of ``13`` are stored and compared exactly as entered, so callers must not
rely on calendar correctness. Ordering is lexicographic on (year, month, day)
and the display form is ``D/M/Y`` without zero padding.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from functools import total_ordering
from typing import Tuple


@total_ordering
@dataclass(frozen=True, slots=True)
class LedgerDate:
    """A calendar day that is never validated."""

    day: int
    month: int
    year: int

    @classmethod
    def today(cls) -> "LedgerDate":
        """Capture the current local calendar date."""

        current = date.today()
        return cls(day=current.day, month=current.month, year=current.year)

    @classmethod
    def from_fields(cls, day: int, month: int, year: int) -> "LedgerDate":
        """Build a date from raw integer fields, keeping them as given."""

        return cls(day=int(day), month=int(month), year=int(year))

    @property
    def sort_key(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def to_display_string(self) -> str:
        """Return the ``D/M/Y`` display form."""

        return f"{self.day}/{self.month}/{self.year}"

    def compare(self, other: "LedgerDate") -> int:
        """Return -1, 0 or 1 comparing by year, then month, then day."""

        if self.sort_key < other.sort_key:
            return -1
        if self.sort_key > other.sort_key:
            return 1
        return 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LedgerDate):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __str__(self) -> str:
        return self.to_display_string()
