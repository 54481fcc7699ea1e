"""Calendar dates used for library members."""

from __future__ import annotations

from dataclasses import dataclass

MIN_YEAR = 1900
MAX_YEAR = 2025


@dataclass(frozen=True)
class Date:
    """A day, month and year; the default is the all-zero, invalid date."""

    day: int = 0
    month: int = 0
    year: int = 0

    def is_valid(self) -> bool:
        """Check that the fields lie in their accepted ranges."""
        return (
            1 <= self.day <= 31
            and 1 <= self.month <= 12
            and MIN_YEAR <= self.year <= MAX_YEAR
        )

    def __str__(self) -> str:
        return f"{self.day}/{self.month}/{self.year}"