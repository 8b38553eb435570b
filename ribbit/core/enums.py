"""
Enumeration Types
------------------

Enum classes shared by the entry model, the aggregator and the CLI.

Enums:
    - Habit: Tracked habits, in report order
    - Period: Calendar windows for the time filter
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from enum import Enum
from typing import List


class Habit(str, Enum):
    """
    Enumeration of tracked habits.
    - EXERCISE: Physical exercise
    - CONTRIB: Open-source contribution
    - READING: Reading

    Declaration order is the order habits are reported in.
    """

    EXERCISE = "exercise"
    CONTRIB = "contrib"
    READING = "reading"

    @classmethod
    def choices(cls) -> List[str]:
        """Get all available habit choices."""
        return [habit.value for habit in cls]


class Period(str, Enum):
    """
    Enumeration of time-filter periods.

    Each period can also be written as its first letter (d, w, m, y).
    """

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @property
    def alias(self) -> str:
        """One-letter short form."""
        return self.value[0]

    @classmethod
    def choices(cls) -> List[str]:
        """Get all accepted spellings, long and short."""
        names: List[str] = []
        for period in cls:
            names.extend([period.value, period.alias])
        return names

    @classmethod
    def parse(cls, text: str) -> Period:
        """
        Parse a period name or alias.

        Args:
            text: 'day', 'd', 'week', 'w', 'month', 'm', 'year' or 'y'

        Returns:
            Matching Period

        Raises:
            ValueError: If text is not a known period

        Examples:
            >>> Period.parse("w")
            <Period.WEEK: 'week'>
            >>> Period.parse("Month")
            <Period.MONTH: 'month'>
        """
        key = text.strip().lower()
        for period in cls:
            if key in (period.value, period.alias):
                return period
        raise ValueError(
            f"Unknown period '{text}'. Expected one of: {', '.join(cls.choices())}"
        )
