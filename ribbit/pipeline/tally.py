#!/usr/bin/env python3
"""
tally.py
-------------------
Habit aggregation over journal entries.

The aggregation runs in a fixed order:

    1. sort entries by date (ascending, stable)
    2. keep entries in the current period, if a period is given
    3. keep entries with the chosen habit completed, if a habit is given
    4. take the first TALLY_WINDOW entries
    5. count the completed habits of those entries

Period matching is calendar based and relative to ``today``:
    day    same date
    week   same ISO week of the same ISO year
    month  same month number, in any year
    year   same year

Usage:
    from ribbit.pipeline.tally import tally_entries

    tally = tally_entries(entries, habit=Habit.READING, period=Period.WEEK)
    tally.reading
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional, Sequence

# --- Local imports ---
from ribbit.core.enums import Habit, Period
from ribbit.dataclasses.journal_entry import JournalEntry

# Entries folded into a single report
TALLY_WINDOW = 7


@dataclass
class HabitTally:
    """
    Completion counts per habit.

    Attributes:
        exercise: Entries with exercise completed
        contrib: Entries with a contribution made
        reading: Entries with reading done
    """

    exercise: int = 0
    contrib: int = 0
    reading: int = 0

    def add(self, entry: JournalEntry) -> None:
        """Count one entry: +1 for each completed habit."""
        for habit in Habit:
            if entry.habits.is_set(habit):
                setattr(self, habit.value, self.count(habit) + 1)

    def count(self, habit: Habit) -> int:
        """Return the counter for a habit."""
        return getattr(self, habit.value)

    @property
    def total(self) -> int:
        return self.exercise + self.contrib + self.reading

    @classmethod
    def from_entries(cls, entries: Iterable[JournalEntry]) -> HabitTally:
        """Fold entries into a new tally."""
        tally = cls()
        for entry in entries:
            tally.add(entry)
        return tally


def sort_entries(entries: Iterable[JournalEntry]) -> List[JournalEntry]:
    """Sort entries by date; entries sharing a date keep their order."""
    return sorted(entries, key=lambda entry: entry.date)


def in_period(entry_date: date, period: Period, today: date) -> bool:
    """
    Check whether a date falls in the same period as today.

    Examples:
        >>> in_period(date(2019, 3, 1), Period.MONTH, date(2024, 3, 15))
        True
        >>> in_period(date(2023, 1, 2), Period.WEEK, date(2024, 1, 3))
        False
    """
    if period is Period.DAY:
        return entry_date == today
    if period is Period.WEEK:
        return entry_date.isocalendar()[:2] == today.isocalendar()[:2]
    if period is Period.MONTH:
        return entry_date.month == today.month
    if period is Period.YEAR:
        return entry_date.year == today.year
    raise ValueError(f"Unsupported period: {period!r}")


def filter_by_period(
    entries: Iterable[JournalEntry],
    period: Period,
    today: Optional[date] = None,
) -> List[JournalEntry]:
    """
    Keep entries from the current day, week, month or year.

    Args:
        entries: Entries to filter
        period: Calendar window
        today: Reference date (default: date.today())

    Returns:
        Matching entries, order preserved
    """
    today = today or date.today()
    return [entry for entry in entries if in_period(entry.date, period, today)]


def filter_by_habit(
    entries: Iterable[JournalEntry], habit: Habit
) -> List[JournalEntry]:
    """Keep entries where the habit was completed, order preserved."""
    return [entry for entry in entries if entry.habits.is_set(habit)]


def tally_entries(
    entries: Sequence[JournalEntry],
    habit: Optional[Habit] = None,
    period: Optional[Period] = None,
    today: Optional[date] = None,
    window: int = TALLY_WINDOW,
) -> HabitTally:
    """
    Sort, filter, cap and count entries.

    Args:
        entries: Loaded journal entries, in discovery order
        habit: Only count entries where this habit was completed
        period: Only count entries from the current period
        today: Reference date for the period filter (default: date.today())
        window: Maximum number of entries counted (default: 7)

    Returns:
        HabitTally for the first ``window`` matching entries
    """
    selected = sort_entries(entries)
    if period is not None:
        selected = filter_by_period(selected, period, today)
    if habit is not None:
        selected = filter_by_habit(selected, habit)
    return HabitTally.from_entries(selected[:window])
