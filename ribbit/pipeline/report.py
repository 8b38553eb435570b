#!/usr/bin/env python3
"""
report.py
-------------------
Console formatting for habit tallies.

Each line is the count right-aligned in four columns followed by the habit:

       3 - exercise
       0 - contrib
       5 - reading
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import List, Optional

# --- Local imports ---
from ribbit.core.enums import Habit
from ribbit.pipeline.tally import HabitTally


def format_line(count: int, habit: Habit) -> str:
    """Format one report line."""
    return f"{count:4d} - {habit.value}"


def format_tally(tally: HabitTally, habit: Optional[Habit] = None) -> List[str]:
    """
    Format a tally for output.

    Args:
        tally: Counts to report
        habit: When given, only this habit is reported

    Returns:
        Report lines: one for a single habit, otherwise exercise, contrib
        and reading in that order

    Examples:
        >>> format_tally(HabitTally(exercise=1, reading=1))
        ['   1 - exercise', '   0 - contrib', '   1 - reading']
        >>> format_tally(HabitTally(contrib=3), Habit.CONTRIB)
        ['   3 - contrib']
    """
    habits = [habit] if habit is not None else list(Habit)
    return [format_line(tally.count(h), h) for h in habits]
