"""
dataclasses package
-------------------
Dataclass definitions for journal entries.

- JournalEntry: Entry parsed from Markdown frontmatter
- HabitFlags: Per-entry habit completion flags
"""
from ribbit.dataclasses.journal_entry import HabitFlags, JournalEntry

__all__ = ["HabitFlags", "JournalEntry"]
