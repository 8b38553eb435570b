#!/usr/bin/env python3
"""
journal_entry.py
-------------------
Dataclasses representing journal entries with habit frontmatter.

Each Markdown file in the journal carries a frontmatter block such as:

    ---
    title: A quiet Wednesday
    date: 2024-01-10
    habits:
      exercise: true
      contrib: false
      reading: true
    ---

JournalEntry parses that block into typed fields. Parsing is strict: a
block that is not a mapping, lacks one of date/title/habits, or has a
non-boolean habit flag raises, and the loader drops the file.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import yaml

# --- Local imports ---
from ribbit.core.enums import Habit
from ribbit.core.exceptions import EntryParseError, EntryValidationError, ValidationError
from ribbit.core.validators import DataValidator
from ribbit.utils import md

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("date", "title", "habits")


@dataclass(frozen=True)
class HabitFlags:
    """
    Completion flags for the tracked habits of one day.

    Attributes:
        exercise: Exercised that day
        contrib: Made an open-source contribution that day
        reading: Read that day
    """

    exercise: bool = False
    contrib: bool = False
    reading: bool = False

    def is_set(self, habit: Habit) -> bool:
        """Return the flag for a habit."""
        return getattr(self, habit.value)

    @classmethod
    def from_mapping(cls, data: Any) -> HabitFlags:
        """
        Build flags from the ``habits`` frontmatter mapping.

        Every habit is required and must be a YAML boolean. Extra keys
        are ignored.

        Raises:
            EntryValidationError: If data is not a mapping, or a flag is
                missing or not a boolean
        """
        if not isinstance(data, dict):
            raise EntryValidationError("'habits' must be a mapping")

        flags: Dict[str, bool] = {}
        for habit in Habit:
            if habit.value not in data:
                raise EntryValidationError(f"Missing required habit: '{habit.value}'")
            value = DataValidator.normalize_bool(data[habit.value])
            if value is None:
                raise EntryValidationError(
                    f"Habit '{habit.value}' must be a boolean, got {data[habit.value]!r}"
                )
            flags[habit.value] = value

        return cls(**flags)


@dataclass
class JournalEntry:
    """
    A journal entry parsed from Markdown frontmatter.

    Attributes:
        date: Entry date
        title: Entry title
        habits: Habit completion flags
        file_path: Source file path if loaded from file

    Examples:
        >>> entry = JournalEntry.from_file(Path("2024-01-10.md"))
        >>> entry.habits.exercise
        True
    """

    date: date
    title: str
    habits: HabitFlags
    file_path: Optional[Path] = None

    # ---- Construction Methods ----
    @classmethod
    def from_file(cls, file_path: Path) -> JournalEntry:
        """
        Parse a Markdown file with habit frontmatter.

        Args:
            file_path: Path to .md file

        Returns:
            Parsed JournalEntry instance

        Raises:
            EntryParseError: If the file cannot be read or decoded, or its
                YAML is malformed
            EntryValidationError: If frontmatter is missing or incomplete
        """
        try:
            content = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise EntryParseError(f"Cannot read entry file {file_path}: {e}") from e

        return cls.from_markdown_text(content, file_path)

    @classmethod
    def from_markdown_text(
        cls, content: str, file_path: Optional[Path] = None
    ) -> JournalEntry:
        """
        Parse Markdown text with a frontmatter block.

        Args:
            content: Full markdown file content
            file_path: Optional source file path

        Returns:
            Parsed JournalEntry instance

        Raises:
            EntryParseError: If the YAML is malformed
            EntryValidationError: If there is no frontmatter block or it is
                incomplete
        """
        frontmatter = md.extract_frontmatter(content)
        if frontmatter is None:
            raise EntryValidationError("No frontmatter found (must be delimited by ---)")

        return cls.from_frontmatter(frontmatter, file_path)

    @classmethod
    def from_frontmatter(
        cls, frontmatter: str, file_path: Optional[Path] = None
    ) -> JournalEntry:
        """
        Decode an extracted frontmatter block.

        Args:
            frontmatter: YAML text between the marker lines
            file_path: Optional source file path

        Returns:
            Parsed JournalEntry instance

        Raises:
            EntryParseError: If the YAML is malformed
            EntryValidationError: If a required field is missing or mistyped

        Examples:
            >>> JournalEntry.from_frontmatter(
            ...     "title: Day\\ndate: 2024-01-10\\n"
            ...     "habits: {exercise: true, contrib: false, reading: true}"
            ... ).habits
            HabitFlags(exercise=True, contrib=False, reading=True)
        """
        try:
            metadata: Any = yaml.safe_load(frontmatter)
        except yaml.YAMLError as e:
            raise EntryParseError(f"Invalid YAML frontmatter: {e}") from e
        except ValueError as e:
            # Timestamp-shaped scalars that are not real dates (2024-13-01)
            raise EntryParseError(f"Invalid value in YAML frontmatter: {e}") from e

        if not isinstance(metadata, dict):
            raise EntryValidationError("Frontmatter must be a mapping")

        try:
            DataValidator.validate_required_fields(metadata, REQUIRED_FIELDS)
        except ValidationError as e:
            raise EntryValidationError(str(e)) from e

        entry_date = DataValidator.normalize_date(metadata["date"])
        if entry_date is None:
            raise EntryValidationError(
                f"Invalid date (expected YYYY-MM-DD): {metadata['date']!r}"
            )

        title = DataValidator.normalize_string(metadata["title"])
        if title is None:
            raise EntryValidationError(
                f"Title must be a string, got {metadata['title']!r}"
            )

        habits = HabitFlags.from_mapping(metadata["habits"])

        logger.debug(f"Parsed entry for {entry_date}")
        return cls(date=entry_date, title=title, habits=habits, file_path=file_path)
