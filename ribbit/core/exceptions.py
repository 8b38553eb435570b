#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for Ribbit.

Exception Hierarchy:
    Exception (built-in)
    └── RibbitError - Base for all Ribbit errors
        ├── JournalReadError - Journal directory cannot be read (fatal)
        ├── EntryParseError - Entry file or YAML cannot be parsed
        └── ValidationError - Data validation failures
            └── EntryValidationError - Frontmatter schema violations

Only JournalReadError aborts a run. Entry-level errors are raised by the
parsing layer and caught by the loader, which skips the offending file.

Usage:
    from ribbit.core.exceptions import EntryParseError, EntryValidationError

    try:
        entry = JournalEntry.from_file(path)
    except (EntryParseError, EntryValidationError):
        skipped += 1
"""


class RibbitError(Exception):
    """
    Base exception for Ribbit errors.

    Catch this to handle any error raised by Ribbit itself.
    """

    pass


class JournalReadError(RibbitError):
    """
    Exception for journal directory access failures.

    Raised when the root journal directory cannot be used:
    - Directory does not exist
    - Path is not a directory
    - Permission denied while listing it

    Examples:
        >>> raise JournalReadError("Journal directory not found: ~/journal")
        >>> raise JournalReadError("Cannot read journal directory: permission denied")
    """

    pass


class EntryParseError(RibbitError):
    """
    Exception for entry parsing failures.

    Raised when reading or parsing a journal entry fails:
    - File reading errors
    - Encoding issues
    - YAML syntax errors

    Examples:
        >>> raise EntryParseError("Cannot parse YAML frontmatter: invalid syntax")
        >>> raise EntryParseError("Cannot read entry file: not valid UTF-8")
    """

    pass


class ValidationError(RibbitError):
    """
    Exception for data validation failures.

    Raised when input data fails validation checks:
    - Missing required fields
    - Type mismatches
    - Invalid date formats
    """

    pass


class EntryValidationError(ValidationError):
    """
    Exception for entry-specific validation failures.

    Raised when journal entry frontmatter is missing or does not have the
    expected structure:
    - No frontmatter block
    - Missing date, title or habits
    - Habit flags that are not booleans

    Examples:
        >>> raise EntryValidationError("Missing required field: 'date'")
        >>> raise EntryValidationError("Habit 'reading' must be a boolean")
    """

    pass
