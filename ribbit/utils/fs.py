#!/usr/bin/env python3
"""
fs.py
-------------------
Filesystem utilities for discovering journal entries.

Functions:
    find_markdown_files: Recursively list entry files under a journal root

Usage:
    from ribbit.utils.fs import find_markdown_files

    files = find_markdown_files(Path("~/journal").expanduser())

Symlinked directories are not descended into (only real subdirectories are
walked), so a symlink cycle inside the journal cannot loop the scan.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import List

# --- Local imports ---
from ribbit.core.exceptions import JournalReadError
from ribbit.core.paths import JOURNAL_EXTENSION


def _is_regular_file(path: Path) -> bool:
    try:
        return path.is_file()
    except OSError:
        return False


def find_markdown_files(
    directory: Path, extension: str = JOURNAL_EXTENSION
) -> List[Path]:
    """
    Find all files with the given extension below a directory.

    The root must be readable; unreadable subdirectories and files that
    cannot be stat'ed are skipped without aborting the walk.

    Args:
        directory: Journal root directory
        extension: File suffix to match, including the dot (default: .md)

    Returns:
        Matching regular files, sorted by path

    Raises:
        JournalReadError: If the root is missing, not a directory or unreadable

    Examples:
        >>> find_markdown_files(Path("journal"))
        [PosixPath('journal/2024/2024-01-10.md'), PosixPath('journal/notes.md')]
    """
    directory = Path(directory)
    try:
        if not directory.exists():
            raise JournalReadError(f"Journal directory not found: {directory}")
        if not directory.is_dir():
            raise JournalReadError(f"Journal path is not a directory: {directory}")
        next(directory.iterdir(), None)
    except OSError as e:
        raise JournalReadError(
            f"Cannot read journal directory {directory}: {e.strerror or e}"
        ) from e

    files = [
        path
        for path in directory.rglob(f"*{extension}")
        if path.suffix == extension and _is_regular_file(path)
    ]
    return sorted(files)
