#!/usr/bin/env python3
"""
loader.py
-------------------
Load every journal entry below a directory.

Walks the journal root, parses each Markdown file and keeps the ones that
produce a valid JournalEntry. Files that cannot be read or whose frontmatter
is missing or malformed are skipped: they are counted and noted in the debug
log, never reported on the console. Only an unreadable root aborts the load.

Usage:
    from ribbit.pipeline.loader import JournalLoader

    loader = JournalLoader(journal_dir, logger)
    entries = loader.load()
    print(loader.stats.to_dict())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import List, Optional

# --- Local imports ---
from ribbit.core.cli import ScanStats
from ribbit.core.exceptions import EntryParseError, EntryValidationError
from ribbit.core.logging_manager import RibbitLogger, safe_logger
from ribbit.core.paths import JOURNAL_EXTENSION
from ribbit.dataclasses.journal_entry import JournalEntry
from ribbit.utils.fs import find_markdown_files


class JournalLoader:
    """Loads JournalEntry objects from a journal directory."""

    def __init__(
        self,
        journal_dir: Path,
        logger: Optional[RibbitLogger] = None,
        extension: str = JOURNAL_EXTENSION,
    ):
        """
        Initialize the loader.

        Args:
            journal_dir: Journal root directory
            logger: Optional logger instance
            extension: Entry file suffix (default: .md)
        """
        self.journal_dir = Path(journal_dir)
        self.logger = logger
        self.extension = extension
        self.stats = ScanStats()

    def load(self) -> List[JournalEntry]:
        """
        Parse all entries below the journal directory.

        Returns:
            Entries in discovery order (sorted file paths)

        Raises:
            JournalReadError: If the journal directory cannot be read
        """
        log = safe_logger(self.logger)
        self.stats = ScanStats()

        log.log_info(
            "Scanning journal",
            {"journal_dir": str(self.journal_dir), "extension": self.extension},
        )
        files = find_markdown_files(self.journal_dir, self.extension)
        self.stats.files_found = len(files)

        entries: List[JournalEntry] = []
        for file_path in files:
            entry = self._load_file(file_path)
            if entry is not None:
                entries.append(entry)

        self.stats.entries_loaded = len(entries)
        log.log_operation(
            "scan_journal",
            {"journal_dir": str(self.journal_dir), **self.stats.to_dict()},
        )
        return entries

    def _load_file(self, file_path: Path) -> Optional[JournalEntry]:
        """Parse one file, returning None when it has to be skipped."""
        try:
            return JournalEntry.from_file(file_path)
        except (EntryParseError, EntryValidationError) as e:
            self.stats.files_skipped += 1
            safe_logger(self.logger).log_debug(
                "Skipped entry", {"file": str(file_path), "reason": str(e)}
            )
            return None
