#!/usr/bin/env python3
"""
cli.py
------
Shared CLI utilities and statistics for Ribbit commands.

Functions:
    setup_logger: Initialize RibbitLogger for CLI operations

Classes:
    ScanStats: Counters for a journal scan

Usage:
    from ribbit.core.cli import setup_logger, ScanStats

    logger = setup_logger(log_dir, "ribbit")
    stats = ScanStats()
    stats.files_found += 1
    logger.log_operation("scan_journal", stats.to_dict())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict

# --- Local imports ---
from ribbit.core.logging_manager import RibbitLogger


# ═══════════════════════════════════════════════════════════════════════════
# LOGGER SETUP
# ═══════════════════════════════════════════════════════════════════════════

def setup_logger(log_dir: Path, component_name: str) -> RibbitLogger:
    """
    Setup logging for CLI operations.

    Creates the operations log directory if it doesn't exist and initializes
    a RibbitLogger instance for the specified component.

    Args:
        log_dir: Base log directory (typically from paths.LOG_DIR)
        component_name: Component identifier for logging (e.g., 'ribbit')

    Returns:
        Configured RibbitLogger instance
    """
    operations_log_dir = log_dir / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return RibbitLogger(operations_log_dir, component_name=component_name)


# ═══════════════════════════════════════════════════════════════════════════
# STATISTICS
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class ScanStats:
    """
    Statistics for a journal scan.

    Attributes:
        files_found: Markdown files discovered under the journal directory
        entries_loaded: Files that produced a JournalEntry
        files_skipped: Files dropped (unreadable, no or malformed frontmatter)
        start_time: Scan start timestamp
    """
    files_found: int = 0
    entries_loaded: int = 0
    files_skipped: int = 0
    start_time: datetime = field(default_factory=datetime.now)

    def duration(self) -> float:
        """Seconds elapsed since start_time."""
        return (datetime.now() - self.start_time).total_seconds()

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for log output.

        Returns:
            Dictionary with all counters and computed duration
        """
        return {
            "files_found": self.files_found,
            "entries_loaded": self.entries_loaded,
            "files_skipped": self.files_skipped,
            "duration": self.duration(),
        }
