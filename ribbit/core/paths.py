#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants and configuration for Ribbit.

All paths are resolved at import time as Path objects. The two user-facing
locations can be relocated with environment variables:

    RIBBIT_HOME          Base directory for Ribbit's own files (logs)
                         default: ~/.ribbit
    RIBBIT_JOURNAL_DIR   Journal scanned when no directory is given
                         default: ~/journal

The layout:
    RIBBIT_HOME/
    └── logs/
        └── operations/    # ribbit.log, errors.log
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from pathlib import Path


def _env_path(name: str, default: Path) -> Path:
    """
    Read a directory path from the environment.

    Args:
        name: Environment variable name
        default: Path used when the variable is unset or empty

    Returns:
        Expanded Path object
    """
    value = os.environ.get(name)
    if not value:
        return default
    return Path(value).expanduser()


# ----- Ribbit home -----
RIBBIT_HOME: Path = _env_path("RIBBIT_HOME", Path.home() / ".ribbit")

# ---- Logs ----
LOG_DIR = RIBBIT_HOME / "logs"

# ---- Journal ----
JOURNAL_DIR: Path = _env_path("RIBBIT_JOURNAL_DIR", Path.home() / "journal")
JOURNAL_EXTENSION = ".md"
FRONTMATTER_MARKER = "---"
