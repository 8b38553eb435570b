#!/usr/bin/env python3
"""
md.py
-------------------
Markdown utilities for journal entries.

Provides frontmatter extraction: locating the block of YAML between two
marker lines. Decoding the YAML is left to JournalEntry.
"""
from __future__ import annotations

# --- Standard library imports ---
from typing import List, Optional

# --- Local imports ---
from ribbit.core.paths import FRONTMATTER_MARKER


# ----- YAML Frontmatter Extraction -----
def extract_frontmatter(
    content: str, marker: str = FRONTMATTER_MARKER
) -> Optional[str]:
    """
    Extract the text between the first pair of marker lines.

    A marker line is a line equal to the marker, nothing more. Scanning
    toggles into the block at the first marker and stops at the next one,
    so any later marker lines belong to the body and are ignored.

    Expected format:
        ---
        title: Monday
        date: 2024-01-15
        ---

        Body content here...

    Args:
        content: Full markdown file content
        marker: Delimiter line (default: ---)

    Returns:
        Block content joined with newlines ("" for an empty block), or None
        when there is no opening marker or no closing marker

    Examples:
        >>> extract_frontmatter("---\\ndate: 2024-01-15\\n---\\nBody")
        'date: 2024-01-15'
        >>> extract_frontmatter("---\\ndate: 2024-01-15\\nBody") is None
        True
    """
    inside = False
    block: List[str] = []

    for line in content.splitlines():
        if line == marker:
            if inside:
                return "\n".join(block)
            inside = True
            continue
        if inside:
            block.append(line)

    return None
