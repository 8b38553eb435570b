"""
Utilities package for Ribbit.

- md: Frontmatter extraction
- fs: Journal file discovery

Import commonly-used utilities directly from this package:
    from ribbit.utils import extract_frontmatter, find_markdown_files
"""

from .fs import find_markdown_files
from .md import extract_frontmatter

__all__ = [
    "extract_frontmatter",
    "find_markdown_files",
]
