"""
conftest.py
-----------
Shared pytest fixtures for Ribbit tests.

Provides fixtures for:
- Temporary journal and log directories
- Sample entry content
- Entry file factories
"""
import pytest
from pathlib import Path
from datetime import date
from tempfile import TemporaryDirectory

from ribbit.dataclasses.journal_entry import HabitFlags, JournalEntry


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def journal_dir(tmp_dir):
    """Empty journal directory."""
    path = tmp_dir / "journal"
    path.mkdir()
    return path


@pytest.fixture
def log_dir(tmp_dir):
    """Directory for logs written during a test."""
    return tmp_dir / "logs"


# ----- Sample Markdown Content -----

def render_entry(
    entry_date="2024-01-10",
    title="A quiet Wednesday",
    exercise=True,
    contrib=False,
    reading=True,
    body="Went for a run, then read two chapters.",
):
    """Render a complete journal entry with habit frontmatter."""
    return f"""---
title: {title}
date: {entry_date}
habits:
  exercise: {str(exercise).lower()}
  contrib: {str(contrib).lower()}
  reading: {str(reading).lower()}
---

# {title}

{body}
"""


@pytest.fixture
def valid_entry_content():
    """Well-formed entry: exercise and reading done, no contribution."""
    return render_entry()


@pytest.fixture
def no_frontmatter_content():
    """Plain note without any frontmatter."""
    return """# Shopping list

- coffee
- bread
"""


@pytest.fixture
def missing_date_content():
    """Frontmatter without the required date field."""
    return """---
title: Undated thoughts
habits:
  exercise: true
  contrib: true
  reading: true
---

Forgot the date.
"""


# ----- Factories -----

@pytest.fixture
def write_entry(journal_dir):
    """
    Factory writing an entry file into the journal.

    Usage:
        write_entry("2024/2024-01-10.md", exercise=True, ...)
        write_entry("note.md", content="raw text")
    """

    def _write(relative_path, content=None, **fields):
        path = journal_dir / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content if content is not None else render_entry(**fields))
        return path

    return _write


@pytest.fixture
def make_entry():
    """Factory building JournalEntry objects directly."""

    def _make(entry_date, exercise=False, contrib=False, reading=False, title=None):
        if isinstance(entry_date, str):
            entry_date = date.fromisoformat(entry_date)
        return JournalEntry(
            date=entry_date,
            title=title or entry_date.isoformat(),
            habits=HabitFlags(exercise=exercise, contrib=contrib, reading=reading),
        )

    return _make
