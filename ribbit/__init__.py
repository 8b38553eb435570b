"""
Ribbit
======

A personal journal habit tracker.

Ribbit scans a journal directory for Markdown entries with YAML frontmatter,
reads the habit flags recorded in each entry (exercise, open-source
contributions, reading) and reports how often each habit was completed,
optionally restricted to a single habit and/or the current day, week, month
or year.

Main Components:
    - core: Paths, logging, exceptions, validation
    - utils: Filesystem walking and frontmatter extraction
    - dataclasses: JournalEntry and HabitFlags
    - pipeline: Loading, tallying, reporting and the CLI

Primary Interfaces:
    - ribbit.pipeline.cli: Command-line entry point
    - ribbit.pipeline.loader.JournalLoader: Journal directory loader
    - ribbit.pipeline.tally.tally_entries: Habit aggregation

Example Usage:
    >>> from ribbit.pipeline.loader import JournalLoader
    >>> from ribbit.pipeline.tally import tally_entries
    >>> entries = JournalLoader(Path("~/journal").expanduser()).load()
    >>> tally_entries(entries).exercise
    3
"""

__version__ = "0.1.0"
__author__ = "Ribbit Project"
