#!/usr/bin/env python3
"""
Ribbit CLI
----------

Command-line interface for the habit report.

Scans a journal directory, counts completed habits over (at most) the first
seven matching entries and prints one line per habit.

Usage:
    # Report all habits for the configured journal
    ribbit

    # Report a specific journal directory
    ribbit ~/notes/journal

    # Only entries where reading was done, this week
    ribbit filter reading --time week
    ribbit ~/notes/journal filter reading -t w

Configuration:
    RIBBIT_JOURNAL_DIR   Default journal directory (default: ~/journal)
    RIBBIT_HOME          Base directory for logs (default: ~/.ribbit)
"""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

import click

from ribbit import __version__
from ribbit.core.cli import setup_logger
from ribbit.core.cli_options import habit_argument, log_dir_option, time_option, verbose_option
from ribbit.core.enums import Habit, Period
from ribbit.core.exceptions import JournalReadError
from ribbit.core.logging_manager import NullLogger, RibbitLogger, handle_cli_error
from ribbit.core.paths import JOURNAL_DIR
from ribbit.pipeline.loader import JournalLoader
from ribbit.pipeline.report import format_tally
from ribbit.pipeline.tally import tally_entries


class JournalGroup(click.Group):
    """
    Group whose optional JOURNAL_DIR argument may be left out before a
    subcommand.

    Click would otherwise bind the subcommand name itself to JOURNAL_DIR,
    so an empty placeholder is inserted when the first positional token
    names a subcommand. A journal directory that shares a subcommand's name
    must be given with a path prefix (``./filter``).
    """

    def parse_args(self, ctx: click.Context, args: List[str]) -> List[str]:
        takes_value = {
            opt
            for param in self.params
            if isinstance(param, click.Option) and not param.is_flag
            for opt in param.opts
        }

        index = 0
        while index < len(args):
            token = args[index]
            if token == "--":
                break
            if token.startswith("-"):
                index += 2 if token in takes_value else 1
                continue
            if token in self.commands:
                args = args[:index] + [""] + args[index:]
            break

        return super().parse_args(ctx, args)


def _open_logger(ctx: click.Context) -> Union[RibbitLogger, NullLogger]:
    """
    Create the run logger on first use and store it on the context.

    A log directory that cannot be created or written only costs the log
    files: the run continues with a NullLogger after a warning on stderr.
    """
    if ctx.obj.get("logger") is None:
        try:
            ctx.obj["logger"] = setup_logger(ctx.obj["log_dir"], "ribbit")
        except OSError as e:
            click.echo(
                f"⚠️  Logging disabled, cannot write to {ctx.obj['log_dir']}: "
                f"{e.strerror or e}",
                err=True,
            )
            ctx.obj["logger"] = NullLogger()
    return ctx.obj["logger"]


@click.group(cls=JournalGroup, invoke_without_command=True)
@click.argument("journal_dir", required=False, default=None)
@log_dir_option
@verbose_option
@click.version_option(__version__, prog_name="ribbit")
@click.pass_context
def cli(
    ctx: click.Context,
    journal_dir: Optional[str],
    log_dir: str,
    verbose: bool,
) -> None:
    """
    Ribbit - habit report for a Markdown journal.

    Counts exercise, contrib and reading completions recorded in the
    frontmatter of the entries in JOURNAL_DIR.
    """
    ctx.ensure_object(dict)
    ctx.obj["journal_dir"] = Path(journal_dir).expanduser() if journal_dir else JOURNAL_DIR
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = None

    if ctx.invoked_subcommand is None:
        ctx.invoke(filter_entries, habit=None, time=None)


@cli.command("filter")
@habit_argument
@time_option
@click.pass_context
def filter_entries(
    ctx: click.Context, habit: Optional[Habit], time: Optional[Period]
) -> None:
    """
    Count habits, optionally for a single HABIT and/or time window.

    With --time only entries from the current day, week, month or year are
    considered; month matches the calendar month of any year.
    """
    logger = _open_logger(ctx)
    journal_dir: Path = ctx.obj["journal_dir"]

    try:
        entries = JournalLoader(journal_dir, logger).load()
    except JournalReadError as e:
        handle_cli_error(ctx, e, "scan_journal", {"journal_dir": str(journal_dir)})
        return

    tally = tally_entries(entries, habit=habit, period=time)
    logger.log_operation(
        "tally",
        {
            "habit": habit.value if habit else None,
            "period": time.value if time else None,
            "entries": len(entries),
            "counts": {h.value: tally.count(h) for h in Habit},
        },
    )

    for line in format_tally(tally, habit):
        click.echo(line)


if __name__ == "__main__":
    cli(obj={})
