#!/usr/bin/env python3
"""
cli_options.py
-------------------
Reusable Click options and arguments for the Ribbit CLI.

Usage:
    from ribbit.core.cli_options import verbose_option, habit_argument, time_option

    @cli.command()
    @habit_argument
    @time_option
    def filter(habit, time):
        pass
"""
from typing import Optional

import click

from ribbit.core.enums import Habit, Period
from ribbit.core.paths import LOG_DIR


# ═══════════════════════════════════════════════════════════════════════════
# LOGGING OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

verbose_option = click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Show full tracebacks for fatal errors"
)

log_dir_option = click.option(
    "--log-dir",
    type=click.Path(file_okay=False),
    default=str(LOG_DIR),
    show_default=True,
    help="Directory for log files"
)


# ═══════════════════════════════════════════════════════════════════════════
# FILTER OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

def _to_habit(
    ctx: click.Context, param: click.Parameter, value: Optional[str]
) -> Optional[Habit]:
    return Habit(value.lower()) if value else None


def _to_period(
    ctx: click.Context, param: click.Parameter, value: Optional[str]
) -> Optional[Period]:
    return Period.parse(value) if value else None


habit_argument = click.argument(
    "habit",
    required=False,
    type=click.Choice(Habit.choices(), case_sensitive=False),
    callback=_to_habit,
)

time_option = click.option(
    "-t", "--time",
    type=click.Choice(Period.choices(), case_sensitive=False),
    default=None,
    callback=_to_period,
    help="Only count entries from the current day, week, month or year"
)
