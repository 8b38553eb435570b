#!/usr/bin/env python3
"""
Integration tests for the ribbit CLI.

Runs the command end to end against temporary journals.
"""
import sys

import pytest
from datetime import date, timedelta
from pathlib import Path
from click.testing import CliRunner

from ribbit import __version__
from ribbit.pipeline.cli import cli


@pytest.fixture
def runner():
    """Create Click test runner."""
    return CliRunner()


@pytest.fixture
def run(runner, log_dir):
    """Invoke the CLI with logs redirected to the test directory."""

    def _run(*args):
        return runner.invoke(cli, ["--log-dir", str(log_dir), *[str(a) for a in args]])

    return _run


class TestCLIBasics:
    """Test basic CLI functionality."""

    def test_cli_help(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "JOURNAL_DIR" in result.output
        assert "filter" in result.output

    def test_filter_help(self, run):
        result = run("filter", "--help")
        assert result.exit_code == 0
        assert "--time" in result.output

    def test_help_does_not_create_log_dir(self, runner, log_dir):
        """Test that logs are only opened when a report runs."""
        result = runner.invoke(cli, ["--log-dir", str(log_dir), "filter", "--help"])
        assert result.exit_code == 0
        assert not log_dir.exists()

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_invalid_habit(self, run, journal_dir):
        result = run(journal_dir, "filter", "sleeping")
        assert result.exit_code == 2

    def test_invalid_period(self, run, journal_dir):
        result = run(journal_dir, "filter", "--time", "decade")
        assert result.exit_code == 2


class TestReport:
    """Test the habit report."""

    def test_mixed_journal(
        self, run, journal_dir, write_entry, no_frontmatter_content, missing_date_content
    ):
        """Test that only the valid entry is counted."""
        write_entry(
            "2024-01-10.md", entry_date="2024-01-10", exercise=True, contrib=False, reading=True
        )
        write_entry("notes.md", content=no_frontmatter_content)
        write_entry("undated.md", content=missing_date_content)

        result = run(journal_dir)

        assert result.exit_code == 0
        assert result.output == "   1 - exercise\n   0 - contrib\n   1 - reading\n"

    def test_filter_without_arguments_matches_default(self, run, journal_dir, write_entry):
        write_entry("a.md", exercise=True, contrib=True, reading=False)

        assert run(journal_dir).output == run(journal_dir, "filter").output

    def test_habit_filter(self, run, journal_dir, write_entry):
        """Test that a habit filter prints only that habit."""
        for day, contrib in enumerate([True, False, True, False, True], start=1):
            write_entry(f"2024-02-0{day}.md", entry_date=f"2024-02-0{day}", contrib=contrib)

        result = run(journal_dir, "filter", "contrib")

        assert result.exit_code == 0
        assert result.output == "   3 - contrib\n"

    def test_habit_filter_case_insensitive(self, run, journal_dir, write_entry):
        write_entry("a.md", reading=True)
        result = run(journal_dir, "filter", "READING")
        assert result.output == "   1 - reading\n"

    def test_caps_at_seven_entries(self, run, journal_dir, write_entry):
        for i in range(10):
            day = date(2024, 5, 1) + timedelta(days=i)
            write_entry(f"{day}.md", entry_date=day.isoformat(), exercise=True)

        result = run(journal_dir)
        assert result.output.splitlines()[0] == "   7 - exercise"

    @pytest.mark.parametrize("flag, period", [("--time", "day"), ("-t", "d"), ("-t", "Y")])
    def test_time_filter(self, run, journal_dir, write_entry, flag, period):
        """Test that the time filter is relative to today."""
        today = date.today()
        write_entry("today.md", entry_date=today.isoformat(), reading=True)
        write_entry(
            "old.md", entry_date=(today - timedelta(days=800)).isoformat(), reading=True
        )

        result = run(journal_dir, "filter", flag, period)

        assert result.exit_code == 0
        assert "   1 - reading" in result.output

    def test_habit_and_time_filter(self, run, journal_dir, write_entry):
        today = date.today()
        write_entry("a.md", entry_date=today.isoformat(), exercise=True)
        write_entry("b.md", entry_date=today.isoformat(), exercise=False)
        write_entry("c.md", entry_date=(today - timedelta(days=800)).isoformat(), exercise=True)

        result = run(journal_dir, "filter", "exercise", "-t", "year")
        assert result.output == "   1 - exercise\n"

    def test_empty_journal_prints_zeros(self, run, journal_dir):
        result = run(journal_dir)
        assert result.exit_code == 0
        assert result.output == "   0 - exercise\n   0 - contrib\n   0 - reading\n"

    def test_no_matches_exit_zero(self, run, journal_dir, write_entry):
        write_entry("a.md", exercise=False, contrib=False, reading=False)
        result = run(journal_dir, "filter", "reading")
        assert result.exit_code == 0
        assert result.output == "   0 - reading\n"


class TestJournalDirResolution:
    """Test the optional JOURNAL_DIR argument."""

    def test_default_journal_dir(self, runner, log_dir, monkeypatch, journal_dir, write_entry):
        """Test that the configured directory is used when none is given."""
        write_entry("a.md", exercise=True)
        monkeypatch.setattr("ribbit.pipeline.cli.JOURNAL_DIR", journal_dir)

        result = runner.invoke(cli, ["--log-dir", str(log_dir), "filter", "exercise"])

        assert result.exit_code == 0
        assert result.output == "   1 - exercise\n"

    def test_default_journal_dir_without_subcommand(
        self, runner, log_dir, monkeypatch, journal_dir, write_entry
    ):
        write_entry("a.md", reading=True)
        monkeypatch.setattr("ribbit.pipeline.cli.JOURNAL_DIR", journal_dir)

        result = runner.invoke(cli, ["--log-dir", str(log_dir)])
        assert result.output.splitlines()[2] == "   1 - reading"

    def test_journal_named_like_subcommand(self, runner, log_dir, tmp_dir, valid_entry_content):
        """Test that a path prefix disambiguates a directory called filter."""
        with runner.isolated_filesystem(temp_dir=tmp_dir):
            Path("filter").mkdir()
            content = valid_entry_content.replace("contrib: false", "contrib: true")
            (Path("filter") / "a.md").write_text(content)
            result = runner.invoke(
                cli, ["--log-dir", str(log_dir), "./filter", "filter", "contrib"]
            )

        assert result.exit_code == 0
        assert result.output == "   1 - contrib\n"

    def test_group_options_before_journal_dir(self, runner, log_dir, journal_dir, write_entry):
        """Test that option values are not mistaken for JOURNAL_DIR."""
        write_entry("a.md", exercise=True)
        result = runner.invoke(
            cli, [f"--log-dir={log_dir}", "-v", str(journal_dir), "filter", "exercise"]
        )
        assert result.output == "   1 - exercise\n"


class TestFatalErrors:
    """Test unreadable journal directories."""

    def test_missing_directory(self, run, tmp_dir):
        result = run(tmp_dir / "nowhere")

        assert result.exit_code == 1
        assert "JournalReadError" in result.output
        assert "not found" in result.output

    def test_missing_directory_with_filter(self, run, tmp_dir):
        result = run(tmp_dir / "nowhere", "filter", "reading")
        assert result.exit_code == 1

    def test_file_instead_of_directory(self, run, tmp_dir):
        path = tmp_dir / "entry.md"
        path.write_text("---\n---\n")

        result = run(path)
        assert result.exit_code == 1
        assert "not a directory" in result.output

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX name limits")
    def test_unstattable_directory_reports_journal_read_error(self, run, tmp_dir):
        """Test that a path the OS refuses to stat is reported, not raised."""
        result = run(tmp_dir / ("a" * 300))

        assert result.exit_code == 1
        assert "❌ JournalReadError" in result.output
        assert not isinstance(result.exception, OSError)

    def test_verbose_shows_traceback(self, run, tmp_dir):
        result = run("-v", tmp_dir / "nowhere")
        assert result.exit_code == 1
        assert "Traceback" in result.output

    def test_error_is_logged(self, run, tmp_dir, log_dir):
        run(tmp_dir / "nowhere")
        errors = (log_dir / "operations" / "errors.log").read_text(encoding="utf-8")
        assert "JournalReadError" in errors


class TestOperationLog:
    """Test the operations log written by a run."""

    def test_scan_and_tally_logged(self, run, journal_dir, write_entry, log_dir):
        write_entry("a.md")
        write_entry("b.md", content="no frontmatter")

        run(journal_dir)

        text = (log_dir / "operations" / "ribbit.log").read_text(encoding="utf-8")
        assert "OPERATION - scan_journal" in text
        assert '"files_skipped": 1' in text
        assert "OPERATION - tally" in text
        assert "Skipped entry" in text
        assert "INFO - Scanning journal" in text


class TestLogDirFallback:
    """Test runs whose log directory cannot be used."""

    def test_unwritable_log_dir_still_reports(self, runner, tmp_dir, journal_dir, write_entry):
        """Test that a log directory that cannot be created only disables logs."""
        write_entry("a.md", exercise=True)
        blocker = tmp_dir / "blocker"
        blocker.write_text("not a directory")

        result = runner.invoke(
            cli, ["--log-dir", str(blocker / "logs"), str(journal_dir), "filter", "exercise"]
        )

        assert result.exit_code == 0
        assert "   1 - exercise" in result.output
        assert "Logging disabled" in result.output

    def test_unwritable_log_dir_with_missing_journal(self, runner, tmp_dir):
        """Test that fatal errors are still reported without log files."""
        blocker = tmp_dir / "blocker"
        blocker.write_text("not a directory")

        result = runner.invoke(cli, ["--log-dir", str(blocker / "logs"), str(tmp_dir / "nowhere")])

        assert result.exit_code == 1
        assert "❌ JournalReadError" in result.output
