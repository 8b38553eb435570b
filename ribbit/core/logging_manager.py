#!/usr/bin/env python3
"""
logging_manager.py
--------------------
Centralized logging for Ribbit runs.

Every CLI run writes a rotating operations log (scan start and statistics,
skipped entries, tallies) and a separate errors log. Nothing is written to
the console from here; fatal errors reach the user through handle_cli_error.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import logging
import sys
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import click


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _with_details(tag: str, message: str, details: Optional[Dict[str, Any]]) -> str:
    """Render ``TAG - message: {json}`` (the JSON part only when details exist)."""
    if details:
        return f"{tag} - {message}: {json.dumps(details, default=str)}"
    return f"{tag} - {message}"


class RibbitLogger:
    """
    File-backed logger for Ribbit operations.

    Attributes:
        log_dir: Directory for log files
        component_name: Name of the component using this logger
        main_logger: Logger for all operations (DEBUG and up)
        error_logger: Dedicated logger for errors only
    """

    def __init__(
        self,
        log_dir: Path,
        component_name: str = "ribbit",
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 5,
    ) -> None:
        """
        Open the log files below log_dir.

        Args:
            log_dir: Directory for log files (created if missing)
            component_name: Prefix for logger names and the operations log file
            max_bytes: Size at which a log file is rotated (default: 10MB)
            backup_count: Rotated files kept per log (default: 5)

        Raises:
            OSError: If log_dir cannot be created or a log file cannot be opened
        """
        self.log_dir = Path(log_dir)
        self.component_name = component_name
        self.max_bytes = max_bytes
        self.backup_count = backup_count

        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.main_logger = self._file_logger(
            "operations", f"{component_name}.log", logging.DEBUG
        )
        self.error_logger = self._file_logger("errors", "errors.log", logging.ERROR)

    def _file_logger(self, suffix: str, filename: str, level: int) -> logging.Logger:
        """Return ``<component>.<suffix>`` with a single rotating file handler."""
        logger = logging.getLogger(f"{self.component_name}.{suffix}")
        logger.setLevel(level)
        logger.propagate = False

        # Handlers from an earlier instance would keep the old file open
        for old in list(logger.handlers):
            old.close()
            logger.removeHandler(old)

        handler = RotatingFileHandler(
            self.log_dir / filename,
            maxBytes=self.max_bytes,
            backupCount=self.backup_count,
            encoding="utf-8",
        )
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
        logger.addHandler(handler)
        return logger

    def log_operation(
        self, operation: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Record a completed operation with JSON details.

        Args:
            operation: Operation name (e.g., 'scan_journal', 'tally')
            details: Counters and parameters of the operation
        """
        self.main_logger.info(
            f"OPERATION - {operation}: {json.dumps(details or {}, default=str)}"
        )

    def log_error(
        self, error: Exception, context: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Write an error, its context and the active traceback to errors.log.

        Args:
            error: Exception that occurred
            context: Optional key/value context (journal path, operation)
        """
        lines = [f"ERROR - {type(error).__name__}: {error}"]
        if context:
            lines.append("Context: " + ", ".join(f"{k}={v}" for k, v in context.items()))
        lines.append(f"Traceback:\n{traceback.format_exc()}")

        for line in lines:
            self.error_logger.error(line)

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Log debug information."""
        self.main_logger.debug(_with_details("DEBUG", message, details))

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.info(_with_details("INFO", message, details))

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """
        Log full error details to file and return a short CLI message.

        Args:
            error: Exception to log
            context: Optional context information about where error occurred
            show_traceback: If True, include full traceback in CLI output

        Returns:
            Formatted error message suitable for CLI display

        Examples:
            >>> logger.log_cli_error(JournalReadError("Journal directory not found"))
            '❌ JournalReadError: Journal directory not found'
        """
        self.log_error(error, context or {"source": "cli"})
        return format_cli_error(error, show_traceback)


def format_cli_error(error: Exception, show_traceback: bool = False) -> str:
    """One-line ``❌ Type: message``, followed by the traceback when requested."""
    message = f"❌ {type(error).__name__}: {error}"
    if show_traceback:
        return f"{message}\n\n{traceback.format_exc()}"
    return message


def handle_cli_error(
    ctx: "click.Context",
    error: Exception,
    operation: str,
    additional_context: Optional[Dict[str, Any]] = None,
    exit_code: int = 1,
) -> None:
    """
    Standardized handling for fatal CLI errors.

    Logs the error through the logger stored on the Click context, prints a
    one-line message (with traceback when --verbose) to stderr and exits.

    Args:
        ctx: Click context object containing logger and verbose flag
        error: Exception that occurred
        operation: Name of the operation that failed (e.g., 'scan_journal')
        additional_context: Optional extra context (journal path, filters)
        exit_code: Exit code for sys.exit() (default: 1)

    Note:
        This function never returns - it always calls sys.exit()
    """
    obj = ctx.obj or {}
    logger: Optional[RibbitLogger] = obj.get("logger")
    verbose: bool = obj.get("verbose", False)

    context = {"operation": operation}
    if additional_context:
        context.update(additional_context)

    error_msg = safe_logger(logger).log_cli_error(error, context, show_traceback=verbose)

    click.echo(error_msg, err=True)
    sys.exit(exit_code)


class NullLogger:
    """
    Null Object logger implementing the RibbitLogger interface as no-ops.

    Lets library code call logger methods unconditionally.
    """

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """Format the error without logging it."""
        return format_cli_error(error, show_traceback)


# Singleton null logger instance
_null_logger = NullLogger()


def safe_logger(logger: Optional[RibbitLogger]) -> RibbitLogger:
    """
    Return the provided logger or a null logger if None.

    Use:
        safe_logger(logger).log_debug("message")

    instead of guarding every call with ``if logger:``.
    """
    return logger if logger is not None else _null_logger  # type: ignore[return-value]
