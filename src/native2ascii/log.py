# Filename: src/native2ascii/log.py
"""Logging setup for the native2ascii command."""

import logging
import sys
from typing import Optional, TextIO

from rich.console import Console
from rich.markup import escape

# --- Define TRACE level ---
TRACE_LEVEL_NUM = 5
logging.addLevelName(TRACE_LEVEL_NUM, "TRACE")


def trace(self, message, *args, **kws):
    # Yes, logger takes its '*args' as 'args'.
    if self.isEnabledFor(TRACE_LEVEL_NUM):
        self._log(TRACE_LEVEL_NUM, message, args, **kws)


logging.Logger.trace = trace
# --- End TRACE level definition ---

LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class RichConsoleHandler(logging.Handler):
    """A logging handler that prints level-coloured messages to a rich Console."""

    def __init__(self, console: Console):
        super().__init__()
        self.console = console
        formatter = logging.Formatter(
            "%(asctime)s %(name)s: %(message)s", datefmt="%H:%M:%S"
        )
        self.setFormatter(formatter)

    def emit(self, record: logging.LogRecord):
        """Formats the record with Rich markup based on its level and prints it."""
        try:
            plain_msg = escape(f"{record.name}: {record.getMessage()}")
            timestamp = self.formatter.formatTime(record, self.formatter.datefmt)

            if record.levelno >= logging.CRITICAL:
                markup = f"{timestamp} [bold red]{plain_msg}[/bold red]"
            elif record.levelno >= logging.ERROR:
                markup = f"{timestamp} [red]{plain_msg}[/red]"
            elif record.levelno >= logging.WARNING:
                markup = f"{timestamp} [yellow]{plain_msg}[/yellow]"
            elif record.levelno >= logging.INFO:
                markup = f"{timestamp} [green]{plain_msg}[/green]"
            elif record.levelno >= logging.DEBUG:
                markup = f"{timestamp} [dim]{plain_msg}[/dim]"
            else:
                markup = f"{timestamp} [dim white on grey11]{plain_msg}[/]"

            self.console.print(markup, highlight=False, soft_wrap=True)
            if record.exc_info:
                self.console.print(
                    escape(self.formatter.formatException(record.exc_info)),
                    highlight=False,
                    soft_wrap=True,
                )
        except Exception:
            self.handleError(record)


def setup_logging(
    level_name: str = "WARNING",
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
):
    """
    Configures the root logger to print to stderr (or stream) through rich,
    and optionally to append to log_file as well.
    """
    level_name_upper = level_name.upper()
    if level_name_upper == "TRACE":
        log_level = TRACE_LEVEL_NUM
    else:
        log_level = getattr(logging, level_name_upper, logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove any existing handlers (e.g., from basicConfig in imports)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    log_formatter = logging.Formatter(
        "%(asctime)s %(levelname)-8s %(name)-30s %(message)s", datefmt="%H:%M:%S"
    )

    console = Console(file=stream or sys.stderr, stderr=stream is None)
    console_handler = RichConsoleHandler(console)
    console_handler.setLevel(log_level)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
            file_handler.setLevel(log_level)
            file_handler.setFormatter(log_formatter)
            root_logger.addHandler(file_handler)
            logging.getLogger("native2ascii").info(f"Logging to file: {log_file}")
        except OSError as e:
            logging.getLogger("native2ascii").error(
                f"Failed to open log file '{log_file}': {e}"
            )

    logging.getLogger("native2ascii").debug(
        f"Logging configured at level {logging.getLevelName(log_level)}."
    )
