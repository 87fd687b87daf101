"""Logging formatters for console output.

- ColoredConsoleFormatter: Adds ANSI color codes to log levels
- HybridConsoleFormatter: Bare message for INFO, structured for others

Build logs are read by humans scrolling through pipeline output, so INFO
lines stay short while warnings and errors carry the logger name.
"""

import logging
import os
from typing import TextIO

from download_github_release.constants import LOG_COLORS


def stream_supports_color(stream: TextIO) -> bool:
    """Return True if ``stream`` is an interactive terminal.

    Captured output (pipes, files, CI logs) and ``TERM=dumb`` get no
    escape sequences.
    """
    try:
        is_tty = bool(getattr(stream, "isatty", lambda: False)())
    except (OSError, ValueError):
        is_tty = False
    return is_tty and os.environ.get("TERM", "") != "dumb"


class ColoredConsoleFormatter(logging.Formatter):
    """Console formatter with ANSI color support for different log levels.

    The record's levelname is swapped for a colored copy during format()
    and restored afterwards, so other handlers see the original record.
    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        use_colors: bool = True,  # noqa: FBT001, FBT002
    ) -> None:
        """Initialize formatter.

        Args:
            fmt: Format string
            datefmt: Date format string for timestamps
            use_colors: Wrap level names in ANSI color codes

        """
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors for console output."""
        if self.use_colors and record.levelname in LOG_COLORS:
            color = LOG_COLORS[record.levelname]
            reset = LOG_COLORS["RESET"]
            original_levelname = record.levelname
            record.levelname = f"{color}{record.levelname}{reset}"
            try:
                return super().format(record)
            finally:
                record.levelname = original_levelname

        return super().format(record)


class HybridConsoleFormatter(logging.Formatter):
    """Console formatter with simple format for INFO, structured for others.

    Example Output:
        INFO:     "Downloaded app.zip to /build/deps/app.zip"
        WARNING:  "12:30:45 - download_github_release - WARNING - ..."
    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        use_colors: bool = True,  # noqa: FBT001, FBT002
    ) -> None:
        """Initialize hybrid formatter with structured format template.

        Args:
            fmt: Format string for structured messages (non-INFO levels)
            datefmt: Date format string for timestamps
            use_colors: Color level names of structured messages

        """
        super().__init__(fmt, datefmt)
        self._colored_formatter = ColoredConsoleFormatter(
            fmt, datefmt, use_colors=use_colors
        )

    def format(self, record: logging.LogRecord) -> str:
        """Format log record using simple or structured format by level."""
        if record.levelno == logging.INFO:
            return record.getMessage()
        return self._colored_formatter.format(record)
