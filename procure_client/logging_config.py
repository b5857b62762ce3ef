"""
Logging setup for the procurement API client.

Console output goes through colorlog. Structured errors are also counted per
category for the current run, so the CLI can close with a one-line tally and
a warning when the session had to be given up.
"""

import logging
import os
import sys
from collections import Counter
from typing import Any

import colorlog

_LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "magenta",
}


class AccessLogFilter(logging.Filter):
    """Filter to suppress aiohttp access log lines."""

    def filter(self, record):
        return not record.name.startswith("aiohttp.access")


class ErrorTally:
    """Counts structured errors by category for one client run."""

    def __init__(self) -> None:
        self.counts: Counter[str] = Counter()
        self.last_message: dict[str, str] = {}

    def record(self, error_type: str, message: str) -> None:
        self.counts[error_type] += 1
        self.last_message[error_type] = message

    @property
    def session_expiries(self) -> int:
        return self.counts["session"]

    def reset(self) -> None:
        self.counts.clear()
        self.last_message.clear()

    def report(self) -> None:
        """Log the run's error counts; silent when nothing went wrong."""
        if not self.counts:
            return
        tally = ", ".join(f"{name}={count}" for name, count in sorted(self.counts.items()))
        logging.warning(f"📊 Errors this run: {tally}")
        if self.session_expiries:
            logging.warning(
                f"🔐 Session could not be renewed ({self.session_expiries}x), "
                f"log in again: {self.last_message['session']}"
            )


error_tally = ErrorTally()


def log_structured_error(
    error_type: str,
    message: str,
    exception: Exception = None,
    context: dict[str, Any] = None,
    level: int = logging.ERROR
) -> None:
    """Log an error as ``[TYPE] message | Exception: ... | Context: k=v``.

    Args:
        error_type: Category of the error (e.g., 'network', 'session', 'server')
        message: Descriptive error message
        exception: The exception that occurred (optional)
        context: Additional context data for debugging
        level: Logging level (default: ERROR)
    """
    parts = [f"[{error_type.upper()}] {message}"]
    if exception:
        parts.append(f"Exception: {type(exception).__name__}: {exception}")
    if context:
        parts.append("Context: " + " | ".join(f"{k}={v}" for k, v in context.items()))
    logging.log(level, " | ".join(parts))
    error_tally.record(error_type, message)


class ConsoleHandler(colorlog.StreamHandler):
    """Colored stderr handler installed once on the root logger."""

    def __init__(self) -> None:
        super().__init__(sys.stderr)
        self.setFormatter(
            colorlog.ColoredFormatter(
                "%(asctime)s %(log_color)s%(levelname)-8s%(reset)s %(message)s",
                datefmt="%H:%M:%S",
                log_colors=_LOG_COLORS,
            )
        )
        self.addFilter(AccessLogFilter())


class LoggerConfigurator:
    """Installs the console handler and picks the level from ``DEBUG``."""

    def configure(self) -> int:
        debug_env = os.environ.get("DEBUG", "").lower()
        log_level = logging.DEBUG if debug_env in ("true", "1", "yes") else logging.INFO

        root_logger = logging.getLogger()
        for handler in [h for h in root_logger.handlers if isinstance(h, ConsoleHandler)]:
            root_logger.removeHandler(handler)
        root_logger.addHandler(ConsoleHandler())
        root_logger.setLevel(log_level)

        # aiohttp client internals are chatty at DEBUG
        logging.getLogger("aiohttp").setLevel(logging.WARNING)
        return log_level
