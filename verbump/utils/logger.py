"""
Logging for verbump.

Each module logs under ``verbump.<module>``:

- ``verbump.parser`` logs each parsed version with its fields at DEBUG
- ``verbump.ordering`` logs candidates that ``max_version`` skips as invalid at DEBUG
- ``verbump.derive`` logs every derived version with its input at DEBUG
- ``verbump.commits`` logs skipped non-conventional headers at DEBUG and
  the highest change across a commit range at INFO
- ``verbump.config`` logs where configuration was found and what it held
- ``verbump.cli`` and ``verbump.commands.*`` log command inputs and results

Imported as a library, verbump prints nothing. The ``verbump`` command
maps its ``-v`` count through :func:`level_for_verbosity` and calls
:func:`setup_logging` once, which sends records to stderr so stdout only
carries versions.
"""

from __future__ import annotations

import os
import sys
import logging
import threading
from typing import IO, Optional

from verbump.constants import (
    LOG_DATE_FORMAT,
    LOG_DEFAULT_FORMAT,
    LOG_VERBOSE_FORMAT,
)

LOGGER_NAMESPACE = "verbump"

_logging_configured: bool = False
_lock = threading.Lock()


class ColoredFormatter(logging.Formatter):
    """Logging formatter that colours the level name with ANSI escapes."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(
        self,
        fmt: str,
        *,
        datefmt: Optional[str] = None,
        use_color: bool = True,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        if not (self.use_color and self._should_use_color()):
            return super().format(record)

        color = self.COLORS.get(record.levelname)
        if not color:
            return super().format(record)

        # Records are shared between handlers; restore the plain level name.
        original = record.levelname
        record.levelname = f"{color}{original}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original

    @staticmethod
    def _should_use_color() -> bool:
        if os.environ.get("NO_COLOR") or os.environ.get("CI"):
            return False
        try:
            return sys.stderr.isatty()
        except (AttributeError, OSError):
            return False


def level_for_verbosity(verbose: int) -> int:
    """Map a ``-v`` count to a logging level (0: WARNING, 1: INFO, 2+: DEBUG)."""
    if verbose <= 0:
        return logging.WARNING
    if verbose == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(
    *,
    level: int = logging.INFO,
    verbose: bool = False,
    stream: Optional[IO[str]] = None,
) -> None:
    """Configure the ``verbump`` logger.

    Safe to call repeatedly; each call replaces the previous handler.

    Args:
        level: Logging level (e.g. ``logging.INFO``).
        verbose: Use the verbose format with timestamps and logger names.
        stream: Output stream; defaults to ``sys.stderr``.
    """
    global _logging_configured

    with _lock:
        root_logger = logging.getLogger(LOGGER_NAMESPACE)
        root_logger.handlers.clear()
        root_logger.setLevel(level)

        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setLevel(level)
        handler.setFormatter(
            ColoredFormatter(
                LOG_VERBOSE_FORMAT if verbose else LOG_DEFAULT_FORMAT,
                datefmt=LOG_DATE_FORMAT,
                use_color=not os.environ.get("NO_COLOR"),
            )
        )

        root_logger.addHandler(handler)
        root_logger.propagate = False
        _logging_configured = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the logger a verbump module writes to.

    Modules call this once at import, e.g. ``get_logger("derive")``. When
    nothing upstream handles ``verbump`` records yet, a ``NullHandler`` is
    attached so library callers see no output until :func:`setup_logging`
    runs or their own root logging picks the records up.

    Args:
        name: Module name relative to the package (``"commands.next"``) or
            already qualified (``"verbump.commands.next"``).
    """
    if not name or name == LOGGER_NAMESPACE:
        logger = logging.getLogger(LOGGER_NAMESPACE)
    elif name.startswith(LOGGER_NAMESPACE + "."):
        logger = logging.getLogger(name)
    else:
        logger = logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")

    if not logger.handlers and (not logger.parent or not logger.parent.handlers):
        logger.addHandler(logging.NullHandler())

    return logger


def is_logging_configured() -> bool:
    """Return True if verbump logging has been configured."""
    return _logging_configured


def disable_logging() -> None:
    """Silence all verbump logging output."""
    global _logging_configured

    with _lock:
        root_logger = logging.getLogger(LOGGER_NAMESPACE)
        root_logger.handlers.clear()
        root_logger.addHandler(logging.NullHandler())
        root_logger.setLevel(logging.NOTSET)
        _logging_configured = False
