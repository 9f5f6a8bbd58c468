# topmark:header:start
#
#   project      : IniFmt
#   file         : logging.py
#   file_relpath : src/inifmt/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logging for IniFmt: a TRACE level, a logger class and a coloured formatter.

All IniFmt loggers live under the ``inifmt`` namespace. `setup_logging` attaches a
single stderr handler to that namespace, so log records never mix with formatted
output on stdout and the host application's root logger is left alone.

The level comes from ``INIFMT_LOG_LEVEL`` (a level name such as ``DEBUG`` or
``TRACE``, or a number); without it IniFmt only logs CRITICAL records.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from inifmt.constants import LOG_LEVEL_ENV_VAR, PACKAGE_NAME

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class InifmtLogger(logging.Logger):
    """Logger with an extra `trace` method below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level.

        Args:
            msg (object): Message format string.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Extra attributes for the log record.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


if logging.getLevelName(TRACE_LEVEL) != "TRACE":
    logging.addLevelName(TRACE_LEVEL, "TRACE")

logging.setLoggerClass(InifmtLogger)


LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

# Highest threshold first; the first one a record reaches picks its colour.
LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)

LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
}


class ChalkFormatter(logging.Formatter):
    """Formatter that colours the whole record according to its level."""

    def format(self, record: logging.LogRecord) -> str:
        """Return the formatted record wrapped in the colour of its level."""
        message: str = super().format(record)
        for threshold, style in LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim(message)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``INIFMT_LOG_LEVEL``, or None if unset or unknown."""
    raw: str = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    return LEVEL_NAMES.get(raw)


def setup_logging(level: int | None = None) -> None:
    """Attach a coloured stderr handler to the ``inifmt`` logger namespace.

    Calling this again replaces the previous handler, so the handler always
    writes to the current ``sys.stderr``.

    Args:
        level (int | None): Log level; when None, ``INIFMT_LOG_LEVEL`` is consulted
            and CRITICAL is used if it is unset.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    package_logger: logging.Logger = logging.getLogger(PACKAGE_NAME)
    package_logger.setLevel(level)
    for old in package_logger.handlers[:]:
        package_logger.removeHandler(old)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.propagate = False


def get_logger(name: str) -> InifmtLogger:
    """Return the `InifmtLogger` called ``name`` (normally the module's ``__name__``)."""
    return cast("InifmtLogger", logging.getLogger(name))
