# topmark:header:start
#
#   project      : SiteSetDoc
#   file         : logging.py
#   file_relpath : src/sitesetdoc/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logging for SiteSetDoc: a TRACE level below DEBUG and colored console output.

Tree construction logs its per-node decisions at TRACE so a run with
``SITESETDOC_LOG_LEVEL=TRACE`` shows how each setting found its category.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from sitesetdoc.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Callable

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"


class SitesetLogger(logging.Logger):
    """Logger with a ``trace`` method for the TRACE level."""

    def trace(self, msg: object, *args: object) -> None:
        """Log ``msg % args`` at TRACE level."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(SitesetLogger)


# First threshold the record reaches wins; anything below TRACE is dimmed.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record according to its severity."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim.red(message)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``SITESETDOC_LOG_LEVEL``, or None.

    Accepts a level name in any case (``TRACE``, ``debug``, ``WARN``) or a
    number. Unknown names are ignored.
    """
    value = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not value:
        return None
    if value.isdigit():
        return int(value)
    return logging.getLevelNamesMapping().get(value)


def setup_logging(level: int | None = None) -> None:
    """Send all records at ``level`` or above to stdout, colored.

    Without an explicit level the environment decides, falling back to
    CRITICAL so a normal run prints no log output at all.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root_logger.addHandler(handler)
    root_logger.propagate = False


def get_logger(name: str) -> SitesetLogger:
    """Return the `SitesetLogger` called ``name``."""
    return cast("SitesetLogger", logging.getLogger(name))
