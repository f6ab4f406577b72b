"""Defines the :class:`.Logger` class and one-line logging helpers."""

from __future__ import annotations

# Standard Library Imports
import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Local Imports
from .behavioral_config import BehavioralConfig

LOG_FORMAT: str = "%(asctime)s - %(module)s - %(levelname)s - %(message)s"
"""``str``: format applied to every handler created by :class:`.Logger`."""

PACKAGE_LOGGER_NAME: str = "proptree"
"""``str``: name of the top-level logger every ``proptree`` message is published to."""


def pathSafeTime(dt: datetime | None = None) -> str:
    """Return a path-safe string representation of `dt`, defaulting to now."""
    if dt is None:
        dt = datetime.now()
    return dt.isoformat().replace(":", "-").replace(".", "")


class Logger:
    """Extended logger wraps the standard Python logging package.

    Handlers write to ``stdout`` or to a rotating, timestamped log file depending on the
    ``logging`` section of :class:`.BehavioralConfig`.
    """

    def __init__(self, name, level=None, path=None, allow_multiple_handlers=None):
        """Configure the logging information for this Logger instance.

        Args:
            name (``str``): name of the logger instance
            level (``int``, optional): level of log messages that are published
            path (``str``, optional): ``"stdout"`` or the directory where the log file is stored
            allow_multiple_handlers (``bool``, optional): whether multiple log handlers are permitted
        """
        config = BehavioralConfig.getConfig().logging
        if level is None:
            level = config.Level
        if path is None:
            path = config.OutputLocation
        if allow_multiple_handlers is None:
            allow_multiple_handlers = config.AllowMultipleHandlers

        self.filename = None
        self.logger = logging.getLogger(name)
        if self.logger.handlers and not allow_multiple_handlers:
            return

        if path == "stdout":
            self.filename = "stdout"
            handler = logging.StreamHandler(sys.stdout)

        else:
            log_dir = Path(path)
            if not log_dir.exists():
                self.logger.info(f"Path did not exist: {path!r}. Creating path...")
                log_dir.mkdir(parents=True)

            self.filename = str(log_dir / f"{name}_{pathSafeTime()}.log")
            handler = RotatingFileHandler(
                self.filename,
                maxBytes=config.MaxFileSize,
                backupCount=config.MaxFileCount,
            )

        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        self.logger.setLevel(level)
        self.logger.addHandler(handler)

    def __getattr__(self, name):
        """Delegate everything else to the wrapped :class:`logging.Logger`."""
        return getattr(self.logger, name)


def getPackageLogger() -> Logger:
    """Return the top-level ``proptree`` :class:`.Logger`, configured by :class:`.BehavioralConfig`.

    A handler is only attached if the logger has none, so handlers set up by the calling
    application take precedence & repeated calls never stack handlers.
    """
    return Logger(PACKAGE_LOGGER_NAME, allow_multiple_handlers=False)


def _proptreeLog(message: str, level: int):
    """Log a message to the top-level ``proptree`` log record.

    Args:
        message (``str``): message to record with in the log.
        level (``int``): level at which to log this message, corresponding to `logging.LOG_LEVEL`.
    """
    logging.getLogger(PACKAGE_LOGGER_NAME).log(msg=message, level=level)


def proptreeLogError(message: str):
    """Log an ERROR message to the top-level log record."""
    _proptreeLog(message, level=logging.ERROR)


def proptreeLogDebug(message: str):
    """Log a DEBUG message to the top-level log record."""
    _proptreeLog(message, level=logging.DEBUG)
