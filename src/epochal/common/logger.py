"""Defines the :class:`.Logger` class and the package-level logging one-liners.

The value types report every rejected input on the ``"epochal"`` logger just before raising.
Applications that want those records written somewhere build a :class:`.Logger` once:

.. code-block:: python

    Logger(PACKAGE_LOGGER_NAME, path="./logs/")
"""

from __future__ import annotations

# Standard Library Imports
import logging
import sys
from logging.handlers import RotatingFileHandler
from os import makedirs
from os.path import exists, join

# Local Imports
from . import pathSafeTime
from .behavioral_config import BehavioralConfig

PACKAGE_LOGGER_NAME: str = "epochal"
"""``str``: name of the logger that the module-level one-liners write to."""

LOG_FORMAT: str = "%(asctime)s - %(module)s - %(levelname)s - %(message)s"
"""``str``: record layout shared by the stdout and file handlers."""


class Logger:
    """Wrapper of a standard :class:`logging.Logger` configured from :class:`.BehavioralConfig`.

    Records go to stdout, or to a size-rotated file named after the logger and its creation
    time when an output directory is configured.
    """

    def __init__(self, name, level=None, path=None, allow_multiple_handlers=None):
        """Attach a handler to the named logger, unless it already has one.

        Args:
            name (``str``): name of the wrapped logger, also used for the log file name
            level (``int``, optional): lowest level published. Defaults to the configured level.
            path (``str``, optional): ``"stdout"`` or the directory log files are written to.
                Defaults to the configured output location.
            allow_multiple_handlers (``bool``, optional): whether to add a handler to a logger
                which already has one. Defaults to the configured value.
        """
        config = BehavioralConfig.getConfig().logging
        if not level:
            level = config.Level
        if not path:
            path = config.OutputLocation
        if not allow_multiple_handlers:
            allow_multiple_handlers = config.AllowMultipleHandlers

        self.logger = logging.getLogger(name)
        self.filename = None
        if self.logger.handlers and allow_multiple_handlers is not True:
            return

        handler = self._makeHandler(name, path, config)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        self.logger.setLevel(level)
        self.logger.addHandler(handler)

    def _makeHandler(self, name, path, config):
        """Build the stdout handler, or a rotating file handler creating `path` if needed."""
        if path == "stdout":
            self.filename = "stdout"
            return logging.StreamHandler(sys.stdout)

        if not exists(path):
            self.logger.info(f"Path did not exist: {path!r}. Creating path...")
            makedirs(path)

        self.filename = join(path, f"{name}_{pathSafeTime()}.log")
        return RotatingFileHandler(
            self.filename,
            maxBytes=config.MaxFileSize,
            backupCount=config.MaxFileCount,
        )

    def __getattr__(self, name):
        """Defer everything else to the wrapped :class:`logging.Logger`."""
        return getattr(self.logger, name)


def _epochalLog(message: str, level: int):
    """Log a message to the top-level log record.

    This provides a simple one-liner that doesn't require pre-initializing a logger object,
    which is what the value types use when they reject their inputs.

    Args:
        message (``str``): message to record with in the log.
        level (``int``): level at which to log this message, corresponding to `logging.LOG_LEVEL`.
    """
    logging.getLogger(PACKAGE_LOGGER_NAME).log(msg=message, level=level)


def epochalLogError(message: str):
    """Log an ERROR message to the top-level log record."""
    _epochalLog(message, level=logging.ERROR)


def epochalLogDebug(message: str):
    """Log a DEBUG message to the top-level log record.

    See Also:
        :func:`._epochalLog`
    """
    _epochalLog(message, level=logging.DEBUG)
