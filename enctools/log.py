"""Tagged logging through a replaceable logger; the default writes to stdout."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod


class Logger(ABC):
    """Receives debug, warning and error messages with a tag."""

    @abstractmethod
    def debug(self, tag: str, msg: str) -> None:
        """Handle a debug message."""

    @abstractmethod
    def warn(self, tag: str, msg: str) -> None:
        """Handle a warning message."""

    @abstractmethod
    def error(self, tag: str, msg: str) -> None:
        """Handle an error message."""


class StdoutLogger(Logger):
    """Writes ``<level>/<tag>: <msg>`` lines to standard output."""

    @staticmethod
    def _write(level: str, tag: str, msg: str) -> None:
        sys.stdout.write(f"{level}/{tag}: {msg}\r\n")

    def debug(self, tag: str, msg: str) -> None:
        self._write("D", tag, msg)

    def warn(self, tag: str, msg: str) -> None:
        self._write("W", tag, msg)

    def error(self, tag: str, msg: str) -> None:
        self._write("E", tag, msg)


_logger: Logger = StdoutLogger()


def set_logger(logger: Logger) -> Logger:
    """Install ``logger`` and return the one it replaces."""
    global _logger
    previous = _logger
    _logger = logger
    return previous


def d(tag: str, msg: str) -> None:
    """Log a debug message."""
    _logger.debug(tag, msg)


def w(tag: str, msg: str) -> None:
    """Log a warning message."""
    _logger.warn(tag, msg)


def e(tag: str, msg: str) -> None:
    """Log an error message."""
    _logger.error(tag, msg)