"""Logging interface and implementations."""

import logging
import sys
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Optional, TextIO
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

REDACTED_PARAMS = frozenset({"apikey", "nonce"})


class LogLevel(str, Enum):
    """Log level enumeration."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    NONE = "none"


_RANKS = {
    LogLevel.DEBUG: 0,
    LogLevel.INFO: 1,
    LogLevel.WARN: 2,
    LogLevel.ERROR: 3,
    LogLevel.NONE: 4,
}


class Logger(ABC):
    """Abstract logger interface."""

    @abstractmethod
    def debug(self, message: str, *args: Any) -> None:
        """Log debug message."""

    @abstractmethod
    def info(self, message: str, *args: Any) -> None:
        """Log info message."""

    @abstractmethod
    def warn(self, message: str, *args: Any) -> None:
        """Log warning message."""

    @abstractmethod
    def error(self, message: str, *args: Any) -> None:
        """Log error message."""


class ConsoleLogger(Logger):
    """Writes formatted lines to a text stream, filtered by level."""

    def __init__(
        self,
        level: LogLevel = LogLevel.INFO,
        prefix: str = "[Bittrex SDK]",
        stream: Optional[TextIO] = None,
    ):
        """
        Initialize console logger.

        Args:
            level: Minimum log level to display
            prefix: Prefix for log messages
            stream: Output stream, stdout when omitted
        """
        self.level = level
        self.prefix = prefix
        self._stream = stream

    def _emit(self, level: LogLevel, message: str, args: tuple) -> None:
        if _RANKS[level] < _RANKS[self.level]:
            return
        parts = [f"{self.prefix} {level.value.upper()}: {message}"]
        parts.extend(str(arg) for arg in args)
        print(" ".join(parts), file=self._stream or sys.stdout)

    def debug(self, message: str, *args: Any) -> None:
        self._emit(LogLevel.DEBUG, message, args)

    def info(self, message: str, *args: Any) -> None:
        self._emit(LogLevel.INFO, message, args)

    def warn(self, message: str, *args: Any) -> None:
        self._emit(LogLevel.WARN, message, args)

    def error(self, message: str, *args: Any) -> None:
        self._emit(LogLevel.ERROR, message, args)

    def set_level(self, level: LogLevel) -> None:
        """Set log level."""
        self.level = level

    def get_level(self) -> LogLevel:
        """Get current log level."""
        return self.level


class StdlibLogger(Logger):
    """Forwards messages to a :mod:`logging` logger so applications can route them."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger("bittrex_sdk")

    def debug(self, message: str, *args: Any) -> None:
        self._logger.debug(message, *args)

    def info(self, message: str, *args: Any) -> None:
        self._logger.info(message, *args)

    def warn(self, message: str, *args: Any) -> None:
        self._logger.warning(message, *args)

    def error(self, message: str, *args: Any) -> None:
        self._logger.error(message, *args)


class NoopLogger(Logger):
    """No-op logger that discards all log messages."""

    def debug(self, message: str, *args: Any) -> None:
        pass

    def info(self, message: str, *args: Any) -> None:
        pass

    def warn(self, message: str, *args: Any) -> None:
        pass

    def error(self, message: str, *args: Any) -> None:
        pass


def redact_url(url: str) -> str:
    """
    Mask credential-bearing query parameters before a URL is logged.

    Args:
        url: Full request URL

    Returns:
        The same URL with ``apikey`` and ``nonce`` values replaced by ``***``
    """
    parts = urlsplit(url)
    if not parts.query:
        return url
    query = [
        (key, "***" if key in REDACTED_PARAMS else value)
        for key, value in parse_qsl(parts.query, keep_blank_values=True)
    ]
    return urlunsplit(parts._replace(query=urlencode(query, safe="*")))
