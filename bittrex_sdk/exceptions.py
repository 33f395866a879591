"""Exceptions raised by the Bittrex SDK."""

from typing import Optional


class ExchangeError(Exception):
    """Base class for every error raised by the SDK."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TransportError(ExchangeError):
    """The request never produced a usable response (network failure, bad HTTP status)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class TimeoutError(TransportError):
    """The request did not complete within the client timeout."""


class DecodeError(ExchangeError):
    """The response body did not match the expected shape."""

    def __init__(self, message: str, detail: str = ""):
        super().__init__(f"{message}: {detail}" if detail else message)
        self.detail = detail


class APIError(ExchangeError):
    """The exchange answered with ``success: false``."""
