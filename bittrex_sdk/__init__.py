"""Bittrex SDK for Python."""

# Main client
from .sdk import BittrexClient

# Request/response core
from .client import RestClient
from .config import API_BASE, API_VERSION, DEFAULT_TIMEOUT, ClientConfig, Credentials
from .envelope import Envelope, EnvelopeDecoder
from .signer import NonceGenerator, SignedRequest, SignedRequestBuilder, sign

# Services
from .logger import Logger, ConsoleLogger, NoopLogger, StdlibLogger, LogLevel, redact_url
from .format import format_amount, clamp, canonical_symbol

# Types
from .types import (
    OrderBookType,
    Market,
    Currency,
    Ticker,
    MarketSummary,
    OrderEntry,
    OrderBook,
    Trade,
    Order,
    Balance,
    Address,
    Withdrawal,
    Deposit,
    Uuid,
)

# Exceptions
from .exceptions import (
    ExchangeError,
    TransportError,
    TimeoutError,
    DecodeError,
    APIError,
)

__all__ = [
    # Main client
    "BittrexClient",
    # Core
    "RestClient",
    "ClientConfig",
    "Credentials",
    "API_BASE",
    "API_VERSION",
    "DEFAULT_TIMEOUT",
    "Envelope",
    "EnvelopeDecoder",
    "NonceGenerator",
    "SignedRequest",
    "SignedRequestBuilder",
    "sign",
    # Services
    "Logger",
    "ConsoleLogger",
    "NoopLogger",
    "StdlibLogger",
    "LogLevel",
    "redact_url",
    # Format utilities
    "format_amount",
    "clamp",
    "canonical_symbol",
    # Domain types
    "OrderBookType",
    "Market",
    "Currency",
    "Ticker",
    "MarketSummary",
    "OrderEntry",
    "OrderBook",
    "Trade",
    "Order",
    "Balance",
    "Address",
    "Withdrawal",
    "Deposit",
    "Uuid",
    # Exceptions
    "ExchangeError",
    "TransportError",
    "TimeoutError",
    "DecodeError",
    "APIError",
]

__version__ = "0.1.0"
