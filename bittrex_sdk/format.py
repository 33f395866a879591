"""Internal formatting utilities for SDK.

These turn caller input into the values the exchange expects on the wire.
"""

from decimal import Decimal

AMOUNT_DECIMALS = 8
ALL = "all"


def format_amount(value: str | float | Decimal, decimals: int = AMOUNT_DECIMALS) -> str:
    """
    Render a quantity or rate as fixed-point text.

    Args:
        value: Amount as a number or numeric string
        decimals: Number of decimal places to emit

    Returns:
        Fixed-point string, e.g. ``1.5 -> "1.50000000"``
    """
    dec = Decimal(str(value))
    return f"{dec:.{decimals}f}"


def clamp(value: int, low: int = 1, high: int = 100) -> int:
    """
    Bound an integer to ``[low, high]``.

    Args:
        value: Requested value
        low: Smallest allowed value
        high: Largest allowed value

    Returns:
        ``value`` when already in range, otherwise the nearest bound
    """
    return max(low, min(high, value))


def canonical_symbol(symbol: str) -> str:
    """Uppercase a market or currency code (``btc-ltc -> BTC-LTC``)."""
    return symbol.strip().upper()


def is_all(selector: str) -> bool:
    """Check whether a market/currency selector means "no filter"."""
    return selector.strip().lower() == ALL
