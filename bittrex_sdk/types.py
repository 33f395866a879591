"""Type definitions for the Bittrex SDK."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal


# ============================================================================
# Enums
# ============================================================================


class OrderBookType(str, Enum):
    """Which side(s) of the order book to request."""

    BUY = "buy"
    SELL = "sell"
    BOTH = "both"


# ============================================================================
# Base
# ============================================================================


class BittrexModel(BaseModel):
    """Reads the exchange's PascalCase keys, exposes snake_case attributes."""

    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)


# ============================================================================
# Public market data
# ============================================================================


class Market(BittrexModel):
    """Market information."""

    market_currency: str
    base_currency: str
    market_currency_long: str
    base_currency_long: str
    min_trade_size: float
    market_name: str
    is_active: bool
    created: datetime
    notice: Optional[str] = None
    is_sponsored: Optional[bool] = None
    logo_url: Optional[str] = None


class Currency(BittrexModel):
    """Currency information."""

    currency: str
    currency_long: str
    min_confirmation: int
    tx_fee: float
    is_active: bool
    coin_type: str
    base_address: Optional[str] = None
    notice: Optional[str] = None


class Ticker(BittrexModel):
    """Current best bid/ask and last trade price."""

    bid: float
    ask: float
    last: float


class MarketSummary(BittrexModel):
    """Last 24 hour summary of a market."""

    market_name: str
    high: float
    low: float
    volume: float
    last: float
    base_volume: float
    time_stamp: datetime
    bid: float
    ask: float
    open_buy_orders: int
    open_sell_orders: int
    prev_day: float
    created: datetime
    display_market_name: Optional[str] = None


class OrderEntry(BittrexModel):
    """Order book price level."""

    quantity: float
    rate: float


class OrderBook(BittrexModel):
    """Order book snapshot; entries keep exchange order."""

    buy: list[OrderEntry] = Field(default_factory=list, alias="buy")
    sell: list[OrderEntry] = Field(default_factory=list, alias="sell")


class Trade(BittrexModel):
    """Executed trade from market history."""

    id: int
    time_stamp: datetime
    quantity: float
    price: float
    total: float
    fill_type: str
    order_type: str


# ============================================================================
# Orders and account
# ============================================================================


class Order(BittrexModel):
    """
    Open, historical or single looked-up order.

    The three order endpoints disagree on a few key names (``Type`` vs
    ``OrderType``, ``TimeStamp`` vs ``Opened``, ``CommissionPaid`` vs
    ``Commission``); each such field accepts all spellings.
    """

    uuid: Optional[str] = None
    order_uuid: str
    exchange: str
    order_type: str = Field(
        alias="OrderType", validation_alias=AliasChoices("OrderType", "Type", "order_type")
    )
    limit: float
    quantity: float
    quantity_remaining: float
    commission: float = Field(
        alias="Commission",
        validation_alias=AliasChoices("Commission", "CommissionPaid", "commission"),
    )
    price: float
    price_per_unit: Optional[float] = None
    opened: Optional[datetime] = Field(
        default=None,
        alias="Opened",
        validation_alias=AliasChoices("Opened", "TimeStamp", "opened"),
    )
    closed: Optional[datetime] = None
    cancel_initiated: bool = False
    immediate_or_cancel: bool = False
    is_conditional: bool = False
    condition: Optional[str] = None
    condition_target: Optional[float] = None


class Balance(BittrexModel):
    """Balance of one currency."""

    currency: str
    balance: float
    available: float
    pending: float
    crypto_address: Optional[str] = None
    requested: bool = False
    uuid: Optional[str] = None


class Address(BittrexModel):
    """Deposit address for a currency."""

    currency: str
    address: str


class Withdrawal(BittrexModel):
    """Withdrawal history entry."""

    payment_uuid: str
    currency: str
    amount: float
    address: str
    opened: datetime
    authorized: bool
    pending_payment: bool
    tx_cost: float
    tx_id: Optional[str] = None
    canceled: bool
    invalid_address: bool


class Deposit(BittrexModel):
    """Deposit history entry."""

    id: int
    amount: float
    currency: str
    confirmations: int
    last_updated: datetime
    tx_id: str
    crypto_address: str


class Uuid(BittrexModel):
    """Identifier returned by order placement and withdrawal."""

    id: str = Field(alias="uuid")
