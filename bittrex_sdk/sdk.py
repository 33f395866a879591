"""Main Bittrex SDK client with one method per API endpoint."""

from typing import Optional

import httpx

from .client import RestClient
from .config import DEFAULT_TIMEOUT, ClientConfig, Credentials
from .exceptions import DecodeError
from .format import canonical_symbol, clamp, format_amount, is_all
from .logger import ConsoleLogger, Logger, LogLevel
from .types import (
    Address,
    Balance,
    Currency,
    Deposit,
    Market,
    MarketSummary,
    Order,
    OrderBook,
    OrderBookType,
    OrderEntry,
    Ticker,
    Trade,
    Uuid,
    Withdrawal,
)


class BittrexClient:
    """
    Bittrex API client.

    Example:
        ```python
        with BittrexClient(api_key="...", api_secret="...") as client:
            book = client.get_order_book("btc-ltc", depth=10)
            order_id = client.buy_limit("BTC-LTC", 1.5, 0.01)
        ```
    """

    def __init__(
        self,
        api_key: str = "",
        api_secret: str = "",
        *,
        config: Optional[ClientConfig] = None,
        timeout: float = DEFAULT_TIMEOUT,
        log_level: LogLevel = LogLevel.INFO,
        logger: Optional[Logger] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the Bittrex SDK.

        Args:
            api_key: API key, only needed for market/account endpoints
            api_secret: API secret used to sign requests
            config: Full configuration; overrides api_key, api_secret and timeout
            timeout: Request timeout in seconds
            log_level: Minimum log level
            logger: Custom logger instance
            transport: Custom httpx transport
        """
        if config is None:
            config = ClientConfig(
                credentials=Credentials(api_key=api_key, api_secret=api_secret),
                timeout=timeout,
            )
        self.config = config
        self.logger = logger or ConsoleLogger(level=log_level)
        self.rest = RestClient(config=config, logger=self.logger, transport=transport)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        """Close the HTTP connection pool."""
        self.rest.close()

    # ========================================================================
    # Public
    # ========================================================================

    def get_markets(self) -> list[Market]:
        """Get the open and available trading markets."""
        return self.rest.call("public/getmarkets", shape=list[Market])

    def get_currencies(self) -> list[Currency]:
        """Get all supported currencies."""
        return self.rest.call("public/getcurrencies", shape=list[Currency])

    def get_ticker(self, market: str) -> Ticker:
        """Get the current ticker values for a market."""
        return self.rest.call(
            "public/getticker", {"market": canonical_symbol(market)}, shape=Ticker
        )

    def get_market_summaries(self) -> list[MarketSummary]:
        """Get the last 24 hour summary of all active markets."""
        return self.rest.call("public/getmarketsummaries", shape=list[MarketSummary])

    def get_market_summary(self, market: str) -> MarketSummary:
        """Get the last 24 hour summary of one market."""
        summaries = self.rest.call(
            "public/getmarketsummary",
            {"market": canonical_symbol(market)},
            shape=list[MarketSummary],
        )
        if not summaries:
            raise DecodeError("Empty market summary", canonical_symbol(market))
        return summaries[0]

    def get_order_book(
        self, market: str, book_type: str = OrderBookType.BOTH.value, depth: int = 20
    ) -> OrderBook:
        """
        Get the order book for a market.

        Args:
            market: Market name, e.g. ``BTC-LTC``
            book_type: ``buy``, ``sell`` or ``both``; anything else means ``both``
            depth: Number of levels per side, clamped to [1, 100]

        Returns:
            OrderBook; for a one-sided request the other side is empty
        """
        try:
            side = OrderBookType(book_type.lower())
        except ValueError:
            side = OrderBookType.BOTH
        params = {"market": canonical_symbol(market), "type": side.value, "depth": clamp(depth)}

        if side is OrderBookType.BOTH:
            return self.rest.call("public/getorderbook", params, shape=OrderBook)
        entries = self.rest.call("public/getorderbook", params, shape=list[OrderEntry])
        return OrderBook(**{side.value: entries})

    def get_market_history(self, market: str, count: int = 20) -> list[Trade]:
        """
        Get the latest trades for a market.

        Args:
            market: Market name
            count: Number of trades, clamped to [1, 100]
        """
        return self.rest.call(
            "public/getmarkethistory",
            {"market": canonical_symbol(market), "count": clamp(count)},
            shape=list[Trade],
        )

    # ========================================================================
    # Market
    # ========================================================================

    def _place(self, path: str, market: str, quantity: float, rate: Optional[float] = None) -> str:
        params = {"market": canonical_symbol(market), "quantity": format_amount(quantity)}
        if rate is not None:
            params["rate"] = format_amount(rate)
        return self.rest.call(path, params, auth=True, shape=Uuid).id

    def buy_limit(self, market: str, quantity: float, rate: float) -> str:
        """Place a limit buy order; returns the order uuid."""
        return self._place("market/buylimit", market, quantity, rate)

    def buy_market(self, market: str, quantity: float) -> str:
        """Place a market buy order; returns the order uuid."""
        return self._place("market/buymarket", market, quantity)

    def sell_limit(self, market: str, quantity: float, rate: float) -> str:
        """Place a limit sell order; returns the order uuid."""
        return self._place("market/selllimit", market, quantity, rate)

    def sell_market(self, market: str, quantity: float) -> str:
        """Place a market sell order; returns the order uuid."""
        return self._place("market/sellmarket", market, quantity)

    def cancel_order(self, order_id: str) -> None:
        """Cancel a buy or sell order."""
        self.rest.call("market/cancel", {"uuid": order_id}, auth=True)

    def get_open_orders(self, market: str = "all") -> list[Order]:
        """Get open orders, for one market or ``"all"``."""
        params = {} if is_all(market) else {"market": canonical_symbol(market)}
        return self.rest.call("market/getopenorders", params, auth=True, shape=list[Order])

    # ========================================================================
    # Account
    # ========================================================================

    def get_balances(self) -> dict[str, Balance]:
        """Get all balances, keyed by currency code."""
        return self.rest.call("account/getbalances", auth=True, shape=dict[str, Balance])

    def get_balance(self, currency: str) -> Balance:
        """Get the balance of one currency."""
        return self.rest.call(
            "account/getbalance", {"currency": canonical_symbol(currency)}, auth=True, shape=Balance
        )

    def get_deposit_address(self, currency: str) -> Address:
        """Generate or retrieve the deposit address for a currency."""
        return self.rest.call(
            "account/getdepositaddress",
            {"currency": canonical_symbol(currency)},
            auth=True,
            shape=Address,
        )

    def withdraw(
        self, address: str, currency: str, quantity: float, payment_id: Optional[str] = None
    ) -> str:
        """
        Withdraw funds to an external address.

        Args:
            address: Destination address
            currency: Currency code
            quantity: Amount to send
            payment_id: Memo/payment id for currencies that need one

        Returns:
            Withdrawal uuid
        """
        params = {
            "currency": canonical_symbol(currency),
            "quantity": format_amount(quantity),
            "address": address,
            "paymentid": payment_id,
        }
        return self.rest.call("account/withdraw", params, auth=True, shape=Uuid).id

    def get_order(self, order_id: str) -> Order:
        """Get a single order by uuid."""
        return self.rest.call("account/getorder", {"uuid": order_id}, auth=True, shape=Order)

    @staticmethod
    def _history_params(key: str, selector: str, count: Optional[int]) -> dict:
        params = {}
        if count:
            params["count"] = clamp(count)
        if not is_all(selector):
            params[key] = canonical_symbol(selector)
        return params

    def get_order_history(self, market: str = "all", count: Optional[int] = None) -> list[Order]:
        """
        Get order history.

        Args:
            market: Market name or ``"all"``
            count: Records to return, clamped to [1, 100]; ``None`` for the full history
        """
        return self.rest.call(
            "account/getorderhistory",
            self._history_params("market", market, count),
            auth=True,
            shape=list[Order],
        )

    def get_withdrawal_history(
        self, currency: str = "all", count: Optional[int] = None
    ) -> list[Withdrawal]:
        """Get withdrawal history for a currency or ``"all"``."""
        return self.rest.call(
            "account/getwithdrawalhistory",
            self._history_params("currency", currency, count),
            auth=True,
            shape=list[Withdrawal],
        )

    def get_deposit_history(self, currency: str = "all", count: Optional[int] = None) -> list[Deposit]:
        """Get deposit history for a currency or ``"all"``."""
        return self.rest.call(
            "account/getdeposithistory",
            self._history_params("currency", currency, count),
            auth=True,
            shape=list[Deposit],
        )
