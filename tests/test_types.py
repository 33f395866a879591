"""Tests for payload models."""

from datetime import datetime

import pytest
from pydantic import ValidationError


class TestMarketDataTypes:
    """Test public market data models."""

    def test_market_from_exchange_json(self):
        """Test reading PascalCase keys."""
        from bittrex_sdk import Market

        market = Market.model_validate(
            {
                "MarketCurrency": "LTC",
                "BaseCurrency": "BTC",
                "MarketCurrencyLong": "Litecoin",
                "BaseCurrencyLong": "Bitcoin",
                "MinTradeSize": 0.01,
                "MarketName": "BTC-LTC",
                "IsActive": True,
                "Created": "2014-02-13T00:00:00",
                "Notice": None,
                "IsSponsored": None,
                "LogoUrl": "https://example.com/ltc.png",
            }
        )

        assert market.market_name == "BTC-LTC"
        assert market.min_trade_size == 0.01
        assert market.created == datetime(2014, 2, 13)
        assert market.logo_url == "https://example.com/ltc.png"

    def test_market_by_field_name(self):
        """Test constructing with snake_case names."""
        from bittrex_sdk import Market

        market = Market(
            market_currency="LTC",
            base_currency="BTC",
            market_currency_long="Litecoin",
            base_currency_long="Bitcoin",
            min_trade_size=0.01,
            market_name="BTC-LTC",
            is_active=True,
            created=datetime(2014, 2, 13),
        )

        assert market.notice is None
        assert market.model_dump(by_alias=True)["MarketName"] == "BTC-LTC"

    def test_missing_required_field(self):
        """Test that a missing field is rejected."""
        from bittrex_sdk import Ticker

        with pytest.raises(ValidationError):
            Ticker.model_validate({"Bid": 1.0, "Ask": 2.0})

    def test_wrong_type(self):
        """Test that a wrong type is rejected."""
        from bittrex_sdk import Ticker

        with pytest.raises(ValidationError):
            Ticker.model_validate({"Bid": "lots", "Ask": 2.0, "Last": 1.5})

    def test_order_book_keys_are_lowercase(self):
        """Test that buy/sell keep their lowercase JSON names."""
        from bittrex_sdk import OrderBook

        book = OrderBook.model_validate(
            {
                "buy": [{"Quantity": 12.5, "Rate": 0.02}, {"Quantity": 3.0, "Rate": 0.019}],
                "sell": [{"Quantity": 1.0, "Rate": 0.021}],
            }
        )

        assert [entry.rate for entry in book.buy] == [0.02, 0.019]
        assert book.sell[0].quantity == 1.0

    def test_one_sided_order_book(self):
        """Test that a missing side decodes as empty."""
        from bittrex_sdk import OrderBook

        book = OrderBook.model_validate({"buy": [{"Quantity": 1.0, "Rate": 0.5}]})

        assert len(book.buy) == 1
        assert book.sell == []

    def test_trade(self):
        from bittrex_sdk import Trade

        trade = Trade.model_validate(
            {
                "Id": 319435,
                "TimeStamp": "2014-07-09T03:21:20.08",
                "Quantity": 0.30802438,
                "Price": 0.012634,
                "Total": 0.00389158,
                "FillType": "FILL",
                "OrderType": "BUY",
            }
        )

        assert trade.id == 319435
        assert trade.time_stamp.year == 2014
        assert trade.order_type == "BUY"


class TestAccountTypes:
    """Test order and account models."""

    def test_order_from_open_orders(self):
        """Test the getopenorders key set."""
        from bittrex_sdk import Order

        order = Order.model_validate(
            {
                "Uuid": None,
                "OrderUuid": "09aa5bb6-8232-41aa-9b78-a5a1093e0211",
                "Exchange": "BTC-LTC",
                "OrderType": "LIMIT_SELL",
                "Quantity": 5.0,
                "QuantityRemaining": 5.0,
                "Limit": 2.0,
                "CommissionPaid": 0.0,
                "Price": 0.0,
                "PricePerUnit": None,
                "Opened": "2014-07-09T03:55:48.77",
                "Closed": None,
                "CancelInitiated": False,
                "ImmediateOrCancel": False,
                "IsConditional": False,
                "Condition": None,
                "ConditionTarget": None,
            }
        )

        assert order.order_uuid == "09aa5bb6-8232-41aa-9b78-a5a1093e0211"
        assert order.commission == 0.0
        assert order.closed is None

    def test_order_from_history(self):
        """Test the getorderhistory key set (TimeStamp instead of Opened)."""
        from bittrex_sdk import Order

        order = Order.model_validate(
            {
                "OrderUuid": "fd97d393-e9b9-4dd1-9dbf-f288fc72a185",
                "Exchange": "BTC-LTC",
                "TimeStamp": "2014-07-09T04:01:00.667",
                "OrderType": "LIMIT_BUY",
                "Limit": 0.00000001,
                "Quantity": 100000.0,
                "QuantityRemaining": 100000.0,
                "Commission": 0.0,
                "Price": 0.0,
                "PricePerUnit": None,
                "IsConditional": False,
                "Condition": None,
                "ConditionTarget": None,
                "ImmediateOrCancel": False,
            }
        )

        assert order.opened == datetime(2014, 7, 9, 4, 1, 0, 667000)
        assert order.order_type == "LIMIT_BUY"

    def test_order_from_get_order(self):
        """Test the getorder key set (Type instead of OrderType)."""
        from bittrex_sdk import Order

        order = Order.model_validate(
            {
                "AccountId": None,
                "OrderUuid": "0cb4c4e4-bdc7-4e13-8c13-430e587d2cc1",
                "Exchange": "BTC-SHLD",
                "Type": "LIMIT_BUY",
                "Quantity": 1000.0,
                "QuantityRemaining": 1000.0,
                "Limit": 0.00000001,
                "Reserved": 0.00001,
                "CommissionPaid": 0.0,
                "Price": 0.0,
                "Opened": "2014-07-13T07:45:46.27",
                "Closed": None,
                "IsOpen": True,
                "CancelInitiated": False,
            }
        )

        assert order.order_type == "LIMIT_BUY"
        assert order.exchange == "BTC-SHLD"

    def test_balance(self):
        from bittrex_sdk import Balance

        balance = Balance.model_validate(
            {
                "Currency": "DOGE",
                "Balance": 0.0,
                "Available": 0.0,
                "Pending": 0.0,
                "CryptoAddress": "DLxcEt3AatMyr2NTatzjsfHNoB9NT62HiF",
                "Requested": False,
                "Uuid": None,
            }
        )

        assert balance.currency == "DOGE"
        assert balance.crypto_address.startswith("DLx")

    def test_uuid_wrapper(self):
        """Test the lowercase uuid key."""
        from bittrex_sdk import Uuid

        assert Uuid.model_validate({"uuid": "abc-123"}).id == "abc-123"

        with pytest.raises(ValidationError):
            Uuid.model_validate({"Uuid": "abc-123"})

    def test_withdrawal_and_deposit(self):
        from bittrex_sdk import Deposit, Withdrawal

        withdrawal = Withdrawal.model_validate(
            {
                "PaymentUuid": "b52c7a5c-90c6-4c6e-835c-e16df12708b1",
                "Currency": "BTC",
                "Amount": 17.0,
                "Address": "1DeaaFBdbB5nrHj87x3NHS4onvw1GPNyAu",
                "Opened": "2014-07-09T04:24:47.217",
                "Authorized": True,
                "PendingPayment": False,
                "TxCost": 0.0002,
                "TxId": None,
                "Canceled": True,
                "InvalidAddress": False,
            }
        )
        deposit = Deposit.model_validate(
            {
                "Id": 1,
                "Amount": 0.5,
                "Currency": "BTC",
                "Confirmations": 6,
                "LastUpdated": "2014-07-10T11:00:00",
                "TxId": "abc",
                "CryptoAddress": "1DeaaFBdbB5nrHj87x3NHS4onvw1GPNyAu",
            }
        )

        assert withdrawal.canceled is True
        assert withdrawal.tx_id is None
        assert deposit.confirmations == 6


class TestPackageImports:
    """Test that the public surface is importable from the package root."""

    def test_single_import_statement(self):
        from bittrex_sdk import (
            BittrexClient,
            RestClient,
            ClientConfig,
            SignedRequestBuilder,
            EnvelopeDecoder,
            Market,
            OrderBook,
            Balance,
            APIError,
            DecodeError,
            TransportError,
            LogLevel,
        )

        assert BittrexClient is not None
        assert issubclass(APIError, Exception)
        assert LogLevel.DEBUG.value == "debug"
