"""HTTP API client for the MEXC spot v3 API.

This module provides the MexcSpotClient class: public market data endpoints
and signed account/trade endpoints.
"""

from decimal import Decimal

from mexc_client.auth import SpotRequestSigner
from mexc_client.client import BaseApiClient
from mexc_client.errors import ValidationError
from mexc_client.helpers import DEFAULT_SPOT_API_URL, require
from mexc_client.types import (
    ApiResult,
    JsonObject,
    KlineInterval,
    OrderType,
    ParamValue,
    Side,
)


class MexcSpotClient(BaseApiClient):
    """MEXC spot v3 API client.

    Every method returns an ``ApiResponse`` carrying the HTTP status and parsed
    body of the exchange, or an ``ApiError`` when no exchange took place.

    Examples:
        .. code-block:: python

            from mexc_client import ClientConfig, Credentials, MexcSpotClient

            spot = MexcSpotClient(
                ClientConfig(credentials=Credentials("your-api-key", "your-secret"))
            )

            response = spot.ticker_price(symbol="BTCUSDT")
            if response.ok:
                print(response.status, response.result)

            print(spot.account_info(recv_window=5000))
    """

    signer_class = SpotRequestSigner
    default_base_url = DEFAULT_SPOT_API_URL

    """ Market data endpoints, can be called without credentials """

    def ping(self) -> ApiResult:
        """Test connectivity to the REST API.

        Endpoint:
            GET /api/v3/ping

        """
        return self.send_public_request("GET", "/api/v3/ping")

    def time(self) -> ApiResult:
        """Check server time.

        Endpoint:
            GET /api/v3/time

        """
        return self.send_public_request("GET", "/api/v3/time")

    def exchange_info(
        self, symbol: str | None = None, symbols: str | list[str] | None = None
    ) -> ApiResult:
        """Get trading rules and symbol information.

        Args:
            symbol: A single symbol, e.g. "BTCUSDT"
            symbols: Several symbols, as a list or a comma separated string

        Endpoint:
            GET /api/v3/exchangeInfo

        """
        if isinstance(symbols, list):
            symbols = ",".join(symbols)
        return self.send_public_request(
            "GET", "/api/v3/exchangeInfo", [("symbol", symbol), ("symbols", symbols)]
        )

    def order_book(self, symbol: str, limit: int | None = None) -> ApiResult:
        """Get the order book.

        Args:
            symbol: Trading symbol
            limit: Number of levels, default 100, max 5000

        Endpoint:
            GET /api/v3/depth

        """
        require("symbol", symbol)
        return self.send_public_request(
            "GET", "/api/v3/depth", [("symbol", symbol), ("limit", limit)]
        )

    def recent_trades(self, symbol: str, limit: int | None = None) -> ApiResult:
        """Get recent trades.

        Endpoint:
            GET /api/v3/trades

        """
        require("symbol", symbol)
        return self.send_public_request(
            "GET", "/api/v3/trades", [("symbol", symbol), ("limit", limit)]
        )

    def compressed_trades(
        self,
        symbol: str,
        limit: int | None = None,
        start_time: int | None = None,
        end_time: int | None = None,
    ) -> ApiResult:
        """Get compressed/aggregate trades.

        Args:
            symbol: Trading symbol
            limit: Default 500, max 1000
            start_time: Inclusive start, ms since epoch
            end_time: Inclusive end, ms since epoch

        Endpoint:
            GET /api/v3/aggTrades

        """
        require("symbol", symbol)
        return self.send_public_request(
            "GET",
            "/api/v3/aggTrades",
            [
                ("symbol", symbol),
                ("limit", limit),
                ("startTime", start_time),
                ("endTime", end_time),
            ],
        )

    def kline(
        self,
        symbol: str,
        interval: KlineInterval | str,
        limit: int | None = None,
        start_time: int | None = None,
        end_time: int | None = None,
    ) -> ApiResult:
        """Get kline/candlestick bars.

        Endpoint:
            GET /api/v3/klines

        """
        require("symbol", symbol)
        require("interval", interval)
        return self.send_public_request(
            "GET",
            "/api/v3/klines",
            [
                ("symbol", symbol),
                ("interval", interval),
                ("limit", limit),
                ("startTime", start_time),
                ("endTime", end_time),
            ],
        )

    def average_price(self, symbol: str) -> ApiResult:
        """Get the current average price.

        Endpoint:
            GET /api/v3/avgPrice

        """
        require("symbol", symbol)
        return self.send_public_request("GET", "/api/v3/avgPrice", [("symbol", symbol)])

    def ticker_24hr(self, symbol: str | None = None) -> ApiResult:
        """Get 24hr price change statistics; all symbols when ``symbol`` is None.

        Endpoint:
            GET /api/v3/ticker/24hr

        """
        return self.send_public_request(
            "GET", "/api/v3/ticker/24hr", [("symbol", symbol)]
        )

    def ticker_price(self, symbol: str | None = None) -> ApiResult:
        """Get the latest price; all symbols when ``symbol`` is None.

        Endpoint:
            GET /api/v3/ticker/price

        """
        return self.send_public_request(
            "GET", "/api/v3/ticker/price", [("symbol", symbol)]
        )

    def ticker_book(self, symbol: str | None = None) -> ApiResult:
        """Get the best bid/ask; all symbols when ``symbol`` is None.

        Endpoint:
            GET /api/v3/ticker/bookTicker

        """
        return self.send_public_request(
            "GET", "/api/v3/ticker/bookTicker", [("symbol", symbol)]
        )

    ### ===================================================== Account API =====================================================

    def account_info(self, recv_window: int | None = None) -> ApiResult:
        """Get balances and permissions of the account.

        Endpoint:
            GET /api/v3/account

        """
        return self.send_signed_request(
            "GET", "/api/v3/account", [("recvWindow", recv_window)]
        )

    def new_order(
        self,
        symbol: str,
        side: Side | str,
        order_type: OrderType | str,
        quantity: Decimal | str | float | None = None,
        quote_order_qty: Decimal | str | float | None = None,
        price: Decimal | str | float | None = None,
        new_client_order_id: str | None = None,
        recv_window: int | None = None,
    ) -> ApiResult:
        """Place a new order.

        Args:
            symbol: Trading symbol
            side: BUY or SELL
            order_type: Order type, e.g. LIMIT or MARKET
            quantity: Base asset quantity
            quote_order_qty: Quote asset amount, for market orders
            price: Limit price
            new_client_order_id: Client supplied order id
            recv_window: Validity window of the request in ms

        Endpoint:
            POST /api/v3/order

        """
        return self.send_signed_request(
            "POST",
            "/api/v3/order",
            self.__order_params(
                symbol,
                side,
                order_type,
                quantity,
                quote_order_qty,
                price,
                new_client_order_id,
                recv_window,
            ),
        )

    def test_order(
        self,
        symbol: str,
        side: Side | str,
        order_type: OrderType | str,
        quantity: Decimal | str | float | None = None,
        quote_order_qty: Decimal | str | float | None = None,
        price: Decimal | str | float | None = None,
        new_client_order_id: str | None = None,
        recv_window: int | None = None,
    ) -> ApiResult:
        """Validate a new order without sending it to the matching engine.

        Endpoint:
            POST /api/v3/order/test

        """
        return self.send_signed_request(
            "POST",
            "/api/v3/order/test",
            self.__order_params(
                symbol,
                side,
                order_type,
                quantity,
                quote_order_qty,
                price,
                new_client_order_id,
                recv_window,
            ),
        )

    def batch_orders(
        self, orders: list[JsonObject], recv_window: int | None = None
    ) -> ApiResult:
        """Place up to 20 orders at once.

        The order list is sent as a single minified JSON parameter.

        Args:
            orders: Order objects, e.g. ``{"symbol": ..., "side": ..., "type": ...}``
            recv_window: Validity window of the request in ms

        Endpoint:
            POST /api/v3/batchOrders

        """
        require("orders", orders)
        return self.send_signed_request(
            "POST",
            "/api/v3/batchOrders",
            [("batchOrders", orders), ("recvWindow", recv_window)],
        )

    def cancel_order(
        self,
        symbol: str,
        order_id: str | None = None,
        orig_client_order_id: str | None = None,
        recv_window: int | None = None,
    ) -> ApiResult:
        """Cancel an active order, selected by exchange or client order id.

        Endpoint:
            DELETE /api/v3/order

        """
        require("symbol", symbol)
        self.__check_order_selector(order_id, orig_client_order_id)
        return self.send_signed_request(
            "DELETE",
            "/api/v3/order",
            [
                ("symbol", symbol),
                ("orderId", order_id),
                ("origClientOrderId", orig_client_order_id),
                ("recvWindow", recv_window),
            ],
        )

    def cancel_open_orders(
        self, symbol: str, recv_window: int | None = None
    ) -> ApiResult:
        """Cancel all open orders on a symbol.

        Endpoint:
            DELETE /api/v3/openOrders

        """
        require("symbol", symbol)
        return self.send_signed_request(
            "DELETE",
            "/api/v3/openOrders",
            [("symbol", symbol), ("recvWindow", recv_window)],
        )

    def query_order(
        self,
        symbol: str,
        order_id: str | None = None,
        orig_client_order_id: str | None = None,
        recv_window: int | None = None,
    ) -> ApiResult:
        """Get the status of an order.

        Endpoint:
            GET /api/v3/order

        """
        require("symbol", symbol)
        self.__check_order_selector(order_id, orig_client_order_id)
        return self.send_signed_request(
            "GET",
            "/api/v3/order",
            [
                ("symbol", symbol),
                ("orderId", order_id),
                ("origClientOrderId", orig_client_order_id),
                ("recvWindow", recv_window),
            ],
        )

    def open_orders(self, symbol: str, recv_window: int | None = None) -> ApiResult:
        """Get all open orders on a symbol.

        Endpoint:
            GET /api/v3/openOrders

        """
        require("symbol", symbol)
        return self.send_signed_request(
            "GET",
            "/api/v3/openOrders",
            [("symbol", symbol), ("recvWindow", recv_window)],
        )

    def all_orders(
        self,
        symbol: str,
        start_time: int | None = None,
        end_time: int | None = None,
        limit: int | None = None,
        recv_window: int | None = None,
    ) -> ApiResult:
        """Get all orders of a symbol, active, cancelled or filled.

        Endpoint:
            GET /api/v3/allOrders

        """
        require("symbol", symbol)
        return self.send_signed_request(
            "GET",
            "/api/v3/allOrders",
            [
                ("symbol", symbol),
                ("startTime", start_time),
                ("endTime", end_time),
                ("limit", limit),
                ("recvWindow", recv_window),
            ],
        )

    def my_trades(
        self,
        symbol: str,
        order_id: str | None = None,
        start_time: int | None = None,
        end_time: int | None = None,
        limit: int | None = None,
        recv_window: int | None = None,
    ) -> ApiResult:
        """Get the account's trades on a symbol.

        Endpoint:
            GET /api/v3/myTrades

        """
        require("symbol", symbol)
        return self.send_signed_request(
            "GET",
            "/api/v3/myTrades",
            [
                ("symbol", symbol),
                ("orderId", order_id),
                ("startTime", start_time),
                ("endTime", end_time),
                ("limit", limit),
                ("recvWindow", recv_window),
            ],
        )

    """ Private helpers """

    def __order_params(
        self,
        symbol: str,
        side: Side | str,
        order_type: OrderType | str,
        quantity: Decimal | str | float | None,
        quote_order_qty: Decimal | str | float | None,
        price: Decimal | str | float | None,
        new_client_order_id: str | None,
        recv_window: int | None,
    ) -> list[tuple[str, ParamValue]]:
        """Validate and order the parameters of a new order.

        Raises:
            ValidationError: If a required field is missing, or a limit order
                has no price

        """
        require("symbol", symbol)
        require("side", side)
        require("order_type", order_type)
        if quantity is None and quote_order_qty is None:
            require("quantity or quote_order_qty", None)
        try:
            order_type = OrderType(order_type)
        except ValueError as e:
            raise ValidationError(f"Invalid {order_type=}") from e
        if order_type is OrderType.LIMIT:
            require("price", price)
        return [
            ("symbol", symbol),
            ("side", side),
            ("type", order_type),
            ("quantity", quantity),
            ("quoteOrderQty", quote_order_qty),
            ("price", price),
            ("newClientOrderId", new_client_order_id),
            ("recvWindow", recv_window),
        ]

    def __check_order_selector(
        self, order_id: str | None, orig_client_order_id: str | None
    ) -> None:
        """Validate that at least one order identifier is provided."""
        if order_id is None and orig_client_order_id is None:
            require("order_id or orig_client_order_id", None)
