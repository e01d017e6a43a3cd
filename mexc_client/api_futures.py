"""HTTP API client for the MEXC futures (contract) v1 API.

This module provides the MexcFuturesClient class: public market endpoints and
signed account/order endpoints.
"""

from decimal import Decimal
from urllib.parse import quote

from mexc_client.auth import FuturesRequestSigner
from mexc_client.client import BaseApiClient
from mexc_client.helpers import DEFAULT_FUTURES_API_URL, require
from mexc_client.types import (
    ApiResult,
    FuturesInterval,
    FuturesOrderType,
    FuturesSide,
    JsonObject,
    OpenType,
)


def _segment(value: object) -> str:
    """Percent-encode a value used as a path segment."""
    return quote(str(value), safe="")


def _compact(body: dict[str, object]) -> JsonObject:
    """Drop absent fields from a request body, keeping field order."""
    return {key: value for key, value in body.items() if value is not None}  # type: ignore[misc]


class MexcFuturesClient(BaseApiClient):
    """MEXC futures v1 API client.

    Every method returns an ``ApiResponse`` carrying the HTTP status and parsed
    body of the exchange, or an ``ApiError`` when no exchange took place.

    Examples:
        .. code-block:: python

            from mexc_client import ClientConfig, Credentials, MexcFuturesClient

            futures = MexcFuturesClient(
                ClientConfig(credentials=Credentials("your-api-key", "your-secret"))
            )

            print(futures.get_fair_price("BTC_USDT").result)
            print(futures.get_assets())
    """

    signer_class = FuturesRequestSigner
    default_base_url = DEFAULT_FUTURES_API_URL

    """ Market endpoints, can be called without credentials """

    def ping(self) -> ApiResult:
        """Get the server time.

        Endpoint:
            GET /api/v1/contract/ping

        """
        return self.send_public_request("GET", "/api/v1/contract/ping")

    def get_contract_info(self, symbol: str | None = None) -> ApiResult:
        """Get contract information, for every contract when ``symbol`` is None.

        Endpoint:
            GET /api/v1/contract/detail

        """
        return self.send_public_request(
            "GET", "/api/v1/contract/detail", [("symbol", symbol)]
        )

    def get_transferable_currencies(self) -> ApiResult:
        """Get the currencies that can be transferred.

        Endpoint:
            GET /api/v1/contract/support_currencies

        """
        return self.send_public_request("GET", "/api/v1/contract/support_currencies")

    def get_depth(self, symbol: str, limit: int | None = None) -> ApiResult:
        """Get the contract's depth information.

        Endpoint:
            GET /api/v1/contract/depth/{symbol}

        """
        require("symbol", symbol)
        return self.send_public_request(
            "GET", f"/api/v1/contract/depth/{_segment(symbol)}", [("limit", limit)]
        )

    def get_depth_snapshot(self, symbol: str, limit: int | None = None) -> ApiResult:
        """Get a snapshot of the latest ``limit`` depth updates.

        Endpoint:
            GET /api/v1/contract/depth_commits/{symbol}/{limit}

        """
        require("symbol", symbol)
        path = f"/api/v1/contract/depth_commits/{_segment(symbol)}"
        if limit is not None:
            path = f"{path}/{_segment(limit)}"
        return self.send_public_request("GET", path)

    def get_index_price(self, symbol: str) -> ApiResult:
        """Get the contract index price.

        Endpoint:
            GET /api/v1/contract/index_price/{symbol}

        """
        require("symbol", symbol)
        return self.send_public_request(
            "GET", f"/api/v1/contract/index_price/{_segment(symbol)}"
        )

    def get_fair_price(self, symbol: str) -> ApiResult:
        """Get the contract fair price.

        Endpoint:
            GET /api/v1/contract/fair_price/{symbol}

        """
        require("symbol", symbol)
        return self.send_public_request(
            "GET", f"/api/v1/contract/fair_price/{_segment(symbol)}"
        )

    def get_funding_rate(self, symbol: str) -> ApiResult:
        """Get the contract funding rate.

        Endpoint:
            GET /api/v1/contract/funding_rate/{symbol}

        """
        require("symbol", symbol)
        return self.send_public_request(
            "GET", f"/api/v1/contract/funding_rate/{_segment(symbol)}"
        )

    def get_kline(
        self,
        symbol: str,
        interval: FuturesInterval | str,
        start: int | None = None,
        end: int | None = None,
    ) -> ApiResult:
        """Get kline data.

        Args:
            symbol: Contract symbol, e.g. "BTC_USDT"
            interval: Kline interval, e.g. FuturesInterval.Min1
            start: Start time in seconds
            end: End time in seconds

        Endpoint:
            GET /api/v1/contract/kline/{symbol}

        """
        return self.__kline("/api/v1/contract/kline", symbol, interval, start, end)

    def get_index_kline(
        self,
        symbol: str,
        interval: FuturesInterval | str,
        start: int | None = None,
        end: int | None = None,
    ) -> ApiResult:
        """Get kline data of the index price.

        Endpoint:
            GET /api/v1/contract/kline/index_price/{symbol}

        """
        return self.__kline(
            "/api/v1/contract/kline/index_price", symbol, interval, start, end
        )

    def get_fair_price_kline(
        self,
        symbol: str,
        interval: FuturesInterval | str,
        start: int | None = None,
        end: int | None = None,
    ) -> ApiResult:
        """Get kline data of the fair price.

        Endpoint:
            GET /api/v1/contract/kline/fair_price/{symbol}

        """
        return self.__kline(
            "/api/v1/contract/kline/fair_price", symbol, interval, start, end
        )

    def get_trades(self, symbol: str, limit: int | None = None) -> ApiResult:
        """Get contract transaction data.

        Endpoint:
            GET /api/v1/contract/deals/{symbol}

        """
        require("symbol", symbol)
        return self.send_public_request(
            "GET", f"/api/v1/contract/deals/{_segment(symbol)}", [("limit", limit)]
        )

    def get_trend(self, symbol: str | None = None) -> ApiResult:
        """Get contract trend (ticker) data.

        Endpoint:
            GET /api/v1/contract/ticker

        """
        return self.send_public_request(
            "GET", "/api/v1/contract/ticker", [("symbol", symbol)]
        )

    def get_risk_reserve_amount(self) -> ApiResult:
        """Get the risk fund balance of all contracts.

        Endpoint:
            GET /api/v1/contract/risk_reverse

        """
        return self.send_public_request("GET", "/api/v1/contract/risk_reverse")

    def get_risk_reserve_amount_history(
        self, symbol: str, page_num: int | None = None, page_size: int | None = None
    ) -> ApiResult:
        """Get the risk fund balance history of a contract.

        Endpoint:
            GET /api/v1/contract/risk_reverse/history

        """
        require("symbol", symbol)
        return self.send_public_request(
            "GET",
            "/api/v1/contract/risk_reverse/history",
            [("symbol", symbol), ("page_num", page_num), ("page_size", page_size)],
        )

    def get_funding_rate_history(
        self, symbol: str, page_num: int | None = None, page_size: int | None = None
    ) -> ApiResult:
        """Get the funding rate history of a contract.

        Endpoint:
            GET /api/v1/contract/funding_rate/history

        """
        require("symbol", symbol)
        return self.send_public_request(
            "GET",
            "/api/v1/contract/funding_rate/history",
            [("symbol", symbol), ("page_num", page_num), ("page_size", page_size)],
        )

    ### ===================================================== Account API =====================================================

    def get_assets(self) -> ApiResult:
        """Get all account assets.

        Endpoint:
            GET /api/v1/private/account/assets

        """
        return self.send_signed_request("GET", "/api/v1/private/account/assets")

    def get_asset(self, currency: str) -> ApiResult:
        """Get the account asset of a single currency.

        Endpoint:
            GET /api/v1/private/account/asset/{currency}

        """
        require("currency", currency)
        return self.send_signed_request(
            "GET", f"/api/v1/private/account/asset/{_segment(currency)}"
        )

    def get_open_positions(self, symbol: str | None = None) -> ApiResult:
        """Get open positions, for every contract when ``symbol`` is None.

        Endpoint:
            GET /api/v1/private/position/open_positions

        """
        return self.send_signed_request(
            "GET", "/api/v1/private/position/open_positions", [("symbol", symbol)]
        )

    def get_open_orders(
        self,
        symbol: str | None = None,
        page_num: int | None = None,
        page_size: int | None = None,
    ) -> ApiResult:
        """Get open orders, for every contract when ``symbol`` is None.

        Endpoint:
            GET /api/v1/private/order/list/open_orders/{symbol}

        """
        path = "/api/v1/private/order/list/open_orders"
        if symbol:
            path = f"{path}/{_segment(symbol)}"
        return self.send_signed_request(
            "GET", path, [("page_num", page_num), ("page_size", page_size)]
        )

    def get_order(self, order_id: int | str) -> ApiResult:
        """Get an order by its exchange order id.

        Endpoint:
            GET /api/v1/private/order/get/{order_id}

        """
        require("order_id", order_id)
        return self.send_signed_request(
            "GET", f"/api/v1/private/order/get/{_segment(order_id)}"
        )

    def place_order(
        self,
        symbol: str,
        price: Decimal | str | float,
        vol: Decimal | str | float,
        side: FuturesSide | int,
        order_type: FuturesOrderType | int,
        open_type: OpenType | int,
        leverage: int | None = None,
        position_id: int | None = None,
        external_oid: str | None = None,
        stop_loss_price: Decimal | str | float | None = None,
        take_profit_price: Decimal | str | float | None = None,
    ) -> ApiResult:
        """Place an order.

        Args:
            symbol: Contract symbol, e.g. "BTC_USDT"
            price: Order price
            vol: Order volume in contracts
            side: Direction, e.g. FuturesSide.OPEN_LONG
            order_type: Order type, e.g. FuturesOrderType.LIMIT
            open_type: Margin mode, ISOLATED or CROSS
            leverage: Leverage, required for isolated margin
            position_id: Position to close, recommended when closing
            external_oid: Client supplied order id
            stop_loss_price: Stop-loss price
            take_profit_price: Take-profit price

        Endpoint:
            POST /api/v1/private/order/submit

        """
        require("symbol", symbol)
        require("price", price)
        require("vol", vol)
        require("side", side)
        require("order_type", order_type)
        require("open_type", open_type)
        body = _compact(
            {
                "symbol": symbol,
                "price": price,
                "vol": vol,
                "leverage": leverage,
                "side": side,
                "type": order_type,
                "openType": open_type,
                "positionId": position_id,
                "externalOid": external_oid,
                "stopLossPrice": stop_loss_price,
                "takeProfitPrice": take_profit_price,
            }
        )
        return self.send_signed_request(
            "POST", "/api/v1/private/order/submit", body=body
        )

    def cancel_orders(self, order_ids: list[int | str]) -> ApiResult:
        """Cancel up to 50 orders by exchange order id.

        Endpoint:
            POST /api/v1/private/order/cancel

        """
        require("order_ids", order_ids)
        return self.send_signed_request(
            "POST", "/api/v1/private/order/cancel", body=list(order_ids)
        )

    def cancel_all_orders(self, symbol: str | None = None) -> ApiResult:
        """Cancel all open orders, of one contract when ``symbol`` is given.

        Endpoint:
            POST /api/v1/private/order/cancel_all

        """
        return self.send_signed_request(
            "POST", "/api/v1/private/order/cancel_all", body=_compact({"symbol": symbol})
        )

    def change_leverage(
        self,
        leverage: int,
        position_id: int | None = None,
        open_type: OpenType | int | None = None,
        symbol: str | None = None,
        position_type: int | None = None,
    ) -> ApiResult:
        """Change the leverage of a position.

        Either ``position_id`` is given, or ``open_type``, ``symbol`` and
        ``position_type`` (1 long, 2 short) select the position.

        Endpoint:
            POST /api/v1/private/position/change_leverage

        """
        require("leverage", leverage)
        if position_id is None:
            require("open_type", open_type)
            require("symbol", symbol)
            require("position_type", position_type)
        body = _compact(
            {
                "positionId": position_id,
                "leverage": leverage,
                "openType": open_type,
                "symbol": symbol,
                "positionType": position_type,
            }
        )
        return self.send_signed_request(
            "POST", "/api/v1/private/position/change_leverage", body=body
        )

    """ Private helpers """

    def __kline(
        self,
        prefix: str,
        symbol: str,
        interval: FuturesInterval | str,
        start: int | None,
        end: int | None,
    ) -> ApiResult:
        require("symbol", symbol)
        require("interval", interval)
        return self.send_public_request(
            "GET",
            f"{prefix}/{_segment(symbol)}",
            [("interval", interval), ("start", start), ("end", end)],
        )
