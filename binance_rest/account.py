"""Spot account: balances, orders, cancellations and trade history."""

from __future__ import annotations

import math
import time
import uuid
from decimal import Decimal
from typing import Any, Mapping, Optional, Union

from .client import Client
from .config import SPOT_MAINNET, SPOT_TESTNET, Config
from .endpoints import Spot
from .errors import BinanceError
from .orders import OrderSide, OrderType, TimeInForce

CLIENT_ORDER_ID_PREFIX = "x-HNA2TXFJ"
_CLIENT_ORDER_ID_LENGTH = 36

Number = Union[int, float]


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


def _format_number(value: Number) -> str:
    """Render a number as plain decimal text, dropping a trailing ``.0``."""
    number = float(value)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    text = format(Decimal(repr(number)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _new_client_order_id() -> str:
    suffix_length = _CLIENT_ORDER_ID_LENGTH - len(CLIENT_ORDER_ID_PREFIX)
    return CLIENT_ORDER_ID_PREFIX + uuid.uuid4().hex[:suffix_length]


def _is_start_time_valid(start_time: int) -> bool:
    return start_time <= _now_ms()


def _signed_query(parameters: Mapping[str, str], recv_window: int) -> str:
    """Add the request window and timestamp and join the parameters in key order."""
    query = dict(parameters)
    query["recvWindow"] = str(recv_window)
    query["timestamp"] = str(_now_ms())
    return "&".join(f"{key}={value}" for key, value in sorted(query.items()))


def _order_parameters(
    symbol: str,
    side: Union[OrderSide, str],
    order_type: Union[OrderType, str],
    price: Number,
    time_in_force: Union[TimeInForce, str],
    new_client_order_id: Optional[str],
    *,
    qty: Optional[Number] = None,
    quote_order_qty: Optional[Number] = None,
    stop_price: Optional[Number] = None,
    extra: Optional[Mapping[str, Any]] = None,
) -> dict[str, str]:
    parameters = {
        "symbol": str(symbol),
        "side": str(side),
        "type": str(order_type),
    }
    if qty is not None:
        parameters["quantity"] = _format_number(qty)
    if quote_order_qty is not None:
        parameters["quoteOrderQty"] = _format_number(quote_order_qty)
    if stop_price is not None:
        parameters["stopPrice"] = _format_number(stop_price)
    if float(price) != 0.0:
        parameters["price"] = _format_number(price)
        parameters["timeInForce"] = str(time_in_force)
    parameters["newClientOrderId"] = (
        new_client_order_id if new_client_order_id is not None else _new_client_order_id()
    )
    if extra:
        parameters.update({key: str(value) for key, value in extra.items()})
    return parameters


class Account:
    """Signed spot-account operations.

    Responses are returned as the decoded JSON the exchange sends; the
    sandboxed ``test_*`` operations return ``None`` once validated.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        secret_key: Optional[str] = None,
        config: Optional[Config] = None,
    ) -> None:
        config = config if config is not None else Config()
        self.client = Client(api_key, secret_key, config.rest_api_endpoint)
        self.recv_window = config.recv_window

    @property
    def verbose(self) -> bool:
        return self.client.verbose

    @verbose.setter
    def verbose(self, value: bool) -> None:
        self.client.verbose = value

    def use_testnet(self, testnet: bool) -> None:
        """Point the client at the spot testnet or back at the main network."""
        self.client.host = SPOT_TESTNET if testnet else SPOT_MAINNET

    # Signed request helpers

    def _query(self, parameters: Optional[Mapping[str, str]] = None) -> str:
        return _signed_query(parameters or {}, self.recv_window)

    def _place(self, parameters: Mapping[str, str]) -> Any:
        return self.client.post_signed(Spot.ORDER, self._query(parameters))

    def _place_test(self, parameters: Mapping[str, str]) -> None:
        self.client.post_signed(Spot.ORDER_TEST, self._query(parameters))

    @staticmethod
    def _simple_order(
        symbol: str,
        qty: Number,
        price: Number,
        side: OrderSide,
        order_type: OrderType,
        stop_price: Optional[Number] = None,
        time_in_force: Union[TimeInForce, str] = TimeInForce.GTC,
    ) -> dict[str, str]:
        return _order_parameters(
            symbol, side, order_type, price, time_in_force, None,
            qty=qty, stop_price=stop_price,
        )

    @staticmethod
    def _quote_order(symbol: str, quote_order_qty: Number, side: OrderSide) -> dict[str, str]:
        return _order_parameters(
            symbol, side, OrderType.MARKET, 0.0, TimeInForce.GTC, None,
            quote_order_qty=quote_order_qty,
        )

    # Account state

    def get_account(self) -> Any:
        """Return the account information, balances included."""
        return self.client.get_signed(Spot.ACCOUNT, self._query())

    def get_balance(self, asset: str) -> Any:
        """Return the balance entry of one asset."""
        account = self.get_account()
        for balance in account.get("balances", []):
            if balance.get("asset") == asset:
                return balance
        raise BinanceError("Asset not found")

    def get_open_orders(self, symbol: str) -> Any:
        """Return the open orders of one symbol."""
        return self.client.get_signed(Spot.OPEN_ORDERS, self._query({"symbol": symbol}))

    def get_all_open_orders(self) -> Any:
        """Return every open order."""
        return self.client.get_signed(Spot.OPEN_ORDERS, self._query())

    def cancel_all_open_orders(self, symbol: str) -> Any:
        """Cancel every open order of one symbol."""
        return self.client.delete_signed(Spot.OPEN_ORDERS, self._query({"symbol": symbol}))

    def order_status(self, symbol: str, order_id: int) -> Any:
        """Return the state of one order."""
        query = self._query({"symbol": symbol, "orderId": str(order_id)})
        return self.client.get_signed(Spot.ORDER, query)

    def test_order_status(self, symbol: str, order_id: int) -> None:
        """Validate an order status request without touching the matching engine."""
        query = self._query({"symbol": symbol, "orderId": str(order_id)})
        self.client.get_signed(Spot.ORDER_TEST, query)

    # Limit orders

    def limit_buy(self, symbol: str, qty: Number, price: Number) -> Any:
        return self._place(self._simple_order(symbol, qty, price, OrderSide.BUY, OrderType.LIMIT))

    def test_limit_buy(self, symbol: str, qty: Number, price: Number) -> None:
        self._place_test(self._simple_order(symbol, qty, price, OrderSide.BUY, OrderType.LIMIT))

    def limit_sell(self, symbol: str, qty: Number, price: Number) -> Any:
        return self._place(self._simple_order(symbol, qty, price, OrderSide.SELL, OrderType.LIMIT))

    def test_limit_sell(self, symbol: str, qty: Number, price: Number) -> None:
        self._place_test(self._simple_order(symbol, qty, price, OrderSide.SELL, OrderType.LIMIT))

    # Market orders

    def market_buy(self, symbol: str, qty: Number) -> Any:
        return self._place(self._simple_order(symbol, qty, 0.0, OrderSide.BUY, OrderType.MARKET))

    def test_market_buy(self, symbol: str, qty: Number) -> None:
        self._place_test(self._simple_order(symbol, qty, 0.0, OrderSide.BUY, OrderType.MARKET))

    def market_buy_using_quote_quantity(self, symbol: str, quote_order_qty: Number) -> Any:
        return self._place(self._quote_order(symbol, quote_order_qty, OrderSide.BUY))

    def test_market_buy_using_quote_quantity(
        self, symbol: str, quote_order_qty: Number
    ) -> None:
        self._place_test(self._quote_order(symbol, quote_order_qty, OrderSide.BUY))

    def market_sell(self, symbol: str, qty: Number) -> Any:
        return self._place(self._simple_order(symbol, qty, 0.0, OrderSide.SELL, OrderType.MARKET))

    def test_market_sell(self, symbol: str, qty: Number) -> None:
        self._place_test(self._simple_order(symbol, qty, 0.0, OrderSide.SELL, OrderType.MARKET))

    def market_sell_using_quote_quantity(self, symbol: str, quote_order_qty: Number) -> Any:
        return self._place(self._quote_order(symbol, quote_order_qty, OrderSide.SELL))

    def test_market_sell_using_quote_quantity(
        self, symbol: str, quote_order_qty: Number
    ) -> None:
        self._place_test(self._quote_order(symbol, quote_order_qty, OrderSide.SELL))

    # Stop-limit orders

    def stop_limit_buy_order(
        self, symbol: str, qty: Number, price: Number, stop_price: Number,
        time_in_force: TimeInForce,
    ) -> Any:
        """Place a stop-loss-limit buy order."""
        return self._place(self._simple_order(
            symbol, qty, price, OrderSide.BUY, OrderType.STOP_LOSS_LIMIT,
            stop_price, time_in_force,
        ))

    def test_stop_limit_buy_order(
        self, symbol: str, qty: Number, price: Number, stop_price: Number,
        time_in_force: TimeInForce,
    ) -> None:
        """Validate a stop-loss-limit buy order without placing it."""
        self._place_test(self._simple_order(
            symbol, qty, price, OrderSide.BUY, OrderType.STOP_LOSS_LIMIT,
            stop_price, time_in_force,
        ))

    def stop_limit_sell_order(
        self, symbol: str, qty: Number, price: Number, stop_price: Number,
        time_in_force: TimeInForce,
    ) -> Any:
        """Place a stop-loss-limit sell order."""
        return self._place(self._simple_order(
            symbol, qty, price, OrderSide.SELL, OrderType.STOP_LOSS_LIMIT,
            stop_price, time_in_force,
        ))

    def test_stop_limit_sell_order(
        self, symbol: str, qty: Number, price: Number, stop_price: Number,
        time_in_force: TimeInForce,
    ) -> None:
        """Validate a stop-loss-limit sell order without placing it."""
        self._place_test(self._simple_order(
            symbol, qty, price, OrderSide.SELL, OrderType.STOP_LOSS_LIMIT,
            stop_price, time_in_force,
        ))

    # Custom orders

    def custom_order(
        self, symbol: str, qty: Number, price: Number, stop_price: Optional[Number],
        order_side: OrderSide, order_type: OrderType, time_in_force: TimeInForce,
        new_client_order_id: Optional[str],
    ) -> Any:
        """Place an order with every field given by the caller."""
        return self.custom_order_with_params(
            symbol, qty, price, stop_price, order_side, order_type,
            time_in_force, new_client_order_id, {},
        )

    def custom_order_with_params(
        self, symbol: str, qty: Number, price: Number, stop_price: Optional[Number],
        order_side: OrderSide, order_type: OrderType, time_in_force: TimeInForce,
        new_client_order_id: Optional[str], request_params: Mapping[str, Any],
    ) -> Any:
        """Place a custom order; ``request_params`` add or override parameters."""
        return self._place(_order_parameters(
            symbol, order_side, order_type, price, time_in_force, new_client_order_id,
            qty=qty, stop_price=stop_price, extra=request_params,
        ))

    def test_custom_order(
        self, symbol: str, qty: Number, price: Number, stop_price: Optional[Number],
        order_side: OrderSide, order_type: OrderType, time_in_force: TimeInForce,
        new_client_order_id: Optional[str],
    ) -> None:
        """Validate a custom order without placing it."""
        self._place_test(_order_parameters(
            symbol, order_side, order_type, price, time_in_force, new_client_order_id,
            qty=qty, stop_price=stop_price,
        ))

    # Cancellation

    def cancel_order(self, symbol: str, order_id: int) -> Any:
        query = self._query({"symbol": symbol, "orderId": str(order_id)})
        return self.client.delete_signed(Spot.ORDER, query)

    def cancel_order_with_client_id(self, symbol: str, orig_client_order_id: str) -> Any:
        query = self._query({"symbol": symbol, "origClientOrderId": orig_client_order_id})
        return self.client.delete_signed(Spot.ORDER, query)

    def test_cancel_order(self, symbol: str, order_id: int) -> None:
        query = self._query({"symbol": symbol, "orderId": str(order_id)})
        self.client.delete_signed(Spot.ORDER_TEST, query)

    # Trade history

    def trade_history(self, symbol: str) -> Any:
        """Return the account's trades of one symbol."""
        return self.client.get_signed(Spot.MY_TRADES, self._query({"symbol": symbol}))

    def trade_history_from(self, symbol: str, start_time: int) -> Any:
        """Return the trades of one symbol made at or after ``start_time`` (ms)."""
        if not _is_start_time_valid(start_time):
            raise BinanceError("Start time should be less than the current time")
        query = self._query({"symbol": symbol, "startTime": str(start_time)})
        return self.client.get_signed(Spot.MY_TRADES, query)

    def trade_history_from_to(self, symbol: str, start_time: int, end_time: int) -> list:
        """Return the trades of one symbol made between two times (ms)."""
        if end_time <= start_time:
            raise BinanceError("End time should be greater than start time")
        if not _is_start_time_valid(start_time):
            raise BinanceError("Start time should be less than the current time")
        trades = self.trade_history_from(symbol, start_time)
        return [trade for trade in trades if trade["time"] <= end_time]