"""REST endpoint paths for the spot, savings and futures APIs."""

from __future__ import annotations

from enum import Enum


class _Path(str, Enum):
    def __str__(self) -> str:
        return self.value

    def __format__(self, format_spec: str) -> str:
        return format(self.value, format_spec)


class Spot(_Path):
    """Spot API paths; the test order path validates without matching."""

    PING = "/api/v3/ping"
    TIME = "/api/v3/time"
    EXCHANGE_INFO = "/api/v3/exchangeInfo"
    DEPTH = "/api/v3/depth"
    TRADES = "/api/v3/trades"
    HISTORICAL_TRADES = "/api/v3/historicalTrades"
    AGG_TRADES = "/api/v3/aggTrades"
    KLINES = "/api/v3/klines"
    AVG_PRICE = "/api/v3/avgPrice"
    TICKER_24HR = "/api/v3/ticker/24hr"
    PRICE = "/api/v3/ticker/price"
    BOOK_TICKER = "/api/v3/ticker/bookTicker"
    ORDER = "/api/v3/order"
    ORDER_TEST = "/api/v3/order/test"
    OPEN_ORDERS = "/api/v3/openOrders"
    ALL_ORDERS = "/api/v3/allOrders"
    OCO = "/api/v3/order/oco"
    ORDER_LIST = "/api/v3/orderList"
    ALL_ORDER_LIST = "/api/v3/allOrderList"
    OPEN_ORDER_LIST = "/api/v3/openOrderList"
    ACCOUNT = "/api/v3/account"
    MY_TRADES = "/api/v3/myTrades"
    USER_DATA_STREAM = "/api/v3/userDataStream"


class Sapi(_Path):
    """Savings and wallet API paths."""

    ALL_COINS = "/sapi/v1/capital/config/getall"
    ASSET_DETAIL = "/sapi/v1/asset/assetDetail"
    DEPOSIT_ADDRESS = "/sapi/v1/capital/deposit/address"
    SPOT_FUTURES_TRANSFER = "/sapi/v1/futures/transfer"


class Futures(_Path):
    """USD-M futures API paths."""

    PING = "/fapi/v1/ping"
    TIME = "/fapi/v1/time"
    EXCHANGE_INFO = "/fapi/v1/exchangeInfo"
    DEPTH = "/fapi/v1/depth"
    TRADES = "/fapi/v1/trades"
    HISTORICAL_TRADES = "/fapi/v1/historicalTrades"
    AGG_TRADES = "/fapi/v1/aggTrades"
    KLINES = "/fapi/v1/klines"
    CONTINUOUS_KLINES = "/fapi/v1/continuousKlines"
    INDEX_PRICE_KLINES = "/fapi/v1/indexPriceKlines"
    MARK_PRICE_KLINES = "/fapi/v1/markPriceKlines"
    PREMIUM_INDEX = "/fapi/v1/premiumIndex"
    FUNDING_RATE = "/fapi/v1/fundingRate"
    TICKER_24HR = "/fapi/v1/ticker/24hr"
    TICKER_PRICE = "/fapi/v1/ticker/price"
    BOOK_TICKER = "/fapi/v1/ticker/bookTicker"
    ALL_FORCE_ORDERS = "/fapi/v1/allForceOrders"
    ALL_OPEN_ORDERS = "/fapi/v1/allOpenOrders"
    ALL_ORDERS = "/fapi/v1/allOrders"
    USER_TRADES = "/fapi/v1/userTrades"
    ORDER = "/fapi/v1/order"
    POSITION_RISK = "/fapi/v2/positionRisk"
    BALANCE = "/fapi/v2/balance"
    POSITION_SIDE = "/fapi/v1/positionSide/dual"
    OPEN_INTEREST = "/fapi/v1/openInterest"
    OPEN_INTEREST_HIST = "/futures/data/openInterestHist"
    TOP_LONG_SHORT_ACCOUNT_RATIO = "/futures/data/topLongShortAccountRatio"
    TOP_LONG_SHORT_POSITION_RATIO = "/futures/data/topLongShortPositionRatio"
    GLOBAL_LONG_SHORT_ACCOUNT_RATIO = "/futures/data/globalLongShortAccountRatio"
    TAKER_LONG_SHORT_RATIO = "/futures/data/takerlongshortRatio"
    LVT_KLINES = "/fapi/v1/lvtKlines"
    INDEX_INFO = "/fapi/v1/indexInfo"
    CHANGE_INITIAL_LEVERAGE = "/fapi/v1/leverage"
    MARGIN_TYPE = "/fapi/v1/marginType"
    POSITION_MARGIN = "/fapi/v1/positionMargin"
    ACCOUNT = "/fapi/v2/account"
    OPEN_ORDERS = "/fapi/v1/openOrders"
    USER_DATA_STREAM = "/fapi/v1/listenKey"
    INCOME = "/fapi/v1/income"