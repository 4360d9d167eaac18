# binance_rest

A small, synchronous client for the Binance spot REST API. It signs requests
with your secret key (HMAC-SHA256), sends them with `requests`, returns the
decoded JSON the exchange answers with, and turns error responses into Python
exceptions.

## Installation

```
pip install binance_rest
```

To run the test suite:

```
pip install "binance_rest[test]"
pytest
```

## Configuration

`binance_rest.config.Config` is a frozen dataclass holding the REST and
websocket endpoints for the spot and futures markets and the `recv_window`
(in milliseconds) sent with every signed request. The defaults point at the
production endpoints with a receive window of 5000 ms. `Config.testnet()`
returns a configuration whose endpoints all point at the test network.
Derive changed copies with `dataclasses.replace`:

```python
from dataclasses import replace

from binance_rest.config import Config

config = replace(Config.testnet(), recv_window=1234)
```

The module also exposes the host names as constants (`SPOT_MAINNET`,
`SPOT_TESTNET`, `FUTURES_MAINNET`, `FUTURES_TESTNET` and the websocket
counterparts).

## Account data and orders

`binance_rest.account.Account` performs signed spot-account operations. Each
call returns the exchange's decoded JSON (dictionaries and lists).

```python
from binance_rest.account import Account
from binance_rest.config import Config
from binance_rest.orders import OrderSide, OrderType, TimeInForce

account = Account(api_key="placeholder", secret_key="secret", config=Config.testnet())

print(account.get_account())
print(account.get_balance("BTC"))
print(account.get_open_orders("LTCBTC"))
print(account.get_all_open_orders())

# Limit and market orders
account.limit_buy("LTCBTC", 1, 0.1)
account.limit_sell("LTCBTC", 1, 0.1)
account.market_buy("LTCBTC", 1)
account.market_sell("LTCBTC", 1)
account.market_buy_using_quote_quantity("BNBBTC", 0.002)
account.market_sell_using_quote_quantity("BNBBTC", 0.002)

# Stop-loss limit orders
account.stop_limit_buy_order("LTCBTC", 1, 0.1, 0.09, TimeInForce.GTC)
account.stop_limit_sell_order("LTCBTC", 1, 0.1, 0.09, TimeInForce.GTC)

# Fully custom order; the last mapping adds or overrides request parameters
account.custom_order_with_params(
    "BNBUSDT", 0.1, 300.0, None,
    OrderSide.BUY, OrderType.LIMIT, TimeInForce.GTC, None,
    {"customParam": "customValue"},
)

# Querying and cancelling
account.order_status("LTCBTC", 1)
account.cancel_order("LTCBTC", 1)
account.cancel_order_with_client_id("LTCBTC", "myOrder1")
account.cancel_all_open_orders("LTCBTC")

# Trade history, optionally bounded in time (milliseconds since the epoch)
account.trade_history("LTCBTC")
account.trade_history_from("LTCBTC", 1499865549590)
account.trade_history_from_to("LTCBTC", 1499865549590, 1499865600000)
```

A price of zero leaves `price` and `timeInForce` out of the request, as market
orders need. When no client order id is given, one is generated for each new
order (prefixed `x-HNA2TXFJ`).

Every order method, plus `order_status` and `cancel_order`, has a `test_` twin
(`test_limit_buy`, `test_market_sell`, `test_custom_order`,
`test_order_status`, `test_cancel_order`, ...). These go to the test endpoint,
where the request is validated but never reaches the matching engine; they
return `None` on success.

`trade_history_from_to` fetches trades from the start time and keeps those at
or before the end time. It raises `BinanceError` if the end time is not after
the start time or the start time lies in the future.

`account.use_testnet(True)` switches an existing account to the spot test
network; `account.use_testnet(False)` switches it back. Setting
`account.verbose = True` prints each request URL and headers and each response.

## Order enums

`binance_rest.orders` defines `OrderType` (`LIMIT`, `MARKET`,
`STOP_LOSS_LIMIT`), `OrderSide` (`BUY`, `SELL`) and `TimeInForce` (`GTC`,
`IOC`, `FOK`). They are string enums whose value is the text sent to the
exchange. Each has a `from_int` class method mapping 1, 2, 3 to its members in
that order and any other number to `None`.

## Errors

`binance_rest.errors` holds the exceptions. Every error the client raises is a
`BinanceError`. A `400 Bad Request` answer raises its subclass
`BinanceContentError`, carrying the exchange's error `code` and `msg`. Server
errors, authorisation failures, other unexpected status codes, network
failures, undecodable responses, an unknown asset in `get_balance` and
invalid time ranges raise `BinanceError` itself.

```python
from binance_rest.errors import BinanceContentError, BinanceError

try:
    account.limit_buy("LTCBTC", 1, 0.1)
except BinanceContentError as error:
    print(error.code, error.msg)
except BinanceError as error:
    print(error)
```

## Lower-level access

`binance_rest.client.Client(api_key, secret_key, host)` performs the HTTP
work. `get_signed`, `post_signed` and `delete_signed` take an endpoint and a
query string and append an HMAC-SHA256 signature; `get` sends an unsigned
query; `post`, `put` and `delete` send requests carrying the API key, the last
two with a `listenKey` body. Endpoints may be given as plain paths or as
members of the `Spot`, `Sapi` and `Futures` enums in `binance_rest.endpoints`.

## What this package does not do

Only spot-account operations have methods of their own. Market data, general
exchange information, savings, futures trading and user data streams have
endpoint paths in `binance_rest.endpoints` but no wrappers; call them through
`Client` and handle the returned JSON yourself. There is no websocket support
and no command-line tool. Responses are plain decoded JSON, not typed models.