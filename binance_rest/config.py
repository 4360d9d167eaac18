"""Endpoint and request-window configuration."""

from __future__ import annotations

from dataclasses import dataclass, replace

SPOT_MAINNET = "https://api.binance.com"
SPOT_TESTNET = "https://testnet.binance.vision"

SPOT_WS_MAINNET = "wss://stream.binance.com/ws"
SPOT_WS_TESTNET = "wss://testnet.binance.vision/ws"

FUTURES_MAINNET = "https://fapi.binance.com"
FUTURES_TESTNET = "https://testnet.binancefuture.com"

FUTURES_WS_MAINNET = "wss://fstream.binance.com/ws"
FUTURES_WS_TESTNET = "wss://fstream.binancefuture.com/ws"

DEFAULT_RECV_WINDOW = 5000


@dataclass(frozen=True)
class Config:
    """Hosts for the REST and websocket APIs and the signed-request window.

    Instances are immutable; derive a changed copy with ``dataclasses.replace``.
    """

    rest_api_endpoint: str = SPOT_MAINNET
    ws_endpoint: str = SPOT_WS_MAINNET
    futures_rest_api_endpoint: str = FUTURES_MAINNET
    futures_ws_endpoint: str = FUTURES_WS_MAINNET
    recv_window: int = DEFAULT_RECV_WINDOW

    @classmethod
    def testnet(cls) -> Config:
        """Return a configuration that points every endpoint at the testnet."""
        return replace(
            cls(),
            rest_api_endpoint=SPOT_TESTNET,
            ws_endpoint=SPOT_WS_TESTNET,
            futures_rest_api_endpoint=FUTURES_TESTNET,
            futures_ws_endpoint=FUTURES_WS_TESTNET,
        )