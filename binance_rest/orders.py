"""Order kinds, sides and time-in-force rules for spot orders."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class _WireEnum(str, Enum):
    def __str__(self) -> str:
        return self.value

    def __format__(self, format_spec: str) -> str:
        return format(self.value, format_spec)


class OrderType(_WireEnum):
    """How an order is priced."""

    LIMIT = "LIMIT"
    MARKET = "MARKET"
    STOP_LOSS_LIMIT = "STOP_LOSS_LIMIT"

    @classmethod
    def from_int(cls, value: int) -> Optional[OrderType]:
        """Map 1, 2, 3 to limit, market, stop-loss-limit; anything else to None."""
        return _ORDER_TYPES.get(value)


class OrderSide(_WireEnum):
    """Whether an order buys or sells."""

    BUY = "BUY"
    SELL = "SELL"

    @classmethod
    def from_int(cls, value: int) -> Optional[OrderSide]:
        """Map 1 to buy and 2 to sell; anything else to None."""
        return _ORDER_SIDES.get(value)


class TimeInForce(_WireEnum):
    """How long an order stays active."""

    GTC = "GTC"
    IOC = "IOC"
    FOK = "FOK"

    @classmethod
    def from_int(cls, value: int) -> Optional[TimeInForce]:
        """Map 1, 2, 3 to GTC, IOC, FOK; anything else to None."""
        return _TIMES_IN_FORCE.get(value)


_ORDER_TYPES = {1: OrderType.LIMIT, 2: OrderType.MARKET, 3: OrderType.STOP_LOSS_LIMIT}
_ORDER_SIDES = {1: OrderSide.BUY, 2: OrderSide.SELL}
_TIMES_IN_FORCE = {1: TimeInForce.GTC, 2: TimeInForce.IOC, 3: TimeInForce.FOK}