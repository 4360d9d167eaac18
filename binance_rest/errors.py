"""Exceptions raised by the API client."""

from __future__ import annotations


class BinanceError(Exception):
    """Base class for every error the client raises."""


class BinanceContentError(BinanceError):
    """An error reported by the exchange in a response body."""

    def __init__(self, code: int, msg: str) -> None:
        super().__init__(f"{code}: {msg}")
        self.code = code
        self.msg = msg


class KlineValueMissingError(BinanceError):
    """A kline row lacks the value expected at a position."""

    def __init__(self, index: int, name: str) -> None:
        super().__init__(f"{name} at {index} is missing")
        self.index = index
        self.name = name