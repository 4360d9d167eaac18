"""Signed client for the Binance spot REST API: configuration, endpoints, orders and account operations."""

__version__ = "0.21.1"