"""Blocking HTTP client that signs and sends requests to the exchange."""

from __future__ import annotations

import hashlib
import hmac
import json
from enum import Enum
from typing import Any, Optional, Union

import requests

from .errors import BinanceContentError, BinanceError

USER_AGENT = "binance_rest"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

_STATUS_MESSAGES = {
    500: "Internal Server Error",
    503: "Service Unavailable",
    401: "Unauthorized",
}

Endpoint = Union[str, Enum]


def _path(endpoint: Endpoint) -> str:
    return str(endpoint.value) if isinstance(endpoint, Enum) else str(endpoint)


def _is_valid_header_value(value: str) -> bool:
    return all(char == "\t" or 32 <= ord(char) < 127 for char in value)


class Client:
    """Sends public and signed requests to one API host.

    ``host`` and ``verbose`` are plain attributes and may be changed at any time.
    """

    def __init__(
        self,
        api_key: Optional[str],
        secret_key: Optional[str],
        host: str,
    ) -> None:
        self._api_key = api_key or ""
        self._secret_key = secret_key or ""
        self.host = host
        self.verbose = False
        self._session = requests.Session()

    def get_signed(self, endpoint: Endpoint, request: Optional[str] = None) -> Any:
        """Send a signed GET request and return the decoded JSON body."""
        url = self._sign_request(endpoint, request)
        headers = self._build_headers(content_type=True)
        self._log_request(url, headers)
        return self._send("GET", url, headers)

    def post_signed(self, endpoint: Endpoint, request: str) -> Any:
        """Send a signed POST request and return the decoded JSON body."""
        url = self._sign_request(endpoint, request)
        headers = self._build_headers(content_type=True)
        self._log_request(url, headers)
        return self._send("POST", url, headers)

    def delete_signed(self, endpoint: Endpoint, request: Optional[str] = None) -> Any:
        """Send a signed DELETE request and return the decoded JSON body."""
        url = self._sign_request(endpoint, request)
        headers = self._build_headers(content_type=True)
        self._log_request(url, headers)
        return self._send("DELETE", url, headers)

    def get(self, endpoint: Endpoint, request: Optional[str] = None) -> Any:
        """Send an unsigned GET request with an optional query string."""
        url = f"{self.host}{_path(endpoint)}"
        if request:
            url = f"{url}?{request}"
        self._log_request(url)
        return self._send("GET", url)

    def post(self, endpoint: Endpoint) -> Any:
        """Send an unsigned POST request carrying the API key."""
        url = f"{self.host}{_path(endpoint)}"
        return self._send("POST", url, self._build_headers(content_type=False))

    def put(self, endpoint: Endpoint, listen_key: str) -> Any:
        """Send a PUT request whose body names the listen key."""
        url = f"{self.host}{_path(endpoint)}"
        data = f"listenKey={listen_key}"
        headers = self._build_headers(content_type=True)
        self._log_request(url, headers, data)
        return self._send("PUT", url, headers, data)

    def delete(self, endpoint: Endpoint, listen_key: str) -> Any:
        """Send a DELETE request whose body names the listen key."""
        url = f"{self.host}{_path(endpoint)}"
        data = f"listenKey={listen_key}"
        return self._send("DELETE", url, self._build_headers(content_type=False), data)

    def _sign_request(self, endpoint: Endpoint, request: Optional[str]) -> str:
        body = request if request is not None else ""
        signature = hmac.new(
            self._secret_key.encode(), body.encode(), hashlib.sha256
        ).hexdigest()
        return f"{self.host}{_path(endpoint)}?{body}&signature={signature}"

    def _build_headers(self, content_type: bool) -> dict[str, str]:
        if not _is_valid_header_value(self._api_key):
            raise BinanceError("invalid API key header value")
        headers = {"User-Agent": USER_AGENT}
        if content_type:
            headers["Content-Type"] = FORM_CONTENT_TYPE
        headers["X-MBX-APIKEY"] = self._api_key
        return headers

    def _log_request(
        self,
        url: str,
        headers: Optional[dict[str, str]] = None,
        data: Optional[str] = None,
    ) -> None:
        if not self.verbose:
            return
        print(f"Request URL: {url}")
        if headers is not None:
            print(f"Request Headers: {headers}")
        if data is not None:
            print(f"Request Body: {data}")

    def _send(
        self,
        method: str,
        url: str,
        headers: Optional[dict[str, str]] = None,
        data: Optional[str] = None,
    ) -> Any:
        try:
            response = self._session.request(method, url, headers=headers, data=data)
        except requests.RequestException as exc:
            raise BinanceError(str(exc)) from exc
        return self._handle(response)

    def _handle(self, response: requests.Response) -> Any:
        status = response.status_code
        if status == 200:
            try:
                payload = json.loads(response.content)
            except ValueError as exc:
                raise BinanceError(f"invalid JSON response: {exc}") from exc
            if self.verbose:
                print(f"Response Headers: {dict(response.headers)}")
                print(f"Response: {json.dumps(payload)}")
            return payload
        if status in _STATUS_MESSAGES:
            raise BinanceError(_STATUS_MESSAGES[status])
        if status == 400:
            try:
                body = json.loads(response.content)
                code, msg = int(body["code"]), str(body["msg"])
            except (ValueError, KeyError, TypeError) as exc:
                raise BinanceError(f"invalid error response: {exc}") from exc
            raise BinanceContentError(code, msg)
        raise BinanceError(f"Received response: {status}")