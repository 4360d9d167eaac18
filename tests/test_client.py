import re

import pytest
import responses

from binance_rest.client import Client
from binance_rest.endpoints import Futures, Spot
from binance_rest.errors import BinanceContentError, BinanceError

HOST = "https://api.example.com"
SIGNATURE = re.compile(r"&signature=([0-9a-f]{64})$")


def _url(path):
    return re.compile(re.escape(HOST + path) + r"(\?.*)?$")


@pytest.fixture
def mock():
    with responses.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def client():
    return Client("placeholder", "secret", HOST)


def test_get_signed_returns_json_and_signs(mock, client):
    mock.add(responses.GET, _url("/api/v3/account"), json={"canTrade": True})
    result = client.get_signed(Spot.ACCOUNT, "recvWindow=1234&timestamp=1")
    assert result == {"canTrade": True}
    sent = mock.calls[0].request
    assert sent.url.startswith(HOST + "/api/v3/account?recvWindow=1234&timestamp=1&signature=")
    assert SIGNATURE.search(sent.url)
    assert sent.headers["X-MBX-APIKEY"] == "placeholder"
    assert sent.headers["Content-Type"] == "application/x-www-form-urlencoded"


def test_signature_is_deterministic_and_depends_on_request(mock, client):
    for _ in range(3):
        mock.add(responses.GET, _url("/api/v3/order"), json={"ok": True})
    results = [
        client.get_signed(Spot.ORDER, "symbol=LTCBTC"),
        client.get_signed(Spot.ORDER, "symbol=LTCBTC"),
        client.get_signed(Spot.ORDER, "symbol=BNBBTC"),
    ]
    assert results == [{"ok": True}] * 3
    sigs = [SIGNATURE.search(call.request.url).group(1) for call in mock.calls]
    assert sigs[0] == sigs[1]
    assert sigs[0] != sigs[2] and len(sigs[2]) == 64


def test_signature_depends_on_secret(mock):
    mock.add(responses.GET, _url("/api/v3/order"), json={"ok": True})
    mock.add(responses.GET, _url("/api/v3/order"), json={"ok": True})
    results = [
        Client("placeholder", "secret", HOST).get_signed(Spot.ORDER, "a=1"),
        Client("placeholder", None, HOST).get_signed(Spot.ORDER, "a=1"),
    ]
    assert results == [{"ok": True}, {"ok": True}]
    first, second = (SIGNATURE.search(c.request.url).group(1) for c in mock.calls)
    assert first != second


def test_signed_without_request(mock, client):
    mock.add(responses.DELETE, _url("/api/v3/openOrders"), json=[])
    assert client.delete_signed(Spot.OPEN_ORDERS) == []
    sent = mock.calls[0].request
    assert sent.method == "DELETE"
    assert re.fullmatch(re.escape(HOST + "/api/v3/openOrders?&signature=") + "[0-9a-f]{64}", sent.url)


def test_post_signed_uses_post(mock, client):
    mock.add(responses.POST, _url("/api/v3/order/test"), json={})
    assert client.post_signed(Spot.ORDER_TEST, "symbol=LTCBTC") == {}
    assert mock.calls[0].request.method == "POST"
    assert "symbol=LTCBTC&signature=" in mock.calls[0].request.url


def test_get_without_query(mock, client):
    mock.add(responses.GET, _url("/api/v3/ping"), json={"pong": 1})
    mock.add(responses.GET, _url("/api/v3/ping"), json={"pong": 1})
    results = [client.get(Spot.PING, None), client.get(Spot.PING, "")]
    assert results == [{"pong": 1}, {"pong": 1}]
    assert [c.request.url for c in mock.calls] == [HOST + "/api/v3/ping"] * 2


def test_get_with_query(mock, client):
    mock.add(responses.GET, _url("/api/v3/depth"), json={"lastUpdateId": 1027024})
    assert client.get(Spot.DEPTH, "symbol=LTCBTC") == {"lastUpdateId": 1027024}
    assert mock.calls[0].request.url == HOST + "/api/v3/depth?symbol=LTCBTC"


def test_put_sends_listen_key(mock, client):
    mock.add(responses.PUT, _url("/fapi/v1/listenKey"), json={})
    assert client.put(Futures.USER_DATA_STREAM, "abc") == {}
    sent = mock.calls[0].request
    assert sent.body == "listenKey=abc"
    assert sent.headers["Content-Type"] == "application/x-www-form-urlencoded"


def test_delete_sends_listen_key(mock, client):
    mock.add(responses.DELETE, _url("/api/v3/userDataStream"), json={})
    assert client.delete(Spot.USER_DATA_STREAM, "abc") == {}
    assert mock.calls[0].request.body == "listenKey=abc"
    assert mock.calls[0].request.headers["X-MBX-APIKEY"] == "placeholder"


def test_post_carries_api_key(mock, client):
    mock.add(responses.POST, _url("/api/v3/userDataStream"), json={"listenKey": "abc"})
    assert client.post(Spot.USER_DATA_STREAM) == {"listenKey": "abc"}
    assert mock.calls[0].request.headers["X-MBX-APIKEY"] == "placeholder"


def test_host_can_be_changed(mock, client):
    client.host = "https://other.example.com"
    mock.add(responses.GET, "https://other.example.com/api/v3/time", json={"serverTime": 1499827319559})
    assert client.get(Spot.TIME, None) == {"serverTime": 1499827319559}


def test_bad_request_raises_content_error(mock, client):
    mock.add(responses.GET, _url("/api/v3/order"), status=400, json={"code": -1121, "msg": "Invalid symbol."})
    with pytest.raises(BinanceContentError) as info:
        client.get_signed(Spot.ORDER, "symbol=XX")
    assert info.value.code == -1121
    assert info.value.msg == "Invalid symbol."


@pytest.mark.parametrize(
    "status, message",
    [
        (500, "Internal Server Error"),
        (503, "Service Unavailable"),
        (401, "Unauthorized"),
        (404, "Received response: 404"),
    ],
)
def test_error_statuses(mock, client, status, message):
    mock.add(responses.GET, _url("/api/v3/ping"), status=status, body="")
    with pytest.raises(BinanceError) as info:
        client.get(Spot.PING, None)
    assert str(info.value) == message
    assert not isinstance(info.value, BinanceContentError)


def test_invalid_json_raises(mock, client):
    mock.add(responses.GET, _url("/api/v3/ping"), body="not json")
    with pytest.raises(BinanceError):
        client.get(Spot.PING, None)


def test_invalid_api_key_header_raises():
    bad = Client("place\nholder", "secret", HOST)
    with pytest.raises(BinanceError, match="header"):
        bad.get_signed(Spot.ACCOUNT, "a=1")


def test_connection_error_is_wrapped(mock, client):
    with pytest.raises(BinanceError):
        client.get(Spot.PING, None)