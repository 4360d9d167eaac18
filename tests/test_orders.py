import pytest

from binance_rest.orders import OrderSide, OrderType, TimeInForce


@pytest.mark.parametrize(
    "value, expected",
    [(1, OrderType.LIMIT), (2, OrderType.MARKET), (3, OrderType.STOP_LOSS_LIMIT)],
)
def test_order_type_from_int(value, expected):
    assert OrderType.from_int(value) is expected


@pytest.mark.parametrize("value", [0, 4, -1])
def test_order_type_from_int_unknown(value):
    assert OrderType.from_int(value) is None


def test_order_side_from_int():
    assert OrderSide.from_int(1) is OrderSide.BUY
    assert OrderSide.from_int(2) is OrderSide.SELL
    assert OrderSide.from_int(3) is None


def test_time_in_force_from_int():
    assert [TimeInForce.from_int(v) for v in (1, 2, 3, 0)] == [
        TimeInForce.GTC,
        TimeInForce.IOC,
        TimeInForce.FOK,
        None,
    ]


def test_wire_strings():
    assert str(OrderType.from_int(3)) == "STOP_LOSS_LIMIT"
    assert f"{OrderSide.from_int(2)}" == "SELL"
    assert str(TimeInForce.from_int(3)) == "FOK"


@pytest.mark.parametrize("enum_cls", [OrderType, OrderSide, TimeInForce])
def test_round_trip_through_value(enum_cls):
    for member in enum_cls:
        assert enum_cls(str(member)) is member


def test_unknown_value_raises():
    with pytest.raises(ValueError):
        OrderType("STOP")