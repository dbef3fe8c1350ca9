import pytest

from ironbeam_client.errors import JsonError
from ironbeam_client.order_models import Order, OrderBaseResponse, OrderFill
from ironbeam_client.order_types import DurationType, OrderSide, OrderStatusType, OrderType


def test_order_from_rest_names():
    order = Order.from_json(
        {
            "orderId": "ORD001",
            "accountId": "ACC1",
            "exchSym": "XCME:ES.U16",
            "status": "NEW",
            "side": "BUY",
            "quantity": 2.0,
            "orderType": "2",
            "duration": "0",
        }
    )
    assert order.order_id == "ORD001"
    assert order.account_id == "ACC1"
    assert order.exch_sym == "XCME:ES.U16"
    assert order.status is OrderStatusType.NEW
    assert order.side is OrderSide.BUY
    assert order.quantity == 2.0
    assert order.order_type is OrderType.LIMIT
    assert order.duration is DurationType.DAY
    assert order.limit_price is None


def test_order_from_streaming_names():
    order = Order.from_json(
        {"oid": "O1", "a": "A1", "s": "ES", "st": "NEW", "sd": "BUY", "q": 1.0, "ot": "1", "dr": "0"}
    )
    assert order.order_id == "O1"
    assert order.account_id == "A1"
    assert order.order_type is OrderType.MARKET


def test_order_from_mixed_names():
    order = Order.from_json(
        {
            "orderId": "O3",
            "a": "A3",
            "exchSym": "ES",
            "st": "NEW",
            "side": "SELL",
            "q": 3.0,
            "orderType": "2",
            "dr": "1",
        }
    )
    assert order.order_id == "O3"
    assert order.account_id == "A3"
    assert order.side is OrderSide.SELL
    assert order.duration is DurationType.GOOD_TILL_CANCEL


def test_order_missing_field_raises():
    with pytest.raises(JsonError, match="orderId"):
        Order.from_json({"accountId": "ACC1"})


def test_order_unknown_side_raises():
    with pytest.raises(JsonError, match="side"):
        Order.from_json(
            {"oid": "O1", "a": "A1", "s": "ES", "st": "NEW", "sd": "HOLD", "q": 1, "ot": "1", "dr": "0"}
        )


def test_order_rejects_non_object():
    with pytest.raises(JsonError):
        Order.from_json(["not", "an", "object"])


def test_fill_from_rest_names():
    fill = OrderFill.from_json({"orderId": "ORD001", "accountId": "ACC1", "exchSym": "XCME:ES.U16"})
    assert fill.order_id == "ORD001"
    assert fill.exch_sym == "XCME:ES.U16"
    assert fill.fill_price is None


def test_fill_from_streaming_names():
    fill = OrderFill.from_json({"oid": "F1", "a": "ACC1", "s": "ES", "fp": 4500.0})
    assert fill.order_id == "F1"
    assert fill.fill_price == 4500.0


def test_base_response_fields():
    resp = OrderBaseResponse.from_json({"orderId": "ORD001", "strategyId": 100})
    assert resp.order_id == "ORD001"
    assert resp.strategy_id == 100


def test_base_response_empty():
    resp = OrderBaseResponse.from_json({})
    assert resp == OrderBaseResponse()


def test_base_response_bad_strategy_id():
    with pytest.raises(JsonError, match="strategyId"):
        OrderBaseResponse.from_json({"strategyId": "abc"})