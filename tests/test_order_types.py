import pytest

from ironbeam_client.order_types import (
    DurationType,
    OrderBuilder,
    OrderSide,
    OrderStatusType,
    OrderType,
    OrderUpdate,
)


@pytest.mark.parametrize(
    "order, expected_type, expected_limit, expected_stop, expected_duration",
    [
        (
            OrderBuilder.market("XCME:ES.U16", OrderSide.BUY, 1.0, DurationType.DAY),
            OrderType.MARKET,
            None,
            None,
            DurationType.DAY,
        ),
        (
            OrderBuilder.limit("XCME:ES.U16", OrderSide.SELL, 2.0, 4500.0, DurationType.DAY),
            OrderType.LIMIT,
            4500.0,
            None,
            DurationType.DAY,
        ),
        (
            OrderBuilder.stop("XCME:ES.U16", OrderSide.SELL, 1.0, 4400.0, DurationType.DAY),
            OrderType.STOP,
            None,
            4400.0,
            DurationType.DAY,
        ),
        (
            OrderBuilder.stop_limit(
                "XCME:ES.U16", OrderSide.BUY, 1.0, 4500.0, 4400.0, DurationType.GOOD_TILL_CANCEL
            ),
            OrderType.STOP_LIMIT,
            4500.0,
            4400.0,
            DurationType.GOOD_TILL_CANCEL,
        ),
    ],
    ids=["market", "limit", "stop", "stop_limit"],
)
def test_builder_order_types(order, expected_type, expected_limit, expected_stop, expected_duration):
    req = order.to_request()
    assert req["orderType"] == expected_type.value
    assert req.get("limitPrice") == expected_limit
    assert req.get("stopPrice") == expected_stop
    assert req["duration"] == expected_duration.value


def test_builder_market_common_fields():
    req = OrderBuilder.market("XCME:ES.U16", OrderSide.BUY, 1.0, DurationType.DAY).to_request()
    assert req["exchSym"] == "XCME:ES.U16"
    assert req["side"] == "BUY"
    assert req["quantity"] == 1.0


def test_builder_optional_setters():
    order = (
        OrderBuilder.market("XCME:ES.U16", OrderSide.BUY, 1.0, DurationType.DAY)
        .stop_loss(4480.0)
        .take_profit(4550.0)
        .wait_for_order_id(False)
    )
    req = order.to_request()
    assert req["stopLoss"] == 4480.0
    assert req["takeProfit"] == 4550.0
    assert req["waitForOrderId"] is False


def test_builder_offsets():
    req = (
        OrderBuilder.market("XCME:ES.U16", OrderSide.BUY, 1.0, DurationType.DAY)
        .stop_loss_offset(4.0)
        .take_profit_offset(8.0)
        .to_request()
    )
    assert req["stopLossOffset"] == 4.0
    assert req["takeProfitOffset"] == 8.0


def test_setters_leave_original_unchanged():
    base = OrderBuilder.market("XCME:ES.U16", OrderSide.BUY, 1.0, DurationType.DAY)
    changed = base.stop_loss(4480.0)
    assert "stopLoss" not in base.to_request()
    assert changed.to_request()["stopLoss"] == 4480.0


def test_limit_request_wire_values():
    req = OrderBuilder.limit("XCME:ES.U16", OrderSide.BUY, 1.0, 4500.0, DurationType.DAY).to_request()
    assert req["exchSym"] == "XCME:ES.U16"
    assert req["side"] == "BUY"
    assert req["orderType"] == "2"
    assert req["limitPrice"] == 4500.0


def test_market_request_omits_unset_optional_fields():
    req = OrderBuilder.market("XCME:ES.U16", OrderSide.BUY, 1.0, DurationType.DAY).to_request()
    for key in ("limitPrice", "stopPrice", "stopLoss", "takeProfit", "waitForOrderId", "trailingStop"):
        assert key not in req


def test_order_update_request():
    update = OrderUpdate(5, limit_price=4600.0, stop_price=4400.0)
    req = update.to_request("ORD001")
    assert req["orderId"] == "ORD001"
    assert req["quantity"] == 5
    assert req["limitPrice"] == 4600.0
    assert req["stopPrice"] == 4400.0
    assert "stopLoss" not in req


def test_order_update_only_quantity():
    assert OrderUpdate(2).to_request("ORD001") == {"orderId": "ORD001", "quantity": 2}


def test_status_type_values():
    assert OrderStatusType.ANY.value == "ANY"
    assert str(OrderStatusType.FILLED) == "FILLED"
    assert OrderStatusType("FILLED") is OrderStatusType.FILLED