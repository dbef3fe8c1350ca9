"""Order enumerations and builders for new and amended orders."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any


class _WireEnum(str, Enum):
    def __str__(self) -> str:
        return self.value


class OrderSide(_WireEnum):
    BUY = "BUY"
    SELL = "SELL"


class OrderType(_WireEnum):
    MARKET = "1"
    LIMIT = "2"
    STOP = "3"
    STOP_LIMIT = "4"


class DurationType(_WireEnum):
    DAY = "0"
    GOOD_TILL_CANCEL = "1"


class OrderStatusType(_WireEnum):
    """Status filter used when listing orders."""

    ANY = "ANY"
    NEW = "NEW"
    INVALID = "INVALID"
    PENDING = "PENDING"
    PENDING_CANCEL = "PENDING_CANCEL"
    PENDING_REPLACE = "PENDING_REPLACE"
    SUBMITTED = "SUBMITTED"
    CANCELLED = "CANCELLED"
    FILLED = "FILLED"
    PARTIALLY_FILLED = "PARTIALLY_FILLED"
    REJECTED = "REJECTED"
    EXPIRED = "EXPIRED"


def _without_none(fields: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in fields.items() if value is not None}


@dataclass(frozen=True)
class OrderBuilder:
    """A new order; create one through the type-specific constructors.

    The setters return a modified copy, so calls can be chained.
    """

    exch_sym: str
    side: OrderSide
    quantity: float
    order_type: OrderType
    duration: DurationType
    limit_price: float | None = None
    stop_price: float | None = None
    stop_loss_price: float | None = None
    take_profit_price: float | None = None
    stop_loss_offset_pips: float | None = None
    take_profit_offset_pips: float | None = None
    trailing_stop: float | None = None
    wait_for_order_id_flag: bool | None = None

    @classmethod
    def market(cls, symbol: str, side: OrderSide, quantity: float, duration: DurationType) -> OrderBuilder:
        return cls(symbol, side, quantity, OrderType.MARKET, duration)

    @classmethod
    def limit(
        cls, symbol: str, side: OrderSide, quantity: float, price: float, duration: DurationType
    ) -> OrderBuilder:
        return cls(symbol, side, quantity, OrderType.LIMIT, duration, limit_price=price)

    @classmethod
    def stop(
        cls, symbol: str, side: OrderSide, quantity: float, stop_price: float, duration: DurationType
    ) -> OrderBuilder:
        return cls(symbol, side, quantity, OrderType.STOP, duration, stop_price=stop_price)

    @classmethod
    def stop_limit(
        cls,
        symbol: str,
        side: OrderSide,
        quantity: float,
        limit_price: float,
        stop_price: float,
        duration: DurationType,
    ) -> OrderBuilder:
        return cls(
            symbol,
            side,
            quantity,
            OrderType.STOP_LIMIT,
            duration,
            limit_price=limit_price,
            stop_price=stop_price,
        )

    def stop_loss(self, price: float) -> OrderBuilder:
        """Set the bracket stop-loss price."""
        return dataclasses.replace(self, stop_loss_price=price)

    def take_profit(self, price: float) -> OrderBuilder:
        """Set the bracket take-profit price."""
        return dataclasses.replace(self, take_profit_price=price)

    def stop_loss_offset(self, pips: float) -> OrderBuilder:
        """Set the stop-loss offset in pips."""
        return dataclasses.replace(self, stop_loss_offset_pips=pips)

    def take_profit_offset(self, pips: float) -> OrderBuilder:
        """Set the take-profit offset in pips."""
        return dataclasses.replace(self, take_profit_offset_pips=pips)

    def wait_for_order_id(self, wait: bool) -> OrderBuilder:
        """Whether to wait for the exchange to assign an order id."""
        return dataclasses.replace(self, wait_for_order_id_flag=wait)

    def to_request(self) -> dict[str, Any]:
        """The JSON body for placing this order; unset options are omitted."""
        return _without_none(
            {
                "exchSym": self.exch_sym,
                "side": self.side.value,
                "quantity": self.quantity,
                "orderType": self.order_type.value,
                "duration": self.duration.value,
                "limitPrice": self.limit_price,
                "stopPrice": self.stop_price,
                "stopLoss": self.stop_loss_price,
                "takeProfit": self.take_profit_price,
                "stopLossOffset": self.stop_loss_offset_pips,
                "takeProfitOffset": self.take_profit_offset_pips,
                "trailingStop": self.trailing_stop,
                "waitForOrderId": self.wait_for_order_id_flag,
            }
        )


@dataclass
class OrderUpdate:
    """Fields to change on an existing order; only ``quantity`` is required."""

    quantity: int
    limit_price: float | None = None
    stop_price: float | None = None
    stop_loss: float | None = None
    take_profit: float | None = None
    stop_loss_offset: float | None = None
    take_profit_offset: float | None = None

    def to_request(self, order_id: str) -> dict[str, Any]:
        """The JSON body for updating ``order_id``; unset fields are omitted."""
        return _without_none(
            {
                "orderId": order_id,
                "quantity": self.quantity,
                "limitPrice": self.limit_price,
                "stopPrice": self.stop_price,
                "stopLoss": self.stop_loss,
                "takeProfit": self.take_profit,
                "stopLossOffset": self.stop_loss_offset,
                "takeProfitOffset": self.take_profit_offset,
            }
        )