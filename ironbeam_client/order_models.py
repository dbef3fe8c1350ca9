"""Orders, fills and order acknowledgements as returned by the API.

The REST API uses long camelCase field names while the stream uses short
abbreviations; a single message may mix both, so every field accepts either.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

from .errors import JsonError
from .order_types import DurationType, OrderSide, OrderStatusType, OrderType

_E = TypeVar("_E", bound=Enum)


def _object(data: Any, what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise JsonError(f"{what} must be a JSON object")
    return data


def _pick(data: dict[str, Any], keys: tuple[str, ...]) -> Any:
    return next((data[key] for key in keys if data.get(key) is not None), None)


def _required(data: dict[str, Any], name: str, *keys: str) -> Any:
    value = _pick(data, keys)
    if value is None:
        raise JsonError(f"missing field {name!r}")
    return value


def _text(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise JsonError(f"field {name!r} must be a string")
    return value


def _number(value: Any, name: str) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise JsonError(f"field {name!r} must be a number")
    return float(value)


def _integer(value: Any, name: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise JsonError(f"field {name!r} must be an integer")
    return value


def _optional_text(value: Any, name: str) -> str | None:
    return None if value is None else _text(value, name)


def _member(enum_cls: type[_E], value: Any, name: str) -> _E:
    try:
        return enum_cls(value)
    except ValueError as exc:
        raise JsonError(f"unknown value {value!r} for field {name!r}") from exc


@dataclass(frozen=True)
class Order:
    """An order on an account."""

    order_id: str
    account_id: str
    exch_sym: str
    status: OrderStatusType
    side: OrderSide
    quantity: float
    order_type: OrderType
    duration: DurationType
    limit_price: float | None = None
    stop_price: float | None = None
    strategy_id: int | None = None

    @classmethod
    def from_json(cls, data: Any) -> Order:
        """Build an order from REST or streaming JSON."""
        data = _object(data, "order")
        return cls(
            order_id=_text(_required(data, "orderId", "orderId", "oid"), "orderId"),
            account_id=_text(_required(data, "accountId", "accountId", "a"), "accountId"),
            exch_sym=_text(_required(data, "exchSym", "exchSym", "s"), "exchSym"),
            status=_member(OrderStatusType, _required(data, "status", "status", "st"), "status"),
            side=_member(OrderSide, _required(data, "side", "side", "sd"), "side"),
            quantity=_number(_required(data, "quantity", "quantity", "q"), "quantity"),
            order_type=_member(OrderType, _required(data, "orderType", "orderType", "ot"), "orderType"),
            duration=_member(DurationType, _required(data, "duration", "duration", "dr"), "duration"),
            limit_price=_number(_pick(data, ("limitPrice", "lp")), "limitPrice"),
            stop_price=_number(_pick(data, ("stopPrice", "sp")), "stopPrice"),
            strategy_id=_integer(_pick(data, ("strategyId", "sid")), "strategyId"),
        )


@dataclass(frozen=True)
class OrderFill:
    """A fill of an order."""

    order_id: str
    account_id: str
    exch_sym: str
    fill_quantity: float | None = None
    fill_price: float | None = None

    @classmethod
    def from_json(cls, data: Any) -> OrderFill:
        """Build a fill from REST or streaming JSON."""
        data = _object(data, "fill")
        return cls(
            order_id=_text(_required(data, "orderId", "orderId", "oid"), "orderId"),
            account_id=_text(_required(data, "accountId", "accountId", "a"), "accountId"),
            exch_sym=_text(_required(data, "exchSym", "exchSym", "s"), "exchSym"),
            fill_quantity=_number(_pick(data, ("fillQuantity", "fq")), "fillQuantity"),
            fill_price=_number(_pick(data, ("fillPrice", "fp")), "fillPrice"),
        )


@dataclass(frozen=True)
class OrderBaseResponse:
    """Acknowledgement carrying an order id and/or strategy id."""

    order_id: str | None = None
    strategy_id: int | None = None
    status: str | None = None
    message: str | None = None

    @classmethod
    def from_json(cls, data: Any) -> OrderBaseResponse:
        data = _object(data, "order response")
        return cls(
            order_id=_optional_text(data.get("orderId"), "orderId"),
            strategy_id=_integer(data.get("strategyId"), "strategyId"),
            status=_optional_text(data.get("status"), "status"),
            message=_optional_text(data.get("message"), "message"),
        )