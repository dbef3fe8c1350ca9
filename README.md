# ironbeam-client

Asyncio building blocks for the Ironbeam futures trading API: request
builders for orders and simulated accounts, models for the orders and fills
the API returns, and a WebSocket transport that turns stream messages into
typed events.

## Installation

```
pip install ironbeam-client
```

With the test dependencies:

```
pip install "ironbeam-client[test]"
```

## Orders

`ironbeam_client.order_types` holds the order enumerations (`OrderSide`,
`OrderType`, `DurationType`, `OrderStatusType`) and two request builders.

`OrderBuilder` is a frozen dataclass created through `market`, `limit`,
`stop` or `stop_limit`. Its setters (`stop_loss`, `take_profit`,
`stop_loss_offset`, `take_profit_offset`, `wait_for_order_id`) return a
modified copy. `to_request()` gives the JSON body, leaving out every option
that was not set.

```python
from ironbeam_client.order_types import DurationType, OrderBuilder, OrderSide, OrderUpdate

order = (
    OrderBuilder.limit("XCME:ES.U16", OrderSide.BUY, 1.0, 4500.0, DurationType.DAY)
    .stop_loss(4480.0)
    .take_profit(4550.0)
)
order.to_request()
# {'exchSym': 'XCME:ES.U16', 'side': 'BUY', 'quantity': 1.0, 'orderType': '2',
#  'duration': '0', 'limitPrice': 4500.0, 'stopLoss': 4480.0, 'takeProfit': 4550.0}

OrderUpdate(quantity=5, limit_price=4600.0).to_request("ORD001")
# {'orderId': 'ORD001', 'quantity': 5, 'limitPrice': 4600.0}
```

`ironbeam_client.order_models` decodes what the API sends back: `Order`,
`OrderFill` and `OrderBaseResponse`, each with a `from_json` class method.
`Order` and `OrderFill` accept both the long REST field names (`orderId`,
`accountId`, `exchSym`, ...) and the short stream names (`oid`, `a`, `s`,
...), even mixed in one object. A missing required field, a wrong type or an
unknown enum value raises `JsonError`.

```python
from ironbeam_client.order_models import Order

Order.from_json({"orderId": "O3", "a": "A3", "exchSym": "ES", "st": "NEW",
                 "side": "SELL", "q": 3.0, "orderType": "2", "dr": "1"})
```

## Simulated accounts

`LiquidateBuilder` (in `ironbeam_client.liquidate`) and `RiskBuilder` (in
`ironbeam_client.risk`) build the bodies of liquidation and risk-parameter
requests. Every setter returns a new builder; `to_request()` includes only
what was set (plus `AccountId` for `RiskBuilder`).

```python
from ironbeam_client.liquidate import LiquidateBuilder
from ironbeam_client.risk import RiskBuilder

LiquidateBuilder().accounts(["ACC001", "ACC002"]).force_manual(True).to_request()
# {'Accounts': ['ACC001', 'ACC002'], 'ForceManualLiquidation': True}

RiskBuilder("ACC001").liquidation_account_value(25_000.0).to_request()
# {'AccountId': 'ACC001', 'LiquidationAccountValue': 25000.0}
```

Passing a single string where a list of accounts or groups is expected
raises `TypeError`.

## Streaming

`ironbeam_client.handler.events_from_response` splits one stream message
(text, bytes or a decoded dict) into `StreamEvent(kind, data)` values, one per
populated envelope field, in a fixed order. `kind` is an `EventKind`
(`PING`, `QUOTES`, `DEPTH`, `TRADES`, `ORDERS`, `FILLS`, `BALANCE`,
`NOTIFICATION`, and so on); `data` is the decoded JSON.

```python
from ironbeam_client.handler import EventKind, events_from_response

events = events_from_response('{"p":{"ping":"keepalive"},"q":[{"s":"ES"}]}')
[event.kind for event in events]  # [EventKind.PING, EventKind.QUOTES]
```

`ironbeam_client.connection` provides the WebSocket side:

- `build_ws_url(base_url, stream_id, token)` turns `https://host/v2` into
  `wss://host/v2/stream/{stream_id}?token=...`, percent-encoding the token.
- `connect(base_url, stream_id, token)` opens the connection and returns a
  `WebsocketTransport`, whose `read_frame()` yields `WsMessage` values and
  whose `write_close()` sends a normal close.
- `message_loop(ws, queue, shutdown, stream_id)` reads frames and puts each
  event on an `asyncio.Queue`. A message that is not a valid envelope is put on
  the queue as a `JsonError` and the loop continues; a close frame becomes a
  `WebSocketError` (with the server's reason, if any) and ends the loop, as
  does a read error. Setting the `shutdown` event closes the socket and ends
  the loop. A final `None` marks the end of the stream.

```python
import asyncio
from ironbeam_client.connection import connect, message_loop

async def watch(stream_id: str) -> None:
    ws = await connect("https://demo.example.com/v2", stream_id, "token")
    queue: asyncio.Queue = asyncio.Queue(maxsize=256)
    shutdown = asyncio.Event()
    task = asyncio.create_task(message_loop(ws, queue, shutdown, stream_id))
    while (item := await queue.get()) is not None:
        print(item)
    await task
```

Any object with async `read_frame()` and `write_close()` methods can stand in
for `WebsocketTransport`, which makes the loop easy to drive from tests.

## Errors

`ironbeam_client.errors` defines `IronbeamError` and its subclasses
`HttpError`, `JsonError`, `ApiError` (with `status` and `message`),
`AuthError` and `WebSocketError`. `parse_api_error(body)` pulls a readable
message out of an API error body: `error1`, then `message`, then the same in a
nested `result` object, and otherwise the raw body text.

## What this package does not do

The package does not send HTTP requests. It has no REST client, no
authentication, no rate limiting, and no calls for placing, listing or
cancelling orders or for simulated-account endpoints; it builds their request
bodies and decodes their responses. It also does not create stream sessions or
subscribe to market data or indicator feeds: you supply the stream id and
token, and `connect` and `message_loop` take it from there.