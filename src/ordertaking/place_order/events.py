# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ordertaking
"""
Event composition for the PlaceOrder workflow.
"""

from __future__ import annotations

from decimal import Decimal

from ordertaking.place_order.acknowledgment import acknowledge_order
from ordertaking.place_order.public_types import (
    BillableOrderPlaced,
    OrderAcknowledgmentSent,
    OrderPlaced,
    PlaceOrderEvent,
    PricedOrder,
)
from ordertaking.place_order.workflow_types import (
    CreateOrderAcknowledgmentLetter,
    SendOrderAcknowledgment,
)


def create_order_placed_event(placed_order: PricedOrder) -> OrderPlaced:
    return OrderPlaced(
        order_id=placed_order.order_id,
        customer_info=placed_order.customer_info,
        shipping_address=placed_order.shipping_address,
        billing_address=placed_order.billing_address,
        amount_to_bill=placed_order.amount_to_bill,
        lines=placed_order.lines,
    )


def create_billing_event(placed_order: PricedOrder) -> BillableOrderPlaced | None:
    """Create the billing event, but only if there is something to bill."""
    if placed_order.amount_to_bill.value > Decimal("0"):
        return BillableOrderPlaced(
            order_id=placed_order.order_id,
            billing_address=placed_order.billing_address,
            amount_to_bill=placed_order.amount_to_bill,
        )
    return None


def create_events(
    priced_order: PricedOrder,
    acknowledgment_event: OrderAcknowledgmentSent | None,
) -> list[PlaceOrderEvent]:
    """Assemble the events to emit, always in the order ack, placed, billable."""
    events: list[PlaceOrderEvent] = []
    if acknowledgment_event is not None:
        events.append(acknowledgment_event)
    events.append(create_order_placed_event(priced_order))
    billing_event = create_billing_event(priced_order)
    if billing_event is not None:
        events.append(billing_event)
    return events


async def place_order_events(
    create_acknowledgment_letter: CreateOrderAcknowledgmentLetter,
    send_acknowledgment: SendOrderAcknowledgment,
    priced_order: PricedOrder,
) -> list[PlaceOrderEvent]:
    """Acknowledge the order, then compose its events."""
    acknowledgment_event = await acknowledge_order(
        create_acknowledgment_letter, send_acknowledgment, priced_order
    )
    return create_events(priced_order, acknowledgment_event)
