# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ordertaking
"""
Tests for the acknowledgment step and event composition.
"""

from decimal import Decimal

import pytest
from conftest import FakeAsyncSender, FakeLetterWriter, FakeSender

from ordertaking.domain import (
    Address,
    BillingAmount,
    CustomerInfo,
    EmailAddress,
    OrderId,
    OrderLineId,
    PersonalName,
    Price,
    String50,
    UnitQuantity,
    WidgetCode,
    ZipCode,
)
from ordertaking.place_order import (
    BillableOrderPlaced,
    OrderAcknowledgmentSent,
    OrderPlaced,
    PricedOrder,
    PricedOrderLine,
    SendResult,
    acknowledge_order,
    create_billing_event,
    create_events,
    create_order_placed_event,
    place_order_events,
)


def make_priced_order(*line_prices: int) -> PricedOrder:
    lines = tuple(
        PricedOrderLine(
            order_line_id=OrderLineId(value=f"line-{i}"),
            product_code=WidgetCode(value="W1234"),
            quantity=UnitQuantity(value=1),
            line_price=Price(value=Decimal(price)),
        )
        for i, price in enumerate(line_prices)
    )
    address = Address(
        address_line1=String50(value="123 Main St"),
        city=String50(value="Springfield"),
        zip_code=ZipCode(value="12345"),
    )
    return PricedOrder(
        order_id=OrderId(value="order-1"),
        customer_info=CustomerInfo(
            name=PersonalName(
                first_name=String50(value="Ada"), last_name=String50(value="Lovelace")
            ),
            email_address=EmailAddress(value="ada@example.com"),
        ),
        shipping_address=address,
        billing_address=address,
        amount_to_bill=BillingAmount.sum_prices(line.line_price for line in lines).unwrap(),
        lines=lines,
    )


# ---------------------------
# Acknowledgment
# ---------------------------


@pytest.mark.asyncio
async def test_acknowledgment_sent():
    writer, sender = FakeLetterWriter(), FakeSender(SendResult.SENT)
    order = make_priced_order(30)

    event = await acknowledge_order(writer, sender, order)

    assert isinstance(event, OrderAcknowledgmentSent)
    assert event.order_id == order.order_id
    assert event.email_address == order.customer_info.email_address
    assert event.event_type == "OrderAcknowledgmentSent"
    assert writer.calls == [order]
    (acknowledgment,) = sender.sent
    assert acknowledgment.email_address.value == "ada@example.com"
    assert acknowledgment.letter.value == "<p>Thanks for order order-1</p>"


@pytest.mark.asyncio
async def test_acknowledgment_not_sent():
    sender = FakeSender(SendResult.NOT_SENT)
    assert await acknowledge_order(FakeLetterWriter(), sender, make_priced_order(30)) is None
    assert len(sender.sent) == 1


@pytest.mark.asyncio
async def test_sender_reporting_plain_string_is_accepted():
    sender = FakeSender("Sent")
    event = await acknowledge_order(FakeLetterWriter(), sender, make_priced_order(30))
    assert isinstance(event, OrderAcknowledgmentSent)


@pytest.mark.asyncio
async def test_async_sender_is_awaited():
    sender = FakeAsyncSender(SendResult.SENT)
    order = make_priced_order(30)

    event = await acknowledge_order(FakeLetterWriter(), sender, order)

    assert isinstance(event, OrderAcknowledgmentSent)
    assert len(sender.sent) == 1


@pytest.mark.asyncio
async def test_async_sender_not_sent():
    sender = FakeAsyncSender(SendResult.NOT_SENT)
    assert await acknowledge_order(FakeLetterWriter(), sender, make_priced_order(30)) is None


@pytest.mark.asyncio
async def test_unrecognised_send_result_counts_as_not_sent():
    sender = FakeSender("Bounced")
    assert await acknowledge_order(FakeLetterWriter(), sender, make_priced_order(30)) is None


@pytest.mark.parametrize(
    "writer, sender",
    [
        (FakeLetterWriter(exception=RuntimeError("template missing")), FakeSender()),
        (FakeLetterWriter(), FakeSender(exception=ConnectionError("smtp down"))),
    ],
)
@pytest.mark.asyncio
async def test_acknowledgment_failures_are_swallowed(writer, sender):
    assert await acknowledge_order(writer, sender, make_priced_order(30)) is None


# ---------------------------
# Events
# ---------------------------


def test_order_placed_event_is_full_snapshot():
    order = make_priced_order(10, 20)
    event = create_order_placed_event(order)
    assert isinstance(event, OrderPlaced)
    assert event.order_id == order.order_id
    assert event.customer_info == order.customer_info
    assert event.shipping_address == order.shipping_address
    assert event.billing_address == order.billing_address
    assert event.amount_to_bill.value == Decimal("30")
    assert event.lines == order.lines


def test_billing_event_only_when_amount_positive():
    billable = create_billing_event(make_priced_order(1))
    assert isinstance(billable, BillableOrderPlaced)
    assert billable.amount_to_bill.value == Decimal("1")
    assert create_billing_event(make_priced_order(0)) is None
    assert create_billing_event(make_priced_order()) is None


def _types(events) -> list[type]:
    return [type(event) for event in events]


@pytest.mark.parametrize(
    "line_prices, acknowledged, expected",
    [
        ((30,), True, [OrderAcknowledgmentSent, OrderPlaced, BillableOrderPlaced]),
        ((30,), False, [OrderPlaced, BillableOrderPlaced]),
        ((0,), True, [OrderAcknowledgmentSent, OrderPlaced]),
        ((0,), False, [OrderPlaced]),
    ],
)
def test_create_events_order_and_length(line_prices, acknowledged, expected):
    order = make_priced_order(*line_prices)
    ack = (
        OrderAcknowledgmentSent(
            order_id=order.order_id,
            email_address=order.customer_info.email_address,
        )
        if acknowledged
        else None
    )
    events = create_events(order, ack)
    assert _types(events) == expected
    assert 1 <= len(events) <= 3
    if acknowledged:
        assert events[0] is ack


@pytest.mark.parametrize(
    "send_result, ack_expected", [(SendResult.SENT, True), (SendResult.NOT_SENT, False)]
)
@pytest.mark.asyncio
async def test_place_order_events_ack_present_iff_sent(send_result, ack_expected):
    events = await place_order_events(
        FakeLetterWriter(), FakeSender(send_result), make_priced_order(5)
    )
    has_ack = any(isinstance(event, OrderAcknowledgmentSent) for event in events)
    assert has_ack is ack_expected


def test_events_carry_metadata():
    first = create_order_placed_event(make_priced_order(1))
    second = create_order_placed_event(make_priced_order(1))
    assert first.event_type == "OrderPlaced"
    assert first.event_id != second.event_id
    assert first.occurred_on.tzinfo is not None
