# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ordertaking
"""
End-to-end tests for the PlaceOrder workflow.
"""

import asyncio
from decimal import Decimal

import pytest
from conftest import (
    FakeAddressChecker,
    FakeAsyncSender,
    FakeLetterWriter,
    FakeProductCatalog,
    FakeSender,
    make_line,
    make_order,
)

from ordertaking.place_order import (
    AddressNotFound,
    BillableOrderPlaced,
    OrderAcknowledgmentSent,
    OrderPlaced,
    PricingError,
    RemoteServiceError,
    SendResult,
    ValidationError,
    place_order,
)
from ordertaking.place_order.dependencies import default_place_order


def _workflow(
    settings,
    catalog=None,
    checker=None,
    writer=None,
    sender=None,
):
    catalog = catalog or FakeProductCatalog()
    return place_order(
        catalog.check_product_code_exists,
        checker or FakeAddressChecker(),
        catalog.get_product_price,
        writer or FakeLetterWriter(),
        sender or FakeSender(),
        settings=settings,
    )


@pytest.mark.asyncio
async def test_widget_order_is_priced_billed_and_acknowledged(settings):
    catalog = FakeProductCatalog(default_price=Decimal("10.0"))
    workflow = _workflow(settings, catalog=catalog)

    result = await workflow(make_order(lines=[make_line("W1234", 3)]))

    ack, placed, billable = result.unwrap()
    assert isinstance(ack, OrderAcknowledgmentSent)
    assert isinstance(placed, OrderPlaced)
    assert isinstance(billable, BillableOrderPlaced)
    assert placed.lines[0].line_price.value == Decimal("30.0")
    assert placed.amount_to_bill.value == Decimal("30.0")
    assert billable.amount_to_bill.value == Decimal("30.0")
    assert billable.billing_address == placed.billing_address


@pytest.mark.asyncio
async def test_widget_order_not_acknowledged_when_not_sent(settings):
    catalog = FakeProductCatalog(default_price=Decimal("10.0"))
    workflow = _workflow(
        settings, catalog=catalog, sender=FakeSender(SendResult.NOT_SENT)
    )

    result = await workflow(make_order(lines=[make_line("W1234", 3)]))

    assert [type(event) for event in result.unwrap()] == [
        OrderPlaced,
        BillableOrderPlaced,
    ]


@pytest.mark.asyncio
async def test_async_acknowledgment_sender(settings):
    sender = FakeAsyncSender()
    workflow = _workflow(settings, sender=sender)

    result = await workflow(make_order(lines=[make_line("W1234", 3)]))

    assert [type(event) for event in result.unwrap()] == [
        OrderAcknowledgmentSent,
        OrderPlaced,
        BillableOrderPlaced,
    ]
    assert len(sender.sent) == 1


@pytest.mark.asyncio
async def test_zero_amount_order_is_not_billable(settings):
    catalog = FakeProductCatalog(default_price=0)
    workflow = _workflow(settings, catalog=catalog)

    result = await workflow(make_order(lines=[make_line("G123", 2.5)]))

    events = result.unwrap()
    assert [type(event) for event in events] == [OrderAcknowledgmentSent, OrderPlaced]
    assert events[1].amount_to_bill.value == Decimal("0")


@pytest.mark.asyncio
async def test_unrecognized_product_code_is_a_validation_error(settings):
    catalog = FakeProductCatalog()
    sender = FakeSender()
    workflow = _workflow(settings, catalog=catalog, sender=sender)

    result = await workflow(make_order(lines=[make_line("X9999", 1)]))

    assert result.is_failure
    assert isinstance(result.error, ValidationError)
    assert catalog.price_calls == []
    assert sender.sent == []


@pytest.mark.asyncio
async def test_address_not_found_stops_before_pricing(settings):
    catalog = FakeProductCatalog()
    workflow = _workflow(
        settings, catalog=catalog, checker=FakeAddressChecker(error=AddressNotFound())
    )

    result = await workflow(make_order())

    assert isinstance(result.error, ValidationError)
    assert "Address" in result.error.message
    assert catalog.price_calls == []


@pytest.mark.asyncio
async def test_pricing_error_propagates(settings):
    catalog = FakeProductCatalog(default_price=1000)
    sender = FakeSender()
    workflow = _workflow(settings, catalog=catalog, sender=sender)

    result = await workflow(make_order(lines=[make_line("W1234", 2)]))

    assert isinstance(result.error, PricingError)
    assert sender.sent == []


@pytest.mark.asyncio
async def test_raising_price_lookup_is_a_remote_service_error(settings):
    catalog = FakeProductCatalog(error=TimeoutError("price service timed out"))
    workflow = _workflow(settings, catalog=catalog)

    result = await workflow(make_order())

    assert isinstance(result.error, RemoteServiceError)
    assert result.error.message == "PriceService: price service timed out"


@pytest.mark.asyncio
async def test_failing_acknowledgment_does_not_fail_the_order(settings):
    workflow = _workflow(
        settings,
        writer=FakeLetterWriter(exception=RuntimeError("template missing")),
    )

    result = await workflow(make_order())

    assert [type(event) for event in result.unwrap()] == [
        OrderPlaced,
        BillableOrderPlaced,
    ]


@pytest.mark.asyncio
async def test_independent_orders_can_run_concurrently(settings):
    workflow = _workflow(settings)
    orders = [make_order(order_id=f"order-{i}") for i in range(5)]

    results = await asyncio.gather(*(workflow(order) for order in orders))

    placed_ids = [result.unwrap()[1].order_id.value for result in results]
    assert placed_ids == [f"order-{i}" for i in range(5)]


@pytest.mark.asyncio
async def test_default_collaborators(settings):
    workflow = default_place_order(settings)

    result = await workflow(make_order(lines=[make_line("W1234", 4)]))

    ack, placed, billable = result.unwrap()
    assert ack.email_address.value == "ada@example.com"
    assert placed.amount_to_bill.value == Decimal("4")
    assert billable.order_id.value == "order-1"
