# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ordertaking
"""
The PlaceOrder workflow: validate, price, acknowledge, emit events.

Collaborators are injected once through ``place_order``, which returns the
workflow as a coroutine function over unvalidated orders.
"""

from __future__ import annotations

from ordertaking.config import OrderTakingSettings, get_settings
from ordertaking.core.result import Failure, Result, Success
from ordertaking.logging import LoggerProtocol, get_logger
from ordertaking.place_order.events import place_order_events
from ordertaking.place_order.pricing import price_order
from ordertaking.place_order.public_types import (
    PlaceOrder,
    PlaceOrderError,
    PlaceOrderEvent,
    UnvalidatedOrder,
)
from ordertaking.place_order.validation import validate_order
from ordertaking.place_order.workflow_types import (
    CheckAddressExists,
    CheckProductCodeExists,
    CreateOrderAcknowledgmentLetter,
    GetProductPrice,
    SendOrderAcknowledgment,
)


def place_order(
    check_product_code_exists: CheckProductCodeExists,
    check_address_exists: CheckAddressExists,
    get_product_price: GetProductPrice,
    create_order_acknowledgment_letter: CreateOrderAcknowledgmentLetter,
    send_order_acknowledgment: SendOrderAcknowledgment,
    settings: OrderTakingSettings | None = None,
    logger: LoggerProtocol | None = None,
) -> PlaceOrder:
    """Build the PlaceOrder workflow from its collaborators.

    Args:
        check_product_code_exists: Existence predicate for product codes
        check_address_exists: Remote address check
        get_product_price: Unit price lookup
        create_order_acknowledgment_letter: Renders the acknowledgment letter
        send_order_acknowledgment: Delivers the acknowledgment
        settings: Workflow settings (defaults to the cached settings)
        logger: Logger to use (defaults to this module's logger)

    Returns:
        A coroutine function taking an UnvalidatedOrder and returning either
        the list of events to publish or the first error met
    """
    settings = settings or get_settings()
    log = logger or get_logger(__name__)

    async def workflow(
        unvalidated_order: UnvalidatedOrder,
    ) -> Result[list[PlaceOrderEvent], PlaceOrderError]:
        order_log = log.bind(order_id=unvalidated_order.order_id)
        order_log.info("Placing order", lines=len(unvalidated_order.lines))

        validated_order = await validate_order(
            check_product_code_exists,
            check_address_exists,
            unvalidated_order,
            settings,
        )
        if validated_order.is_failure:
            error = validated_order.error
            order_log.warning(
                "Order validation failed", code=error.code.code, reason=error.message
            )
            return Failure(error)

        priced_order = price_order(
            get_product_price, validated_order.unwrap(), settings
        )
        if priced_order.is_failure:
            error = priced_order.error
            order_log.warning(
                "Order pricing failed", code=error.code.code, reason=error.message
            )
            return Failure(error)

        events = await place_order_events(
            create_order_acknowledgment_letter,
            send_order_acknowledgment,
            priced_order.unwrap(),
        )
        order_log.info(
            "Order placed",
            amount_to_bill=priced_order.unwrap().amount_to_bill.value,
            events=[event.event_type for event in events],
        )
        return Success(events)

    return workflow
