# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ordertaking
"""
Acknowledgment step of the PlaceOrder workflow.

An order is placed successfully even if the acknowledgment could not be
sent, so this step has no error channel: it returns an event or None.
"""

from __future__ import annotations

import inspect

from ordertaking.logging import get_logger
from ordertaking.place_order.public_types import OrderAcknowledgmentSent, PricedOrder
from ordertaking.place_order.workflow_types import (
    CreateOrderAcknowledgmentLetter,
    OrderAcknowledgment,
    SendOrderAcknowledgment,
    SendResult,
)

logger = get_logger(__name__)


async def acknowledge_order(
    create_acknowledgment_letter: CreateOrderAcknowledgmentLetter,
    send_acknowledgment: SendOrderAcknowledgment,
    priced_order: PricedOrder,
) -> OrderAcknowledgmentSent | None:
    """Render and send the acknowledgment letter for a priced order.

    The sender may be a plain function or a coroutine function.

    Args:
        create_acknowledgment_letter: Renders the letter
        send_acknowledgment: Delivers the acknowledgment
        priced_order: The order to acknowledge

    Returns:
        OrderAcknowledgmentSent if the sender reports SENT, otherwise None
    """
    order_id = str(priced_order.order_id)
    try:
        letter = create_acknowledgment_letter(priced_order)
        acknowledgment = OrderAcknowledgment(
            email_address=priced_order.customer_info.email_address,
            letter=letter,
        )
        send_result = send_acknowledgment(acknowledgment)
        if inspect.isawaitable(send_result):
            send_result = await send_result
    except Exception:
        logger.exception("Order acknowledgment failed", order_id=order_id)
        return None

    match send_result:
        case SendResult.SENT:
            logger.debug("Order acknowledgment sent", order_id=order_id)
            return OrderAcknowledgmentSent(
                order_id=priced_order.order_id,
                email_address=priced_order.customer_info.email_address,
            )
        case SendResult.NOT_SENT:
            logger.warning("Order acknowledgment not sent", order_id=order_id)
            return None
        case _:
            logger.warning(
                "Unrecognised acknowledgment send result",
                order_id=order_id,
                send_result=send_result,
            )
            return None
