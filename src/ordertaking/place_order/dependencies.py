# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ordertaking
"""
Stand-in collaborators for the PlaceOrder workflow.

Each accepts every input: products and addresses always exist, every
product costs the configured default unit price, and every acknowledgment
is sent. Real deployments replace them with service adapters.
"""

from __future__ import annotations

from ordertaking.config import OrderTakingSettings, get_settings
from ordertaking.core.result import Result, Success
from ordertaking.domain import Price, ProductCode
from ordertaking.place_order.public_types import (
    PlaceOrder,
    PricedOrder,
    UnvalidatedAddress,
)
from ordertaking.place_order.workflow import place_order
from ordertaking.place_order.workflow_types import (
    AddressValidationError,
    CheckedAddress,
    GetProductPrice,
    HtmlString,
    OrderAcknowledgment,
    SendResult,
)


def check_product_exists(product_code: ProductCode) -> bool:
    return True


async def check_address_exists(
    unvalidated_address: UnvalidatedAddress,
) -> Result[CheckedAddress, AddressValidationError]:
    return Success(CheckedAddress.from_unvalidated(unvalidated_address))


def get_product_price(settings: OrderTakingSettings | None = None) -> GetProductPrice:
    """Build a price lookup that returns the configured default unit price."""
    price = Price.unsafe_create((settings or get_settings()).default_unit_price)

    def lookup(product_code: ProductCode) -> Price:
        return price

    return lookup


def create_order_acknowledgment_letter(priced_order: PricedOrder) -> HtmlString:
    return HtmlString(value="some text")


def send_order_acknowledgment(order_acknowledgment: OrderAcknowledgment) -> SendResult:
    return SendResult.SENT


def default_place_order(settings: OrderTakingSettings | None = None) -> PlaceOrder:
    """Build the workflow wired to the stand-in collaborators."""
    settings = settings or get_settings()
    return place_order(
        check_product_exists,
        check_address_exists,
        get_product_price(settings),
        create_order_acknowledgment_letter,
        send_order_acknowledgment,
        settings=settings,
    )
