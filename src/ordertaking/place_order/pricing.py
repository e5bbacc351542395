# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ordertaking
"""
Pricing step of the PlaceOrder workflow.

Synchronous: each line is priced through the price lookup, the line price
is re-checked against the Price bound and the lines are summed into a
bounded BillingAmount. The first failure ends the step.
"""

from __future__ import annotations

from decimal import Decimal

from ordertaking.config import OrderTakingSettings, get_settings
from ordertaking.core.result import Failure, Result, Success, sequence
from ordertaking.domain import BillingAmount, Price
from ordertaking.logging import get_logger
from ordertaking.place_order.public_types import (
    PricedOrder,
    PricedOrderLine,
    PricingError,
    RemoteServiceError,
    ServiceInfo,
)
from ordertaking.place_order.workflow_types import (
    GetProductPrice,
    ValidatedOrder,
    ValidatedOrderLine,
)

logger = get_logger(__name__)


def _unit_price(
    get_product_price: GetProductPrice,
    line: ValidatedOrderLine,
    service: ServiceInfo,
) -> Result[Price, PricingError | RemoteServiceError]:
    try:
        price = get_product_price(line.product_code)
    except Exception as exc:
        logger.exception(
            "Price lookup failed",
            service=service.name,
            product_code=str(line.product_code),
        )
        return Failure(RemoteServiceError(service, exc))

    if isinstance(price, Price):
        return Success(price)
    # A lookup returning a raw amount is still held to the Price bound.
    return Price.create(price, "UnitPrice").map_error(PricingError.from_error)


def to_priced_order_line(
    get_product_price: GetProductPrice,
    validated_order_line: ValidatedOrderLine,
    service: ServiceInfo,
) -> Result[PricedOrderLine, PricingError | RemoteServiceError]:
    """Price one line: unit price times quantity, within the Price bound."""
    unit_price = _unit_price(get_product_price, validated_order_line, service)
    if unit_price.is_failure:
        return Failure(unit_price.error)

    quantity: Decimal | int = validated_order_line.quantity.value
    line_price = (
        unit_price.unwrap()
        .multiply(quantity, "LinePrice")
        .map_error(PricingError.from_error)
    )
    return line_price.map(
        lambda price: PricedOrderLine(
            order_line_id=validated_order_line.order_line_id,
            product_code=validated_order_line.product_code,
            quantity=validated_order_line.quantity,
            line_price=price,
        )
    )


def price_order(
    get_product_price: GetProductPrice,
    validated_order: ValidatedOrder,
    settings: OrderTakingSettings | None = None,
) -> Result[PricedOrder, PricingError | RemoteServiceError]:
    """Price a validated order.

    Args:
        get_product_price: Unit price lookup
        validated_order: The order to price
        settings: Source of the price service identity

    Returns:
        Success with the priced order, a PricingError if a line price or the
        total is out of bounds, or a RemoteServiceError if the lookup raised
    """
    service = (settings or get_settings()).service_info("price")

    lines = sequence(
        to_priced_order_line(get_product_price, line, service)
        for line in validated_order.lines
    )
    if lines.is_failure:
        return Failure(lines.error)
    priced_lines = lines.unwrap()

    amount_to_bill = BillingAmount.sum_prices(
        line.line_price for line in priced_lines
    ).map_error(PricingError.from_error)
    if amount_to_bill.is_failure:
        return Failure(amount_to_bill.error)

    return Success(
        PricedOrder(
            order_id=validated_order.order_id,
            customer_info=validated_order.customer_info,
            shipping_address=validated_order.shipping_address,
            billing_address=validated_order.billing_address,
            amount_to_bill=amount_to_bill.unwrap(),
            lines=tuple(priced_lines),
        )
    )
