# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ordertaking
"""
Validation step of the PlaceOrder workflow.

Turns an ``UnvalidatedOrder`` into a ``ValidatedOrder``. Every helper
returns a ``Result`` and the first failure ends the step: errors are never
accumulated. Failures from the remote collaborators are re-labelled as
``ValidationError`` so that only one error kind leaves this module.
"""

from __future__ import annotations

from typing import TypeVar, assert_never

from ordertaking.config import OrderTakingSettings, get_settings
from ordertaking.core.result import Failure, Result, Success, sequence
from ordertaking.domain import (
    Address,
    ConstraintViolationError,
    CustomerInfo,
    EmailAddress,
    OrderId,
    OrderLineId,
    OrderQuantity,
    PersonalName,
    ProductCode,
    String50,
    ZipCode,
    create_order_quantity,
    create_product_code,
)
from ordertaking.domain.constrained import Number
from ordertaking.logging import get_logger
from ordertaking.place_order.public_types import (
    RemoteServiceError,
    ServiceInfo,
    UnvalidatedAddress,
    UnvalidatedCustomerInfo,
    UnvalidatedOrder,
    UnvalidatedOrderLine,
    ValidationError,
)
from ordertaking.place_order.workflow_types import (
    AddressNotFound,
    AddressValidationError,
    CheckAddressExists,
    CheckedAddress,
    CheckProductCodeExists,
    InvalidFormat,
    ValidatedOrder,
    ValidatedOrderLine,
)

T = TypeVar("T")

logger = get_logger(__name__)


def _validated(result: Result[T, ConstraintViolationError]) -> Result[T, ValidationError]:
    return result.map_error(ValidationError.from_error)


# ---------------------------
# Customer info and order ids
# ---------------------------


def to_customer_info(
    unvalidated_customer_info: UnvalidatedCustomerInfo,
) -> Result[CustomerInfo, ValidationError]:
    first_name = _validated(
        String50.create(unvalidated_customer_info.first_name, "FirstName")
    )
    if first_name.is_failure:
        return Failure(first_name.error)
    last_name = _validated(
        String50.create(unvalidated_customer_info.last_name, "LastName")
    )
    if last_name.is_failure:
        return Failure(last_name.error)
    email_address = _validated(
        EmailAddress.create(unvalidated_customer_info.email_address, "EmailAddress")
    )
    if email_address.is_failure:
        return Failure(email_address.error)

    name = PersonalName(first_name=first_name.unwrap(), last_name=last_name.unwrap())
    return Success(CustomerInfo(name=name, email_address=email_address.unwrap()))


def to_order_id(order_id: str) -> Result[OrderId, ValidationError]:
    return _validated(OrderId.create(order_id, "OrderId"))


def to_order_line_id(order_line_id: str) -> Result[OrderLineId, ValidationError]:
    return _validated(OrderLineId.create(order_line_id, "OrderLineId"))


# ---------------------------
# Addresses
# ---------------------------


def to_address(checked_address: CheckedAddress) -> Result[Address, ValidationError]:
    """Check the format of each component of an address that is known to exist."""
    address_line1 = _validated(
        String50.create(checked_address.address_line1, "AddressLine1")
    )
    if address_line1.is_failure:
        return Failure(address_line1.error)

    optional_lines: list[String50 | None] = []
    for field_name, raw in (
        ("AddressLine2", checked_address.address_line2),
        ("AddressLine3", checked_address.address_line3),
        ("AddressLine4", checked_address.address_line4),
    ):
        line = _validated(String50.create_option(raw, field_name))
        if line.is_failure:
            return Failure(line.error)
        optional_lines.append(line.unwrap())

    city = _validated(String50.create(checked_address.city, "City"))
    if city.is_failure:
        return Failure(city.error)
    zip_code = _validated(ZipCode.create(checked_address.zip_code, "ZipCode"))
    if zip_code.is_failure:
        return Failure(zip_code.error)

    address_line2, address_line3, address_line4 = optional_lines
    return Success(
        Address(
            address_line1=address_line1.unwrap(),
            address_line2=address_line2,
            address_line3=address_line3,
            address_line4=address_line4,
            city=city.unwrap(),
            zip_code=zip_code.unwrap(),
        )
    )


def address_error_to_validation_error(
    error: AddressValidationError, field_name: str
) -> ValidationError:
    match error:
        case AddressNotFound():
            return ValidationError("Address not found", address_field=field_name)
        case InvalidFormat():
            return ValidationError("Address has bad format", address_field=field_name)
        case _:
            assert_never(error)


async def to_checked_address(
    check_address_exists: CheckAddressExists,
    address: UnvalidatedAddress,
    service: ServiceInfo,
    field_name: str,
) -> Result[CheckedAddress, ValidationError]:
    """Call the remote address check, folding all of its failures into ValidationError."""
    try:
        result = await check_address_exists(address)
    except Exception as exc:
        remote_error = RemoteServiceError(service, exc)
        logger.exception(
            "Address check failed",
            service=service.name,
            address_field=field_name,
        )
        return Failure(ValidationError.from_error(remote_error))
    return result.map_error(
        lambda error: address_error_to_validation_error(error, field_name)
    )


async def to_validated_address(
    check_address_exists: CheckAddressExists,
    address: UnvalidatedAddress,
    service: ServiceInfo,
    field_name: str,
) -> Result[Address, ValidationError]:
    """Check the address exists remotely, then check its format locally."""
    checked_address = await to_checked_address(
        check_address_exists, address, service, field_name
    )
    return checked_address.flat_map(to_address)


# ---------------------------
# Order lines
# ---------------------------


def to_product_code(
    check_product_code_exists: CheckProductCodeExists,
    product_code: str,
    service: ServiceInfo,
) -> Result[ProductCode, ValidationError]:
    """Parse a product code and check that the product exists."""
    code = _validated(create_product_code(product_code, "ProductCode"))
    if code.is_failure:
        return Failure(code.error)

    try:
        exists = check_product_code_exists(code.unwrap())
    except Exception as exc:
        remote_error = RemoteServiceError(service, exc)
        logger.exception("Product code check failed", service=service.name)
        return Failure(ValidationError.from_error(remote_error))

    if not exists:
        return Failure(
            ValidationError(
                f"ProductCode: product '{product_code}' does not exist",
                field_name="ProductCode",
            )
        )
    return code


def to_order_quantity(
    product_code: ProductCode, quantity: Number
) -> Result[OrderQuantity, ValidationError]:
    return _validated(create_order_quantity(product_code, quantity, "Quantity"))


def to_validated_order_line(
    check_product_code_exists: CheckProductCodeExists,
    unvalidated_order_line: UnvalidatedOrderLine,
    product_service: ServiceInfo,
) -> Result[ValidatedOrderLine, ValidationError]:
    order_line_id = to_order_line_id(unvalidated_order_line.order_line_id)
    if order_line_id.is_failure:
        return Failure(order_line_id.error)
    product_code = to_product_code(
        check_product_code_exists,
        unvalidated_order_line.product_code,
        product_service,
    )
    if product_code.is_failure:
        return Failure(product_code.error)
    quantity = to_order_quantity(
        product_code.unwrap(), unvalidated_order_line.quantity
    )
    if quantity.is_failure:
        return Failure(quantity.error)

    return Success(
        ValidatedOrderLine(
            order_line_id=order_line_id.unwrap(),
            product_code=product_code.unwrap(),
            quantity=quantity.unwrap(),
        )
    )


# ---------------------------
# The validation step
# ---------------------------


async def validate_order(
    check_product_code_exists: CheckProductCodeExists,
    check_address_exists: CheckAddressExists,
    unvalidated_order: UnvalidatedOrder,
    settings: OrderTakingSettings | None = None,
) -> Result[ValidatedOrder, ValidationError]:
    """Validate an order, stopping at the first invalid field.

    Fields are checked in this order: order id, customer info, each line in
    input order, then the shipping and billing addresses. Each address is
    first checked remotely and then checked for format.

    Args:
        check_product_code_exists: Existence predicate for product codes
        check_address_exists: Remote address check
        unvalidated_order: The order as submitted
        settings: Source of the collaborators' identities

    Returns:
        Success with the validated order, or the first ValidationError
    """
    settings = settings or get_settings()
    product_service = settings.service_info("price")
    address_service = settings.service_info("address")

    order_id = to_order_id(unvalidated_order.order_id)
    if order_id.is_failure:
        return Failure(order_id.error)

    customer_info = to_customer_info(unvalidated_order.customer_info)
    if customer_info.is_failure:
        return Failure(customer_info.error)

    lines = sequence(
        to_validated_order_line(check_product_code_exists, line, product_service)
        for line in unvalidated_order.lines
    )
    if lines.is_failure:
        return Failure(lines.error)

    shipping_address = await to_validated_address(
        check_address_exists,
        unvalidated_order.shipping_address,
        address_service,
        "ShippingAddress",
    )
    if shipping_address.is_failure:
        return Failure(shipping_address.error)

    billing_address = await to_validated_address(
        check_address_exists,
        unvalidated_order.billing_address,
        address_service,
        "BillingAddress",
    )
    if billing_address.is_failure:
        return Failure(billing_address.error)

    return Success(
        ValidatedOrder(
            order_id=order_id.unwrap(),
            customer_info=customer_info.unwrap(),
            shipping_address=shipping_address.unwrap(),
            billing_address=billing_address.unwrap(),
            lines=tuple(lines.unwrap()),
        )
    )
