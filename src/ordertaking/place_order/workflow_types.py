# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ordertaking
"""
Types internal to the PlaceOrder workflow.

These are not exposed outside the bounded context: the intermediate order
states and the signatures of the collaborators the workflow depends on.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from enum import Enum
from typing import Any, Final, Self

from ordertaking.core.result import Result
from ordertaking.domain import (
    VALIDATION,
    Address,
    CustomerInfo,
    EmailAddress,
    OrderId,
    OrderLineId,
    OrderQuantity,
    Price,
    ProductCode,
    ValueObject,
)
from ordertaking.errors.base import ErrorCode, ErrorSeverity, OrderTakingError
from ordertaking.place_order.public_types import PricedOrder, UnvalidatedAddress

# ---------------------------
# Validation step
# ---------------------------

# Product validation
CheckProductCodeExists = Callable[[ProductCode], bool]


# Address validation
class CheckedAddress(UnvalidatedAddress):
    """An address the remote service has confirmed exists.

    The components are still raw strings; their format is checked locally
    afterwards.
    """

    @classmethod
    def from_unvalidated(cls, address: UnvalidatedAddress) -> Self:
        return cls.model_validate(address.model_dump())


ADDRESS_NOT_FOUND: Final = ErrorCode.get_or_create("ADDRESS_NOT_FOUND", VALIDATION)
ADDRESS_INVALID_FORMAT: Final = ErrorCode.get_or_create(
    "ADDRESS_INVALID_FORMAT", VALIDATION
)


class AddressCheckError(OrderTakingError):
    """Base for the failures reported by the address checking service."""


class AddressNotFound(AddressCheckError):
    def __init__(self, message: str = "Address not found", **context: Any) -> None:
        super().__init__(
            message=message,
            code=ADDRESS_NOT_FOUND,
            severity=ErrorSeverity.WARNING,
            **context,
        )


class InvalidFormat(AddressCheckError):
    def __init__(self, message: str = "Address has bad format", **context: Any) -> None:
        super().__init__(
            message=message,
            code=ADDRESS_INVALID_FORMAT,
            severity=ErrorSeverity.WARNING,
            **context,
        )


AddressValidationError = AddressNotFound | InvalidFormat

CheckAddressExists = Callable[
    [UnvalidatedAddress], Awaitable[Result[CheckedAddress, AddressValidationError]]
]


# ---------------------------
# Validated Order
# ---------------------------


class ValidatedOrderLine(ValueObject):
    order_line_id: OrderLineId
    product_code: ProductCode
    quantity: OrderQuantity


class ValidatedOrder(ValueObject):
    order_id: OrderId
    customer_info: CustomerInfo
    shipping_address: Address
    billing_address: Address
    lines: tuple[ValidatedOrderLine, ...]


# ---------------------------
# Pricing step
# ---------------------------

GetProductPrice = Callable[[ProductCode], Price]


# ---------------------------
# Send OrderAcknowledgment
# ---------------------------


class HtmlString(ValueObject):
    """Rendered letter body."""

    value: str

    def __str__(self) -> str:
        return self.value


class OrderAcknowledgment(ValueObject):
    email_address: EmailAddress
    letter: HtmlString


CreateOrderAcknowledgmentLetter = Callable[[PricedOrder], HtmlString]


class SendResult(str, Enum):
    """Outcome reported by the acknowledgment sender."""

    SENT = "Sent"
    NOT_SENT = "NotSent"


# Send the order acknowledgment to the customer.
# Note that this does NOT generate a Result-type success/failure.
SendOrderAcknowledgment = Callable[
    [OrderAcknowledgment], SendResult | Awaitable[SendResult]
]
