# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ordertaking
"""
Public types of the PlaceOrder workflow.

These are the types exposed at the boundary of the bounded context: the
workflow's input, the events it emits on success and the errors it returns
on failure.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from datetime import UTC, datetime
from decimal import Decimal
from typing import Any, ClassVar, Final, Self
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ordertaking.core.result import Result
from ordertaking.domain import (
    VALIDATION,
    Address,
    BillingAmount,
    CustomerInfo,
    EmailAddress,
    Entity,
    OrderId,
    OrderLineId,
    OrderQuantity,
    Price,
    ProductCode,
    ValueObject,
)
from ordertaking.domain.constrained import reject_bool
from ordertaking.errors.base import (
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
    OrderTakingError,
)

# ------------------------------------
# inputs to the workflow


class UnvalidatedCustomerInfo(ValueObject):
    first_name: str
    last_name: str
    email_address: str


class UnvalidatedAddress(ValueObject):
    address_line1: str
    address_line2: str | None = None
    address_line3: str | None = None
    address_line4: str | None = None
    city: str
    zip_code: str


class UnvalidatedOrderLine(ValueObject):
    order_line_id: str
    product_code: str
    quantity: Decimal | int | float

    @field_validator("quantity", mode="before")
    @classmethod
    def _quantity_is_not_bool(cls, v: Any) -> Any:
        return reject_bool(v)


class UnvalidatedOrder(ValueObject):
    """An order as submitted by the client; nothing has been checked yet."""

    order_id: str
    customer_info: UnvalidatedCustomerInfo
    shipping_address: UnvalidatedAddress
    billing_address: UnvalidatedAddress
    lines: tuple[UnvalidatedOrderLine, ...] = ()


# ------------------------------------
# priced state


class PricedOrderLine(Entity):
    order_line_id: OrderLineId
    product_code: ProductCode
    quantity: OrderQuantity
    line_price: Price

    @property
    def id(self) -> OrderLineId:
        return self.order_line_id


class PricedOrder(Entity):
    """A validated order with a price on every line and a total to bill.

    ``amount_to_bill`` is the bounded sum of the line prices.
    """

    order_id: OrderId
    customer_info: CustomerInfo
    shipping_address: Address
    billing_address: Address
    amount_to_bill: BillingAmount
    lines: tuple[PricedOrderLine, ...]

    @property
    def id(self) -> OrderId:
        return self.order_id


# ------------------------------------
# outputs from the workflow (success case)


class DomainEvent(BaseModel):
    """Base class for the events emitted by the workflow.

    Domain events represent facts that have occurred; they are immutable.
    """

    event_id: UUID = Field(default_factory=uuid4)
    event_type: str = Field(default="", validate_default=True)
    occurred_on: datetime = Field(default_factory=lambda: datetime.now(UTC))

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )

    @field_validator("event_type", mode="before")
    @classmethod
    def validate_event_type(cls, v: Any) -> str:
        """Default the event type to the class name."""
        if isinstance(v, str) and v:
            return v
        return cls.__name__


class OrderAcknowledgmentSent(DomainEvent):
    """Emitted only if the acknowledgment was successfully sent."""

    order_id: OrderId
    email_address: EmailAddress


class OrderPlaced(DomainEvent):
    """Event to send to the shipping context."""

    order_id: OrderId
    customer_info: CustomerInfo
    shipping_address: Address
    billing_address: Address
    amount_to_bill: BillingAmount
    lines: tuple[PricedOrderLine, ...]


class BillableOrderPlaced(DomainEvent):
    """Event to send to the billing context.

    Only emitted when the amount to bill is greater than zero.
    """

    order_id: OrderId
    billing_address: Address
    amount_to_bill: BillingAmount


PlaceOrderEvent = OrderAcknowledgmentSent | OrderPlaced | BillableOrderPlaced


# ------------------------------------
# error outputs

PRICING = ErrorCategory.get_or_create("PRICING")
REMOTE_SERVICE = ErrorCategory.get_or_create("REMOTE_SERVICE")

VALIDATION_ERROR: Final = ErrorCode.get_or_create("VALIDATION_ERROR", VALIDATION)
PRICING_ERROR: Final = ErrorCode.get_or_create("PRICING_ERROR", PRICING)
REMOTE_SERVICE_ERROR: Final = ErrorCode.get_or_create(
    "REMOTE_SERVICE_ERROR", REMOTE_SERVICE
)


class ServiceInfo(ValueObject):
    """Identity of a remote collaborator."""

    name: str
    endpoint: str


class WorkflowError(OrderTakingError):
    """Common base of the errors returned by the PlaceOrder workflow."""

    @classmethod
    def from_error(cls, error: OrderTakingError) -> Self:
        """Re-label a lower-level error, keeping its message and context."""
        new_error = cls(error.message, **error.context)
        new_error.__cause__ = error
        return new_error


class ValidationError(WorkflowError):
    """A field of the order is malformed or refers to something that does not exist."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(
            message=message,
            code=VALIDATION_ERROR,
            severity=ErrorSeverity.WARNING,
            **context,
        )


class PricingError(WorkflowError):
    """A line price or the order total falls outside its bound."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(
            message=message,
            code=PRICING_ERROR,
            severity=ErrorSeverity.WARNING,
            **context,
        )


class RemoteServiceError(WorkflowError):
    """A remote collaborator failed in a way the workflow cannot interpret."""

    def __init__(self, service: ServiceInfo, exception: Exception) -> None:
        super().__init__(
            message=f"{service.name}: {exception}",
            code=REMOTE_SERVICE_ERROR,
            severity=ErrorSeverity.ERROR,
            service=service.name,
            endpoint=service.endpoint,
        )
        self.service = service
        self.exception = exception
        self.__cause__ = exception


PlaceOrderError = ValidationError | PricingError | RemoteServiceError

# ------------------------------------
# the workflow itself

PlaceOrder = Callable[
    [UnvalidatedOrder], Awaitable[Result[list[PlaceOrderEvent], PlaceOrderError]]
]
