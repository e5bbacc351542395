# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ordertaking
"""
API schemas (DTOs) for the PlaceOrder workflow.

DTOs are made of primitive, serializable types and use the PascalCase field
names of the order form on the wire. Inbound DTOs convert to the
unvalidated domain types; outbound DTOs are built from domain objects with
``from_domain``.
"""

from __future__ import annotations

from typing import Any, ClassVar, Self, assert_never

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ordertaking.core.result import Failure, Result, Success
from ordertaking.domain import (
    Address,
    ConstraintViolationError,
    CustomerInfo,
    EmailAddress,
    PersonalName,
    String50,
    ZipCode,
)
from ordertaking.domain.constrained import reject_bool
from ordertaking.place_order.public_types import (
    BillableOrderPlaced,
    OrderAcknowledgmentSent,
    OrderPlaced,
    PlaceOrderError,
    PlaceOrderEvent,
    PricedOrderLine,
    PricingError,
    RemoteServiceError,
    UnvalidatedAddress,
    UnvalidatedCustomerInfo,
    UnvalidatedOrder,
    UnvalidatedOrderLine,
    ValidationError,
)


class Dto(BaseModel):
    """Base class for the workflow's DTOs."""

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True,
        populate_by_name=True,
    )

    def to_wire(self) -> dict[str, Any]:
        """JSON-compatible dict using the wire field names."""
        return self.model_dump(mode="json", by_alias=True)


# ===============================================
# DTO for CustomerInfo
# ===============================================


class CustomerInfoDto(Dto):
    first_name: str = Field(alias="FirstName")
    last_name: str = Field(alias="LastName")
    email_address: str = Field(alias="EmailAddress")

    def to_unvalidated_customer_info(self) -> UnvalidatedCustomerInfo:
        """Always succeeds: there is no validation at this point."""
        return UnvalidatedCustomerInfo(
            first_name=self.first_name,
            last_name=self.last_name,
            email_address=self.email_address,
        )

    def to_customer_info(self) -> Result[CustomerInfo, ConstraintViolationError]:
        """Convert to a validated CustomerInfo, e.g. when loading stored data."""
        first_name = String50.create(self.first_name, "FirstName")
        if first_name.is_failure:
            return Failure(first_name.error)
        last_name = String50.create(self.last_name, "LastName")
        if last_name.is_failure:
            return Failure(last_name.error)
        email_address = EmailAddress.create(self.email_address, "EmailAddress")
        if email_address.is_failure:
            return Failure(email_address.error)

        name = PersonalName(first_name=first_name.unwrap(), last_name=last_name.unwrap())
        return Success(CustomerInfo(name=name, email_address=email_address.unwrap()))

    @classmethod
    def from_domain(cls, customer_info: CustomerInfo) -> Self:
        return cls(
            first_name=customer_info.name.first_name.value,
            last_name=customer_info.name.last_name.value,
            email_address=customer_info.email_address.value,
        )


# ===============================================
# DTO for Address
# ===============================================


class AddressDto(Dto):
    address_line1: str = Field(alias="AddressLine1")
    address_line2: str | None = Field(default=None, alias="AddressLine2")
    address_line3: str | None = Field(default=None, alias="AddressLine3")
    address_line4: str | None = Field(default=None, alias="AddressLine4")
    city: str = Field(alias="City")
    zip_code: str = Field(alias="ZipCode")

    def to_unvalidated_address(self) -> UnvalidatedAddress:
        """Always succeeds: there is no validation at this point."""
        return UnvalidatedAddress(
            address_line1=self.address_line1,
            address_line2=self.address_line2,
            address_line3=self.address_line3,
            address_line4=self.address_line4,
            city=self.city,
            zip_code=self.zip_code,
        )

    def to_address(self) -> Result[Address, ConstraintViolationError]:
        """Convert to a validated Address, e.g. when loading stored data."""
        address_line1 = String50.create(self.address_line1, "AddressLine1")
        if address_line1.is_failure:
            return Failure(address_line1.error)
        address_line2 = String50.create_option(self.address_line2, "AddressLine2")
        if address_line2.is_failure:
            return Failure(address_line2.error)
        address_line3 = String50.create_option(self.address_line3, "AddressLine3")
        if address_line3.is_failure:
            return Failure(address_line3.error)
        address_line4 = String50.create_option(self.address_line4, "AddressLine4")
        if address_line4.is_failure:
            return Failure(address_line4.error)
        city = String50.create(self.city, "City")
        if city.is_failure:
            return Failure(city.error)
        zip_code = ZipCode.create(self.zip_code, "ZipCode")
        if zip_code.is_failure:
            return Failure(zip_code.error)

        return Success(
            Address(
                address_line1=address_line1.unwrap(),
                address_line2=address_line2.unwrap(),
                address_line3=address_line3.unwrap(),
                address_line4=address_line4.unwrap(),
                city=city.unwrap(),
                zip_code=zip_code.unwrap(),
            )
        )

    @classmethod
    def from_domain(cls, address: Address) -> Self:
        def optional(line: String50 | None) -> str | None:
            return line.value if line is not None else None

        return cls(
            address_line1=address.address_line1.value,
            address_line2=optional(address.address_line2),
            address_line3=optional(address.address_line3),
            address_line4=optional(address.address_line4),
            city=address.city.value,
            zip_code=address.zip_code.value,
        )


# ===============================================
# DTOs for order lines
# ===============================================


class OrderFormLineDto(Dto):
    """A line of the order form used as input."""

    order_line_id: str = Field(alias="OrderLineId")
    product_code: str = Field(alias="ProductCode")
    quantity: float = Field(alias="Quantity")

    @field_validator("quantity", mode="before")
    @classmethod
    def _quantity_is_not_bool(cls, v: Any) -> Any:
        return reject_bool(v)

    def to_unvalidated_order_line(self) -> UnvalidatedOrderLine:
        return UnvalidatedOrderLine(
            order_line_id=self.order_line_id,
            product_code=self.product_code,
            quantity=self.quantity,
        )


class PricedOrderLineDto(Dto):
    """A priced line in the output of the workflow."""

    order_line_id: str = Field(alias="OrderLineId")
    product_code: str = Field(alias="ProductCode")
    quantity: float = Field(alias="Quantity")
    line_price: float = Field(alias="LinePrice")

    @classmethod
    def from_domain(cls, line: PricedOrderLine) -> Self:
        return cls(
            order_line_id=line.order_line_id.value,
            product_code=line.product_code.value,
            quantity=float(line.quantity.value),
            line_price=float(line.line_price.value),
        )


# ===============================================
# DTO for OrderForm
# ===============================================


class OrderFormDto(Dto):
    order_id: str = Field(alias="OrderId")
    customer_info: CustomerInfoDto = Field(alias="CustomerInfo")
    shipping_address: AddressDto = Field(alias="ShippingAddress")
    billing_address: AddressDto = Field(alias="BillingAddress")
    lines: list[OrderFormLineDto] = Field(alias="Lines")

    def to_unvalidated_order(self) -> UnvalidatedOrder:
        """Always succeeds: validation is the workflow's job."""
        return UnvalidatedOrder(
            order_id=self.order_id,
            customer_info=self.customer_info.to_unvalidated_customer_info(),
            shipping_address=self.shipping_address.to_unvalidated_address(),
            billing_address=self.billing_address.to_unvalidated_address(),
            lines=tuple(line.to_unvalidated_order_line() for line in self.lines),
        )


# ===============================================
# DTOs for the events
# ===============================================


class OrderPlacedDto(Dto):
    """Event to send to the shipping context."""

    order_id: str = Field(alias="OrderId")
    customer_info: CustomerInfoDto = Field(alias="CustomerInfo")
    shipping_address: AddressDto = Field(alias="ShippingAddress")
    billing_address: AddressDto = Field(alias="BillingAddress")
    amount_to_bill: float = Field(alias="AmountToBill")
    lines: list[PricedOrderLineDto] = Field(alias="Lines")

    @classmethod
    def from_domain(cls, event: OrderPlaced) -> Self:
        return cls(
            order_id=event.order_id.value,
            customer_info=CustomerInfoDto.from_domain(event.customer_info),
            shipping_address=AddressDto.from_domain(event.shipping_address),
            billing_address=AddressDto.from_domain(event.billing_address),
            amount_to_bill=float(event.amount_to_bill.value),
            lines=[PricedOrderLineDto.from_domain(line) for line in event.lines],
        )


class BillableOrderPlacedDto(Dto):
    """Event to send to the billing context."""

    order_id: str = Field(alias="OrderId")
    billing_address: AddressDto = Field(alias="BillingAddress")
    amount_to_bill: float = Field(alias="AmountToBill")

    @classmethod
    def from_domain(cls, event: BillableOrderPlaced) -> Self:
        return cls(
            order_id=event.order_id.value,
            billing_address=AddressDto.from_domain(event.billing_address),
            amount_to_bill=float(event.amount_to_bill.value),
        )


class OrderAcknowledgmentSentDto(Dto):
    order_id: str = Field(alias="OrderId")
    email_address: str = Field(alias="EmailAddress")

    @classmethod
    def from_domain(cls, event: OrderAcknowledgmentSent) -> Self:
        return cls(
            order_id=event.order_id.value,
            email_address=event.email_address.value,
        )


def place_order_event_dto_from_domain(event: PlaceOrderEvent) -> dict[str, Any]:
    """Represent an event as a single-key mapping from event name to payload."""
    match event:
        case OrderPlaced():
            return {"OrderPlaced": OrderPlacedDto.from_domain(event).to_wire()}
        case BillableOrderPlaced():
            return {
                "BillableOrderPlaced": BillableOrderPlacedDto.from_domain(event).to_wire()
            }
        case OrderAcknowledgmentSent():
            return {
                "OrderAcknowledgmentSent": OrderAcknowledgmentSentDto.from_domain(
                    event
                ).to_wire()
            }
        case _:
            assert_never(event)


# ===============================================
# DTO for PlaceOrderError
# ===============================================


class PlaceOrderErrorDto(Dto):
    code: str = Field(alias="Code")
    message: str = Field(alias="Message")
    context: dict[str, str] | None = Field(default=None, alias="Context")

    @classmethod
    def from_domain(
        cls, error: PlaceOrderError, include_context: bool = False
    ) -> Self:
        context = (
            {key: str(value) for key, value in error.context.items()}
            if include_context
            else None
        )
        match error:
            case ValidationError():
                return cls(code="ValidationError", message=error.message, context=context)
            case PricingError():
                return cls(code="PricingError", message=error.message, context=context)
            case RemoteServiceError():
                return cls(
                    code="RemoteServiceError",
                    message=f"{error.service.name}: {error.exception}",
                    context=context,
                )
            case _:
                assert_never(error)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
