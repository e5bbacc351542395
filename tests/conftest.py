# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ordertaking
"""Top-level pytest configuration for the order-taking package."""

from __future__ import annotations

import os
from decimal import Decimal
from typing import Any

import pytest

from ordertaking.config import OrderTakingSettings, clear_settings_cache
from ordertaking.core.result import Failure, Result, Success
from ordertaking.domain import Price, ProductCode
from ordertaking.place_order import (
    AddressNotFound,
    CheckedAddress,
    HtmlString,
    OrderAcknowledgment,
    PricedOrder,
    SendResult,
    UnvalidatedAddress,
    UnvalidatedCustomerInfo,
    UnvalidatedOrder,
    UnvalidatedOrderLine,
)
from ordertaking.place_order.workflow_types import AddressValidationError

# Configure asyncio to be less verbose
os.environ["PYTHONASYNCIODEBUG"] = "0"

pytest_plugins = [
    "pytest_asyncio",
]


# ---------------------------
# Builders
# ---------------------------

# An order form as posted on the wire
ORDER_FORM: dict[str, Any] = {
    "OrderId": "order-1",
    "CustomerInfo": {
        "FirstName": "Ada",
        "LastName": "Lovelace",
        "EmailAddress": "ada@example.com",
    },
    "ShippingAddress": {
        "AddressLine1": "123 Main St",
        "City": "Springfield",
        "ZipCode": "12345",
    },
    "BillingAddress": {
        "AddressLine1": "1 Billing Way",
        "AddressLine2": "Suite 9",
        "City": "Springfield",
        "ZipCode": "12345",
    },
    "Lines": [
        {"OrderLineId": "line-1", "ProductCode": "W1234", "Quantity": 3},
        {"OrderLineId": "line-2", "ProductCode": "G123", "Quantity": 0.5},
    ],
}


def make_address(**overrides: Any) -> UnvalidatedAddress:
    fields: dict[str, Any] = {
        "address_line1": "123 Main St",
        "city": "Springfield",
        "zip_code": "12345",
    }
    fields.update(overrides)
    return UnvalidatedAddress(**fields)


def make_line(
    product_code: str = "W1234",
    quantity: Any = 3,
    order_line_id: str = "line-1",
) -> UnvalidatedOrderLine:
    return UnvalidatedOrderLine(
        order_line_id=order_line_id, product_code=product_code, quantity=quantity
    )


def make_order(
    lines: list[UnvalidatedOrderLine] | None = None, **overrides: Any
) -> UnvalidatedOrder:
    fields: dict[str, Any] = {
        "order_id": "order-1",
        "customer_info": UnvalidatedCustomerInfo(
            first_name="Ada",
            last_name="Lovelace",
            email_address="ada@example.com",
        ),
        "shipping_address": make_address(),
        "billing_address": make_address(address_line1="1 Billing Way"),
        "lines": tuple(lines if lines is not None else [make_line()]),
    }
    fields.update(overrides)
    return UnvalidatedOrder(**fields)


# ---------------------------
# Fake collaborators
# ---------------------------


class FakeProductCatalog:
    """Product existence check and price lookup with call recording."""

    def __init__(
        self,
        prices: dict[str, Decimal | int | float] | None = None,
        default_price: Decimal | int | float = Decimal("10"),
        existing: set[str] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.prices = prices or {}
        self.default_price = default_price
        self.existing = existing
        self.error = error
        self.exists_calls: list[str] = []
        self.price_calls: list[str] = []

    def check_product_code_exists(self, product_code: ProductCode) -> bool:
        self.exists_calls.append(product_code.value)
        if self.existing is None:
            return True
        return product_code.value in self.existing

    def get_product_price(self, product_code: ProductCode) -> Price:
        self.price_calls.append(product_code.value)
        if self.error is not None:
            raise self.error
        return Price.unsafe_create(
            self.prices.get(product_code.value, self.default_price)
        )


class FakeAddressChecker:
    def __init__(
        self,
        error: AddressValidationError | None = None,
        exception: Exception | None = None,
    ) -> None:
        self.error = error
        self.exception = exception
        self.calls: list[UnvalidatedAddress] = []

    async def __call__(
        self, address: UnvalidatedAddress
    ) -> Result[CheckedAddress, AddressValidationError]:
        self.calls.append(address)
        if self.exception is not None:
            raise self.exception
        if self.error is not None:
            return Failure(self.error)
        return Success(CheckedAddress.from_unvalidated(address))


class FakeLetterWriter:
    def __init__(self, exception: Exception | None = None) -> None:
        self.exception = exception
        self.calls: list[PricedOrder] = []

    def __call__(self, priced_order: PricedOrder) -> HtmlString:
        self.calls.append(priced_order)
        if self.exception is not None:
            raise self.exception
        return HtmlString(value=f"<p>Thanks for order {priced_order.order_id}</p>")


class FakeSender:
    def __init__(
        self,
        result: SendResult = SendResult.SENT,
        exception: Exception | None = None,
    ) -> None:
        self.result = result
        self.exception = exception
        self.sent: list[OrderAcknowledgment] = []

    def __call__(self, acknowledgment: OrderAcknowledgment) -> SendResult:
        if self.exception is not None:
            raise self.exception
        self.sent.append(acknowledgment)
        return self.result


class FakeAsyncSender(FakeSender):
    async def __call__(self, acknowledgment: OrderAcknowledgment) -> SendResult:  # type: ignore[override]
        return super().__call__(acknowledgment)


# ---------------------------
# Fixtures
# ---------------------------


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def settings() -> OrderTakingSettings:
    return OrderTakingSettings(
        address_service_name="AddressService",
        price_service_name="PriceService",
    )


@pytest.fixture
def catalog() -> FakeProductCatalog:
    return FakeProductCatalog()


@pytest.fixture
def address_checker() -> FakeAddressChecker:
    return FakeAddressChecker()


@pytest.fixture
def letter_writer() -> FakeLetterWriter:
    return FakeLetterWriter()


@pytest.fixture
def sender() -> FakeSender:
    return FakeSender()


@pytest.fixture
def address_not_found_checker() -> FakeAddressChecker:
    return FakeAddressChecker(error=AddressNotFound())
