# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ordertaking
"""
Simple types and constrained types related to the order-taking domain.

Every type wraps a single primitive. The ``create`` class methods are the
supported way in: they validate the raw value and return a ``Result``.
Constructing a type directly still enforces the same invariant, raising
``pydantic.ValidationError`` for bad input, so no instance can ever hold an
out-of-bounds value.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal
from typing import ClassVar, Self, assert_never

from pydantic import model_validator

from ordertaking.core.result import Failure, Result
from ordertaking.domain.constrained import (
    Number,
    create_like,
    create_number,
    create_string,
    create_string_option,
    number_violation,
    pattern_violation,
    string_violation,
    to_decimal,
)
from ordertaking.domain.errors import ConstraintViolationError
from ordertaking.domain.value_object import ValueObject

# ===============================
# Strings
# ===============================


class ConstrainedString(ValueObject):
    """A non-empty string of at most ``max_length`` characters."""

    value: str
    max_length: ClassVar[int] = 50

    @model_validator(mode="after")
    def _check_length(self) -> Self:
        detail = string_violation(self.value, self.max_length)
        if detail is not None:
            raise ValueError(f"{type(self).__name__}: {detail}")
        return self

    @classmethod
    def create(
        cls, value: str | None, field_name: str | None = None
    ) -> Result[Self, ConstraintViolationError]:
        return create_string(
            field_name or cls.__name__, lambda v: cls(value=v), cls.max_length, value
        )

    def __str__(self) -> str:
        return self.value


class String50(ConstrainedString):
    """Constrained to be 50 chars or less, not null."""

    @classmethod
    def create_option(
        cls, value: str | None, field_name: str | None = None
    ) -> Result[Self | None, ConstraintViolationError]:
        """Like ``create``, but an empty input means "absent" instead of failing."""
        return create_string_option(
            field_name or cls.__name__, lambda v: cls(value=v), cls.max_length, value
        )


class OrderId(ConstrainedString):
    """An Id for Orders. Constrained to be a non-empty string <= 50 chars."""


class OrderLineId(ConstrainedString):
    """An Id for OrderLines. Constrained to be a non-empty string <= 50 chars."""


class PatternString(ValueObject):
    """A non-empty string matching ``pattern`` in full."""

    value: str
    pattern: ClassVar[str]

    @model_validator(mode="after")
    def _check_pattern(self) -> Self:
        detail = pattern_violation(self.value, self.pattern)
        if detail is not None:
            raise ValueError(f"{type(self).__name__}: {detail}")
        return self

    @classmethod
    def create(
        cls, value: str | None, field_name: str | None = None
    ) -> Result[Self, ConstraintViolationError]:
        return create_like(
            field_name or cls.__name__, lambda v: cls(value=v), cls.pattern, value
        )

    def __str__(self) -> str:
        return self.value


class EmailAddress(PatternString):
    """An email address: anything separated by an "@"."""

    pattern = r".+@.+"


class ZipCode(PatternString):
    """A zip code of exactly five digits."""

    pattern = r"\d{5}"


# ===============================
# Product codes
# ===============================


class WidgetCode(PatternString):
    """The codes for Widgets start with a "W" and then four digits."""

    pattern = r"W\d{4}"


class GizmoCode(PatternString):
    """The codes for Gizmos start with a "G" and then three digits."""

    pattern = r"G\d{3}"


ProductCode = WidgetCode | GizmoCode


def create_product_code(
    value: str | None, field_name: str = "ProductCode"
) -> Result[ProductCode, ConstraintViolationError]:
    """Create a ProductCode, choosing the variant from the leading character."""
    if not value:
        return Failure(ConstraintViolationError(field_name, "must not be null or empty"))
    if value.startswith("W"):
        return WidgetCode.create(value, field_name)
    if value.startswith("G"):
        return GizmoCode.create(value, field_name)
    return Failure(
        ConstraintViolationError(field_name, f"format not recognized '{value}'")
    )


# ===============================
# Quantities and amounts
# ===============================


class ConstrainedDecimal(ValueObject):
    """A decimal within ``[min_value, max_value]``."""

    value: Decimal
    min_value: ClassVar[Decimal]
    max_value: ClassVar[Decimal]

    @model_validator(mode="after")
    def _check_bounds(self) -> Self:
        detail = number_violation(self.value, self.min_value, self.max_value)
        if detail is not None:
            raise ValueError(f"{type(self).__name__}: {detail}")
        return self

    @classmethod
    def create(
        cls, value: Number | None, field_name: str | None = None
    ) -> Result[Self, ConstraintViolationError]:
        return create_number(
            field_name or cls.__name__,
            lambda v: cls(value=v),
            cls.min_value,
            cls.max_value,
            value,
        )


class UnitQuantity(ValueObject):
    """Constrained to be an integer between 1 and 1000."""

    value: int
    min_value: ClassVar[int] = 1
    max_value: ClassVar[int] = 1000

    @model_validator(mode="after")
    def _check_bounds(self) -> Self:
        detail = number_violation(Decimal(self.value), self.min_value, self.max_value)
        if detail is not None:
            raise ValueError(f"UnitQuantity: {detail}")
        return self

    @classmethod
    def create(
        cls, value: Number | None, field_name: str | None = None
    ) -> Result[Self, ConstraintViolationError]:
        """Create a UnitQuantity; fractional input is rejected, not truncated."""
        field_name = field_name or cls.__name__
        number = to_decimal(value)
        if number is not None and number != number.to_integral_value():
            return Failure(
                ConstraintViolationError(
                    field_name, "must be a whole number", value=str(number)
                )
            )
        return create_number(
            field_name,
            lambda v: cls(value=int(v)),
            cls.min_value,
            cls.max_value,
            number,
        )


class KilogramQuantity(ConstrainedDecimal):
    """Constrained to be a decimal between 0.05 and 100.00."""

    min_value = Decimal("0.05")
    max_value = Decimal("100")


OrderQuantity = UnitQuantity | KilogramQuantity


def create_order_quantity(
    product_code: ProductCode,
    value: Number | None,
    field_name: str = "OrderQuantity",
) -> Result[OrderQuantity, ConstraintViolationError]:
    """Create the quantity variant required by the product code's variant."""
    match product_code:
        case WidgetCode():
            return UnitQuantity.create(value, field_name)
        case GizmoCode():
            return KilogramQuantity.create(value, field_name)
        case _:
            assert_never(product_code)


class Price(ConstrainedDecimal):
    """Constrained to be a decimal between 0.0 and 1000.00."""

    min_value = Decimal("0")
    max_value = Decimal("1000")

    @classmethod
    def unsafe_create(cls, value: Number) -> Price:
        """Create a Price from a value known to be within bounds.

        Raises:
            ValueError: If the value is out of bounds after all
        """
        result = cls.create(value)
        if result.is_failure:
            raise ValueError(
                f"Not expecting Price to be out of bounds: {result.error}"
            ) from result.error
        return result.unwrap()

    def multiply(
        self, quantity: Decimal | int, field_name: str = "Price"
    ) -> Result[Price, ConstraintViolationError]:
        """Multiply by a quantity; the product must still be a valid Price."""
        return Price.create(self.value * Decimal(quantity), field_name)


class BillingAmount(ConstrainedDecimal):
    """Constrained to be a decimal between 0.0 and 10000.00."""

    min_value = Decimal("0")
    max_value = Decimal("10000")

    @classmethod
    def sum_prices(
        cls, prices: Iterable[Price], field_name: str = "AmountToBill"
    ) -> Result[BillingAmount, ConstraintViolationError]:
        """Sum a list of prices into a billing amount; no prices sum to zero."""
        total = sum((price.value for price in prices), Decimal("0"))
        return cls.create(total, field_name)
