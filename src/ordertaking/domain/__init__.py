# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ordertaking
"""
Domain types shared by the order-taking workflows.
"""

from ordertaking.domain.compound_types import Address, CustomerInfo, PersonalName
from ordertaking.domain.entity import Entity
from ordertaking.domain.errors import (
    CONSTRAINT_VIOLATION,
    VALIDATION,
    ConstraintViolationError,
)
from ordertaking.domain.simple_types import (
    BillingAmount,
    EmailAddress,
    GizmoCode,
    KilogramQuantity,
    OrderId,
    OrderLineId,
    OrderQuantity,
    Price,
    ProductCode,
    String50,
    UnitQuantity,
    WidgetCode,
    ZipCode,
    create_order_quantity,
    create_product_code,
)
from ordertaking.domain.value_object import ValueObject

__all__ = [
    # Base classes
    "Entity",
    "ValueObject",
    # Errors
    "CONSTRAINT_VIOLATION",
    "VALIDATION",
    "ConstraintViolationError",
    # Simple types
    "BillingAmount",
    "EmailAddress",
    "GizmoCode",
    "KilogramQuantity",
    "OrderId",
    "OrderLineId",
    "OrderQuantity",
    "Price",
    "ProductCode",
    "String50",
    "UnitQuantity",
    "WidgetCode",
    "ZipCode",
    "create_order_quantity",
    "create_product_code",
    # Compound types
    "Address",
    "CustomerInfo",
    "PersonalName",
]
