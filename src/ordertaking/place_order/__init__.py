# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ordertaking
"""
The PlaceOrder workflow.
"""

from ordertaking.place_order.acknowledgment import acknowledge_order
from ordertaking.place_order.events import (
    create_billing_event,
    create_events,
    create_order_placed_event,
    place_order_events,
)
from ordertaking.place_order.pricing import price_order
from ordertaking.place_order.public_types import (
    PRICING,
    PRICING_ERROR,
    REMOTE_SERVICE,
    REMOTE_SERVICE_ERROR,
    VALIDATION_ERROR,
    BillableOrderPlaced,
    DomainEvent,
    OrderAcknowledgmentSent,
    OrderPlaced,
    PlaceOrder,
    PlaceOrderError,
    PlaceOrderEvent,
    PricedOrder,
    PricedOrderLine,
    PricingError,
    RemoteServiceError,
    ServiceInfo,
    UnvalidatedAddress,
    UnvalidatedCustomerInfo,
    UnvalidatedOrder,
    UnvalidatedOrderLine,
    ValidationError,
    WorkflowError,
)
from ordertaking.place_order.validation import validate_order
from ordertaking.place_order.workflow import place_order
from ordertaking.place_order.workflow_types import (
    AddressNotFound,
    AddressValidationError,
    CheckedAddress,
    HtmlString,
    InvalidFormat,
    OrderAcknowledgment,
    SendResult,
    ValidatedOrder,
    ValidatedOrderLine,
)

__all__ = [
    # Workflow
    "place_order",
    "validate_order",
    "price_order",
    "acknowledge_order",
    "create_order_placed_event",
    "create_billing_event",
    "create_events",
    "place_order_events",
    # Inputs
    "UnvalidatedAddress",
    "UnvalidatedCustomerInfo",
    "UnvalidatedOrder",
    "UnvalidatedOrderLine",
    # Intermediate states
    "CheckedAddress",
    "ValidatedOrder",
    "ValidatedOrderLine",
    "PricedOrder",
    "PricedOrderLine",
    "HtmlString",
    "OrderAcknowledgment",
    "SendResult",
    # Events
    "DomainEvent",
    "BillableOrderPlaced",
    "OrderAcknowledgmentSent",
    "OrderPlaced",
    "PlaceOrderEvent",
    # Errors
    "PRICING",
    "REMOTE_SERVICE",
    "VALIDATION_ERROR",
    "PRICING_ERROR",
    "REMOTE_SERVICE_ERROR",
    "AddressNotFound",
    "AddressValidationError",
    "InvalidFormat",
    "PlaceOrderError",
    "PricingError",
    "RemoteServiceError",
    "ServiceInfo",
    "ValidationError",
    "WorkflowError",
    # Types
    "PlaceOrder",
]
