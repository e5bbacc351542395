# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ordertaking
"""
HTTP surface and DTOs for the order-taking workflows.
"""

from ordertaking.api.routes import (
    create_app,
    router,
    workflow_result_to_http_response,
)
from ordertaking.api.schemas import (
    AddressDto,
    BillableOrderPlacedDto,
    CustomerInfoDto,
    OrderAcknowledgmentSentDto,
    OrderFormDto,
    OrderFormLineDto,
    OrderPlacedDto,
    PlaceOrderErrorDto,
    PricedOrderLineDto,
    place_order_event_dto_from_domain,
)

__all__ = [
    "AddressDto",
    "BillableOrderPlacedDto",
    "CustomerInfoDto",
    "OrderAcknowledgmentSentDto",
    "OrderFormDto",
    "OrderFormLineDto",
    "OrderPlacedDto",
    "PlaceOrderErrorDto",
    "PricedOrderLineDto",
    "create_app",
    "place_order_event_dto_from_domain",
    "router",
    "workflow_result_to_http_response",
]
