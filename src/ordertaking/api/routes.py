# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ordertaking
"""
HTTP interface to the PlaceOrder workflow.

1) The request body is parsed into an OrderFormDto, then into a domain object
2) The workflow is called
3) The workflow's result is turned into DTOs and an HTTP response
"""

from __future__ import annotations

from typing import Any, assert_never

from fastapi import APIRouter, Depends, FastAPI, Request, status
from fastapi.responses import JSONResponse

from ordertaking.api.schemas import (
    OrderFormDto,
    PlaceOrderErrorDto,
    place_order_event_dto_from_domain,
)
from ordertaking.config import OrderTakingSettings, get_settings
from ordertaking.core.result import Result
from ordertaking.errors import INTERNAL, INTERNAL_ERROR, ErrorSeverity
from ordertaking.logging import get_logger
from ordertaking.place_order.dependencies import default_place_order
from ordertaking.place_order.public_types import (
    PlaceOrder,
    PlaceOrderError,
    PlaceOrderEvent,
    PricingError,
    RemoteServiceError,
    ValidationError,
)

logger = get_logger(__name__)

router = APIRouter(tags=["orders"])


def _status_code_for(error: PlaceOrderError) -> int:
    match error:
        case ValidationError() | PricingError():
            return status.HTTP_400_BAD_REQUEST
        case RemoteServiceError():
            return status.HTTP_502_BAD_GATEWAY
        case _:
            assert_never(error)


def workflow_result_to_http_response(
    result: Result[list[PlaceOrderEvent], PlaceOrderError],
    include_error_context: bool = False,
) -> tuple[int, Any]:
    """Convert the workflow's output into a status code and a JSON body.

    Args:
        result: What the workflow returned
        include_error_context: Whether error bodies carry the error context

    Returns:
        200 with the list of event DTOs, or an error status with the error DTO
    """
    if result.is_success:
        events = [place_order_event_dto_from_domain(event) for event in result.unwrap()]
        return status.HTTP_200_OK, events

    error = result.error
    body = PlaceOrderErrorDto.from_domain(error, include_context=include_error_context)
    return _status_code_for(error), body.to_wire()


def get_place_order_workflow(
    settings: OrderTakingSettings = Depends(get_settings),
) -> PlaceOrder:
    """Workflow wired to the stand-in collaborators; override in applications."""
    return default_place_order(settings)


@router.post("/orders")
async def place_order_endpoint(
    order_form: OrderFormDto,
    workflow: PlaceOrder = Depends(get_place_order_workflow),
    settings: OrderTakingSettings = Depends(get_settings),
) -> JSONResponse:
    """Place an order."""
    unvalidated_order = order_form.to_unvalidated_order()
    result = await workflow(unvalidated_order)
    status_code, body = workflow_result_to_http_response(
        result, include_error_context=settings.include_error_context
    )
    return JSONResponse(status_code=status_code, content=body)


def setup_error_handlers(app: FastAPI) -> None:
    """Register the handler turning unexpected exceptions into a 500 error DTO."""

    @app.exception_handler(Exception)
    async def generic_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.exception(
            "Unhandled exception",
            path=request.url.path,
            code=INTERNAL_ERROR.code,
            category=INTERNAL.name,
            severity=ErrorSeverity.ERROR,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "Code": "InternalError",
                "Message": "An unexpected error occurred",
            },
        )


def create_app(
    workflow: PlaceOrder | None = None,
    settings: OrderTakingSettings | None = None,
) -> FastAPI:
    """Create the FastAPI application exposing the PlaceOrder workflow.

    Args:
        workflow: Replace the default workflow (e.g. with real collaborators)
        settings: Replace the cached settings

    Returns:
        The configured application
    """
    app = FastAPI(title="Order Taking")
    app.include_router(router)
    setup_error_handlers(app)

    if settings is not None:
        app.dependency_overrides[get_settings] = lambda: settings
    if workflow is not None:
        app.dependency_overrides[get_place_order_workflow] = lambda: workflow

    return app
