# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ordertaking
"""Workflow settings loading and caching.

Settings come from environment variables (prefix ``ORDERTAKING_``) and an
optional ``.env`` file, through pydantic-settings.
"""

from __future__ import annotations

import threading
from decimal import Decimal
from typing import TYPE_CHECKING, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ordertaking.config.environment import Environment
from ordertaking.config.errors import ConfigError

if TYPE_CHECKING:
    from ordertaking.place_order.public_types import ServiceInfo

ServiceKind = Literal["address", "price", "acknowledgment"]


class OrderTakingSettings(BaseSettings):
    """Settings for the place-order workflow and its collaborators."""

    model_config = SettingsConfigDict(
        env_prefix="ORDERTAKING_",
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Environment = Field(default_factory=Environment.get_current)

    address_service_name: str = "AddressCheckingService"
    address_service_endpoint: str = "http://localhost:8081/addresses/check"
    price_service_name: str = "ProductCatalogService"
    price_service_endpoint: str = "http://localhost:8082/products/price"
    acknowledgment_service_name: str = "AcknowledgmentService"
    acknowledgment_service_endpoint: str = "http://localhost:8083/acknowledgments"

    default_unit_price: Decimal = Field(
        default=Decimal("1"),
        ge=0,
        le=1000,
        description="Unit price returned by the stand-in price lookup",
    )
    include_error_context: bool = Field(
        default=False, description="Expose error context in API error responses"
    )

    def service_info(self, kind: ServiceKind) -> ServiceInfo:
        """Build the identity of one of the remote collaborators.

        Args:
            kind: Which collaborator to describe

        Returns:
            The service's name and endpoint

        Raises:
            ConfigError: If the kind is unknown
        """
        from ordertaking.place_order.public_types import ServiceInfo

        match kind:
            case "address":
                return ServiceInfo(
                    name=self.address_service_name,
                    endpoint=self.address_service_endpoint,
                )
            case "price":
                return ServiceInfo(
                    name=self.price_service_name,
                    endpoint=self.price_service_endpoint,
                )
            case "acknowledgment":
                return ServiceInfo(
                    name=self.acknowledgment_service_name,
                    endpoint=self.acknowledgment_service_endpoint,
                )
        raise ConfigError(f"Unknown service kind: {kind}", context={"kind": kind})


_settings: OrderTakingSettings | None = None
_settings_lock = threading.Lock()


def get_settings() -> OrderTakingSettings:
    """Get the process-wide settings instance, loading it on first use."""
    global _settings

    if _settings is not None:
        return _settings

    with _settings_lock:
        if _settings is None:
            _settings = OrderTakingSettings()
        return _settings


def clear_settings_cache() -> None:
    """Clear the cached settings.

    Primarily used by tests that change the environment.
    """
    global _settings
    with _settings_lock:
        _settings = None
