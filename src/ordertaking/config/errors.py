# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ordertaking
"""
Errors raised while reading the service configuration.
"""

from __future__ import annotations

from typing import Any, Final

from ordertaking.errors.base import ErrorCategory, ErrorCode, OrderTakingError

CONFIG = ErrorCategory.get_or_create("CONFIG")
CONFIG_ERROR: Final = ErrorCode.get_or_create("CONFIG_ERROR", CONFIG)
CONFIG_ENVIRONMENT_ERROR: Final = ErrorCode.get_or_create(
    "CONFIG_ENVIRONMENT_ERROR", CONFIG
)


class ConfigError(OrderTakingError):
    """A setting is missing or has a value the service cannot use."""

    def __init__(
        self, message: str, code: ErrorCode = CONFIG_ERROR, **kwargs: Any
    ) -> None:
        super().__init__(message, code, **kwargs)
