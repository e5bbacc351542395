# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ordertaking

"""
Error handling for the order-taking package.
"""

from __future__ import annotations

from ordertaking.errors.base import (
    INTERNAL,
    INTERNAL_ERROR,
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
    OrderTakingError,
)
from ordertaking.errors.registry import registry

__all__ = [
    # Error categories
    "ErrorCode",
    "ErrorCategory",
    "ErrorSeverity",
    "INTERNAL",
    "INTERNAL_ERROR",
    # Base errors
    "OrderTakingError",
    # Registry
    "registry",
]
