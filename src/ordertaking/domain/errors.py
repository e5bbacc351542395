# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
#
# SPDX-License-Identifier: MIT

"""
Domain-specific error classes.
"""

from __future__ import annotations

from typing import Any, Final

from ordertaking.errors.base import (
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
    OrderTakingError,
)

VALIDATION = ErrorCategory.get_or_create("VALIDATION")
CONSTRAINT_VIOLATION: Final = ErrorCode.get_or_create(
    "CONSTRAINT_VIOLATION", VALIDATION
)


class ConstraintViolationError(OrderTakingError):
    """A raw value does not satisfy the constraint of a domain type.

    Returned inside a ``Failure`` by the constrained-type factories; the
    message always names the offending field.
    """

    def __init__(self, field_name: str, detail: str, **context: Any) -> None:
        super().__init__(
            message=f"{field_name}: {detail}",
            code=CONSTRAINT_VIOLATION,
            severity=ErrorSeverity.WARNING,
            field_name=field_name,
            **context,
        )
        self.field_name = field_name
        self.detail = detail
