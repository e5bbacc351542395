# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ordertaking
"""
Reusable constructors for constrained types.

Each factory validates a raw value and either wraps it with the supplied
constructor or returns a ``ConstraintViolationError`` naming the field.
Recoverable validation never raises: failure is a returned value.

The ``*_violation`` helpers hold the checks themselves so that value
objects can re-assert the same invariant when constructed directly.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from decimal import Decimal, InvalidOperation
from typing import Any, TypeVar

from ordertaking.core.result import Failure, Result, Success
from ordertaking.domain.errors import ConstraintViolationError

T = TypeVar("T")

Number = Decimal | int | float


def to_decimal(value: Number | None) -> Decimal | None:
    """Convert a raw number to a Decimal, or None if it is not a finite number.

    Floats go through their shortest string form so that ``0.05`` becomes
    ``Decimal("0.05")`` rather than its binary approximation.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        number = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    if not number.is_finite():
        return None
    return number


def reject_bool(value: Any) -> Any:
    """Field validator body: booleans are not quantities, even though bool is an int."""
    if isinstance(value, bool):
        raise ValueError("must be a number, not a boolean")
    return value


def string_violation(value: str | None, max_len: int) -> str | None:
    if not value:
        return "must not be null or empty"
    if len(value) > max_len:
        return f"must not be more than {max_len} chars"
    return None


def number_violation(value: Decimal, min_val: Number, max_val: Number) -> str | None:
    if value < Decimal(str(min_val)):
        return f"must not be less than {min_val}"
    if value > Decimal(str(max_val)):
        return f"must not be greater than {max_val}"
    return None


def pattern_violation(value: str | None, pattern: str) -> str | None:
    if not value:
        return "must not be null or empty"
    if re.fullmatch(pattern, value, re.ASCII) is None:
        return f"'{value}' must match the pattern '{pattern}'"
    return None


def create_string(
    field_name: str, ctor: Callable[[str], T], max_len: int, value: str | None
) -> Result[T, ConstraintViolationError]:
    """Create a constrained string using the constructor provided.

    Fails if the input is None, empty, or longer than ``max_len``.
    """
    detail = string_violation(value, max_len)
    if detail is not None:
        return Failure(ConstraintViolationError(field_name, detail))
    return Success(ctor(value))  # type: ignore[arg-type]


def create_string_option(
    field_name: str, ctor: Callable[[str], T], max_len: int, value: str | None
) -> Result[T | None, ConstraintViolationError]:
    """Create an optional constrained string using the constructor provided.

    None or empty input succeeds with None (absent); over-length input fails;
    anything else succeeds with the wrapped value.
    """
    if not value:
        return Success(None)
    if len(value) > max_len:
        return Failure(
            ConstraintViolationError(field_name, f"must not be more than {max_len} chars")
        )
    return Success(ctor(value))


def create_number(
    field_name: str,
    ctor: Callable[[Decimal], T],
    min_val: Number,
    max_val: Number,
    value: Number | None,
) -> Result[T, ConstraintViolationError]:
    """Create a constrained number using the constructor provided.

    Fails if the input is not a finite number or lies outside
    ``[min_val, max_val]``.
    """
    number = to_decimal(value)
    if number is None:
        return Failure(ConstraintViolationError(field_name, "must be a number"))
    detail = number_violation(number, min_val, max_val)
    if detail is not None:
        return Failure(ConstraintViolationError(field_name, detail, value=str(number)))
    return Success(ctor(number))


def create_like(
    field_name: str, ctor: Callable[[str], T], pattern: str, value: str | None
) -> Result[T, ConstraintViolationError]:
    """Create a constrained string using the constructor provided.

    Fails if the input is None, empty, or does not match the whole of
    ``pattern``.
    """
    detail = pattern_violation(value, pattern)
    if detail is not None:
        return Failure(ConstraintViolationError(field_name, detail))
    return Success(ctor(value))  # type: ignore[arg-type]
