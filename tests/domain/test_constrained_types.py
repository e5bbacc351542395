# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ordertaking
"""
Unit tests for the constrained-type factories.
"""

from decimal import Decimal

import pytest

from ordertaking.domain import CONSTRAINT_VIOLATION, ConstraintViolationError
from ordertaking.domain.constrained import (
    create_like,
    create_number,
    create_string,
    create_string_option,
    to_decimal,
)


def _error(result) -> ConstraintViolationError:
    assert result.is_failure
    assert isinstance(result.error, ConstraintViolationError)
    return result.error


def test_create_string_bounds():
    assert create_string("Name", str.upper, 5, "abcde").unwrap() == "ABCDE"
    assert _error(create_string("Name", str, 5, "abcdef")).message == (
        "Name: must not be more than 5 chars"
    )
    assert _error(create_string("Name", str, 5, "")).message == (
        "Name: must not be null or empty"
    )
    assert _error(create_string("Name", str, 5, None)).detail == (
        "must not be null or empty"
    )


def test_create_string_option():
    assert create_string_option("Line", str, 5, "").unwrap() is None
    assert create_string_option("Line", str, 5, None).unwrap() is None
    assert create_string_option("Line", str, 5, "abc").unwrap() == "abc"
    assert _error(create_string_option("Line", str, 5, "abcdef")).field_name == "Line"


def test_create_number_bounds():
    assert create_number("Qty", int, 1, 10, 1).unwrap() == 1
    assert create_number("Qty", int, 1, 10, 10).unwrap() == 10
    assert _error(create_number("Qty", int, 1, 10, 0)).message == (
        "Qty: must not be less than 1"
    )
    assert _error(create_number("Qty", int, 1, 10, 11)).message == (
        "Qty: must not be greater than 10"
    )


@pytest.mark.parametrize("value", [None, True, float("nan"), float("inf")])
def test_create_number_rejects_non_numbers(value):
    error = _error(create_number("Qty", int, 1, 10, value))
    assert error.detail == "must be a number"
    assert error.code is CONSTRAINT_VIOLATION


def test_create_like():
    assert create_like("Zip", str, r"\d{5}", "12345").unwrap() == "12345"
    assert _error(create_like("Zip", str, r"\d{5}", "1234")).message == (
        "Zip: '1234' must match the pattern '\\d{5}'"
    )
    assert _error(create_like("Zip", str, r"\d{5}", "123456")).field_name == "Zip"
    assert _error(create_like("Zip", str, r"\d{5}", "")).detail == (
        "must not be null or empty"
    )


def test_to_decimal_uses_shortest_float_repr():
    assert to_decimal(0.05) == Decimal("0.05")
    assert to_decimal(3) == Decimal(3)
    assert to_decimal(Decimal("1.5")) == Decimal("1.5")
    assert to_decimal(None) is None
