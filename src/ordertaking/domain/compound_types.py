# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ordertaking
"""
Common compound types used throughout the order-taking domain.

Includes customers and addresses. Products are owned by another bounded
context and are represented here only by a ProductCode.
"""

from __future__ import annotations

from ordertaking.domain.simple_types import EmailAddress, String50, ZipCode
from ordertaking.domain.value_object import ValueObject


class PersonalName(ValueObject):
    first_name: String50
    last_name: String50


class CustomerInfo(ValueObject):
    name: PersonalName
    email_address: EmailAddress


class Address(ValueObject):
    """A postal address; only the first line, city and zip code are required."""

    address_line1: String50
    address_line2: String50 | None = None
    address_line3: String50 | None = None
    address_line4: String50 | None = None
    city: String50
    zip_code: ZipCode
