# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ordertaking
"""Core building blocks shared by every layer of the package."""

from ordertaking.core.result import Failure, Result, Success, sequence

__all__ = ["Result", "Success", "Failure", "sequence"]
