# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ordertaking

"""
Public API for the order-taking logging system.

Structured logging with bound and scoped context on top of the standard
library's logging module.
"""

from __future__ import annotations

from ordertaking.logging.config import LoggingSettings
from ordertaking.logging.level import LogLevel
from ordertaking.logging.logger import (
    OrderTakingLogger,
    StructuredFormatter,
    get_logger,
)
from ordertaking.logging.protocols import LoggerProtocol

__all__ = [
    "LoggerProtocol",
    "LogLevel",
    "OrderTakingLogger",
    "StructuredFormatter",
    "LoggingSettings",
    "get_logger",
]
