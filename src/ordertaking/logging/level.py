# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ordertaking
"""
Log levels accepted by ``ORDERTAKING_LOGGING_LEVEL`` and ``get_logger``.
"""

from __future__ import annotations

import logging
from enum import Enum

_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_stdlib_level(self) -> int:
        """The matching ``logging`` module constant."""
        return logging.getLevelNamesMapping()[self.value]

    @classmethod
    def from_string(cls, value: str) -> LogLevel:
        """Parse a level name, case-insensitively; ``warn`` and ``fatal`` are accepted.

        Raises:
            ValueError: for an unknown level name
        """
        name = value.strip().upper()
        try:
            return cls(_ALIASES.get(name, name))
        except ValueError:
            raise ValueError(f"Invalid log level: {value}") from None
