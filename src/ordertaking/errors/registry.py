# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ordertaking
"""Process-wide table of error categories and error codes, keyed by name."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from ordertaking.errors.base import ErrorCategory, ErrorCode

_V = TypeVar("_V")


class ErrorRegistry:
    """Singleton: every ``ErrorRegistry()`` call returns the same table."""

    _instance: ErrorRegistry | None = None
    _lock = threading.RLock()

    _categories: dict[str, ErrorCategory]
    _codes: dict[str, ErrorCode]

    def __new__(cls) -> ErrorRegistry:
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._categories = {}
                cls._instance._codes = {}
            return cls._instance

    def _intern(self, table: dict[str, _V], key: str, make: Callable[[], _V]) -> _V:
        with self._lock:
            if key not in table:
                table[key] = make()
            return table[key]

    def get_category(
        self, name: str, parent: ErrorCategory | None = None
    ) -> ErrorCategory:
        """The category called ``name``, registered on first use."""
        from ordertaking.errors.base import ErrorCategory

        return self._intern(
            self._categories, name, lambda: ErrorCategory(name, parent)
        )

    def get_code(self, code: str, category_name: str = "INTERNAL") -> ErrorCode:
        """The error code ``code``, registered under ``category_name`` on first use."""
        from ordertaking.errors.base import ErrorCode

        return self._intern(
            self._codes,
            code,
            lambda: ErrorCode(code, self.get_category(category_name)),
        )

    def lookup_category(self, name: str) -> ErrorCategory | None:
        return self._categories.get(name)

    def lookup_code(self, code: str) -> ErrorCode | None:
        return self._codes.get(code)

    def get_all_categories(self) -> list[ErrorCategory]:
        return list(self._categories.values())

    def get_all_codes(self) -> list[ErrorCode]:
        return list(self._codes.values())


registry = ErrorRegistry()
