# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ordertaking
"""
Error codes, categories and the base exception of the order-taking package.

Every error raised or returned by the package carries an ``ErrorCode``; the
code belongs to an ``ErrorCategory`` (VALIDATION, PRICING, REMOTE_SERVICE...).
Codes and categories are interned in the registry, so they compare and hash
by name.
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime
from enum import Enum
from typing import Any, Final, Self

from ordertaking.errors.registry import registry


class ErrorSeverity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"
    FATAL = "fatal"


class _Named:
    """Named node in a parent chain; equality and hashing go by name."""

    def __init__(self, name: str, parent: Self | None = None) -> None:
        self._name = name
        self.parent = parent

    def lineage(self) -> Iterator[Self]:
        """This node, then its parent, grandparent and so on."""
        node: Self | None = self
        while node is not None:
            yield node
            node = node.parent

    def __str__(self) -> str:
        return self._name

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and other._name == self._name  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash(self._name)


class ErrorCategory(_Named):
    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"ErrorCategory({self._name!r})"

    def is_subcategory_of(self, category: ErrorCategory) -> bool:
        return category in self.lineage()

    @classmethod
    def get_all(cls) -> list[ErrorCategory]:
        return registry.get_all_categories()

    @classmethod
    def get_by_name(cls, name: str) -> ErrorCategory | None:
        return registry.lookup_category(name)

    @classmethod
    def get_or_create(
        cls, name: str, parent: ErrorCategory | None = None
    ) -> ErrorCategory:
        return registry.get_category(name, parent)


INTERNAL: Final = ErrorCategory.get_or_create("INTERNAL")


class ErrorCode(_Named):
    def __init__(
        self,
        code: str,
        category: ErrorCategory | None = None,
        parent: ErrorCode | None = None,
    ) -> None:
        super().__init__(code, parent)
        self.category = category or registry.get_category("INTERNAL")

    @property
    def code(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"ErrorCode({self._name!r}, category={self.category.name!r})"

    def is_subcode_of(self, parent_code: ErrorCode) -> bool:
        return parent_code in self.lineage()

    @classmethod
    def get_by_code(
        cls, code: str, *, raise_if_missing: bool = True
    ) -> ErrorCode | None:
        """Look a registered code up by name.

        Raises:
            ValueError: if the code is unknown and ``raise_if_missing`` is set
        """
        error_code = registry.lookup_code(code)
        if error_code is None and raise_if_missing:
            raise ValueError(f"Error code '{code}' not found in registry")
        return error_code

    @classmethod
    def get_or_create(cls, name: str, category: ErrorCategory) -> ErrorCode:
        return registry.get_code(name, category.name)


INTERNAL_ERROR: Final = ErrorCode.get_or_create("INTERNAL_ERROR", INTERNAL)


class OrderTakingError(Exception):
    """
    Base class of the package's errors. Abstract: instantiate a subclass.

    Keyword arguments beyond the named ones are merged into ``context``.
    """

    message: str
    code: ErrorCode
    category: ErrorCategory
    severity: ErrorSeverity
    context: dict[str, Any]
    timestamp: datetime

    def __new__(cls, *args: Any, **kwargs: Any) -> Self:
        if cls is OrderTakingError:
            raise TypeError(
                "OrderTakingError is abstract; raise one of its subclasses"
            )
        return super().__new__(cls)

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        if not isinstance(code, ErrorCode):
            raise TypeError(
                f"code must be an ErrorCode, got {type(code).__name__}"
            )
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = code.category
        self.severity = severity
        self.context = {**(context or {}), **kwargs}
        self.timestamp = datetime.now(UTC)

    def add_context(self, key: str, value: Any) -> Self:
        self.context[key] = value
        return self

    def with_context(self, context: dict[str, Any]) -> Self:
        """A copy of this error whose context also holds ``context``."""
        clone = type(self).__new__(type(self))
        clone.__dict__.update(self.__dict__)
        clone.args = self.args
        clone.context = {**self.context, **context}
        clone.__cause__ = self.__cause__
        return clone

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.code,
            "message": self.message,
            "category": self.category.name,
            "severity": self.severity.value,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
        }
