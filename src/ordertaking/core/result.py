# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ordertaking
"""
Success/failure values for the order-taking workflows.

A workflow step returns ``Success(value)`` or ``Failure(error)`` instead of
raising for failures it expects. Chaining stops at the first ``Failure``:
errors are never collected. Exceptions raised by callbacks are not caught.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, cast

T = TypeVar("T")
E = TypeVar("E", bound=Exception)
F = TypeVar("F", bound=Exception)
U = TypeVar("U")


def _as_data(obj: Any) -> Any:
    to_dict = getattr(obj, "to_dict", None)
    return to_dict() if callable(to_dict) else obj


class Result(Generic[T, E]):
    """Either a ``Success`` holding a value or a ``Failure`` holding an error."""

    __slots__ = ()

    @property
    def is_success(self) -> bool:
        return isinstance(self, Success)

    @property
    def is_failure(self) -> bool:
        return isinstance(self, Failure)

    def map(self, func: Callable[[T], U]) -> Result[U, E]:
        match self:
            case Success(value):
                return Success(func(value))
        return cast("Result[U, E]", self)

    def map_error(self, func: Callable[[E], F]) -> Result[T, F]:
        """Relabel the error of a failure, e.g. into a workflow error type."""
        match self:
            case Failure(error):
                return Failure(func(error))
        return cast("Result[T, F]", self)

    def flat_map(self, func: Callable[[T], Result[U, E]]) -> Result[U, E]:
        match self:
            case Success(value):
                return func(value)
        return cast("Result[U, E]", self)

    async def flat_map_async(
        self, func: Callable[[T], Awaitable[Result[U, E]]]
    ) -> Result[U, E]:
        match self:
            case Success(value):
                return await func(value)
        return cast("Result[U, E]", self)

    def ensure(self, predicate: Callable[[T], bool], error: E) -> Result[T, E]:
        """Turn a success whose value fails ``predicate`` into ``Failure(error)``."""
        match self:
            case Success(value) if not predicate(value):
                return Failure(error)
        return self

    def on_success(self, func: Callable[[T], Any]) -> Result[T, E]:
        match self:
            case Success(value):
                func(value)
        return self

    def on_failure(self, func: Callable[[E], Any]) -> Result[T, E]:
        match self:
            case Failure(error):
                func(error)
        return self

    def unwrap(self) -> T:
        """The value of a success.

        Raises:
            RuntimeError: on a failure, chained to the failure's error
        """
        match self:
            case Success(value):
                return value
            case Failure(error):
                raise RuntimeError(f"Cannot unwrap a Failure: {error}") from error
        raise TypeError(f"Unknown result type: {type(self).__name__}")

    def unwrap_or(self, default: T) -> T:
        return self.unwrap() if self.is_success else default

    def unwrap_or_else(self, func: Callable[[E], T]) -> T:
        match self:
            case Failure(error):
                return func(error)
        return self.unwrap()

    def to_dict(self) -> dict[str, Any]:
        match self:
            case Success(value):
                return {"status": "success", "data": _as_data(value)}
            case Failure(error) if hasattr(error, "to_dict"):
                return {"status": "error", "error": error.to_dict()}
            case Failure(error):
                return {"status": "error", "error": {"message": str(error)}}
        raise TypeError(f"Unknown result type: {type(self).__name__}")


@dataclass(frozen=True)
class Success(Result[T, E]):
    value: T

    @property
    def error(self) -> None:
        return None

    def __str__(self) -> str:
        return f"Success({self.value})"


@dataclass(frozen=True)
class Failure(Result[T, E]):
    error: E

    @property
    def value(self) -> None:
        return None

    def __str__(self) -> str:
        return f"Failure({self.error})"


def sequence(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """
    Collect results into one result holding the list of values.

    ``results`` is consumed lazily: nothing after the first ``Failure`` is
    evaluated, and that failure is returned.
    """
    values: list[T] = []
    for result in results:
        match result:
            case Failure():
                return cast("Result[list[T], E]", result)
            case Success(value):
                values.append(value)
    return Success(values)
