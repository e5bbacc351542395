# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ordertaking
"""
Base class for the order-taking value objects.

A value object has no identity: two orders' shipping addresses with the same
lines, city and zip code are the same address.
"""

from __future__ import annotations

from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Frozen model compared and hashed by its type and field values."""

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )

    def _values(self) -> tuple[Any, ...]:
        return tuple(getattr(self, name) for name in type(self).model_fields)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return False
        return self._values() == other._values()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._values()))

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={value!r}" for name, value in self.__dict__.items())
        return f"{type(self).__name__}({fields})"

    def copy_with(self, **changes: Any) -> Self:
        """A copy with ``changes`` applied, validated like a new instance.

        Raises:
            pydantic.ValidationError: if the changed values break a constraint
        """
        return type(self).model_validate({**self.__dict__, **changes})
