# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ordertaking
"""
The logger interface the workflows are written against.

``place_order`` accepts any object with these methods, so an embedding
application can pass its own logger.
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    def debug(self, msg: str, **kwargs: Any) -> None: ...

    def info(self, msg: str, **kwargs: Any) -> None: ...

    def warning(self, msg: str, **kwargs: Any) -> None: ...

    def error(self, msg: str, **kwargs: Any) -> None: ...

    def exception(self, msg: str, **kwargs: Any) -> None: ...

    def bind(self, **kwargs: Any) -> LoggerProtocol: ...
