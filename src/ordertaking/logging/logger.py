# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ordertaking
"""
Structured logger used by the order-taking workflows.

Records go through the standard ``logging`` module. Keyword arguments of a
log call, values bound with ``bind`` and values pushed with ``context`` all
end up as key/value pairs on the formatted line (or as keys of the JSON
object when ``json_format`` is on).
"""

from __future__ import annotations

import contextlib
import copy
import datetime
import decimal
import enum
import json
import logging
import sys
import uuid
from contextvars import ContextVar
from logging import StreamHandler
from typing import TYPE_CHECKING, Any

from ordertaking.logging.config import LoggingSettings
from ordertaking.logging.level import LogLevel

if TYPE_CHECKING:
    from collections.abc import Generator

    from ordertaking.logging.protocols import LoggerProtocol

# Task-local context shared by every logger
_log_context: ContextVar[dict[str, Any]] = ContextVar("log_context", default={})

CONTEXT_ATTR = "ordertaking_context"

_STANDARD_RECORD_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"message", "asctime", CONTEXT_ATTR}


def _plain(value: Any) -> Any:
    """Reduce domain values (money, ids, enums, models) to JSON-friendly ones."""
    match value:
        case datetime.datetime() | datetime.date():
            return value.isoformat()
        case uuid.UUID() | decimal.Decimal():
            return str(value)
        case enum.Enum():
            return value.value
    if hasattr(value, "model_dump"):
        return value.model_dump(mode="json")
    if hasattr(value, "to_dict"):
        return value.to_dict()
    return str(value)


class StructuredFormatter(logging.Formatter):
    """Render a record with its structured context, as text or JSON."""

    def __init__(
        self,
        json_format: bool = False,
        include_timestamp: bool = True,
        include_level: bool = True,
    ) -> None:
        self.json_format = json_format
        self.include_timestamp = include_timestamp
        self.include_level = include_level

        fmt = "%(message)s"
        if include_timestamp:
            fmt = "%(asctime)s " + fmt
        if include_level and not json_format:
            fmt += " [%(levelname)s]"
        super().__init__(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        fields: dict[str, Any] = dict(_log_context.get())
        fields.update(getattr(record, CONTEXT_ATTR, None) or {})
        # Values passed through the stdlib ``extra=`` argument
        fields.update(
            (key, value)
            for key, value in record.__dict__.items()
            if key not in _STANDARD_RECORD_ATTRS
        )

        if self.json_format:
            return self._as_json(record, fields)

        line = super().format(record)
        if not fields:
            return line
        pairs = " ".join(f"{key}={self._text(value)}" for key, value in fields.items())
        return f"{line} {pairs}"

    def _as_json(self, record: logging.LogRecord, fields: dict[str, Any]) -> str:
        payload: dict[str, Any] = {
            "message": record.getMessage(),
            "logger": record.name,
            **fields,
        }
        if self.include_level:
            payload["level"] = record.levelname
        if self.include_timestamp:
            payload["timestamp"] = self.formatTime(record, self.datefmt)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
            payload["error"] = str(record.exc_info[1])
        return json.dumps(payload, default=_plain, ensure_ascii=False)

    @staticmethod
    def _text(value: Any) -> str:
        if isinstance(value, str):
            return f'"{value}"' if " " in value else value
        if isinstance(value, (int, float, bool, list, dict, tuple)) or value is None:
            return json.dumps(value, default=_plain, ensure_ascii=False)
        plain = _plain(value)
        return plain if isinstance(plain, str) else json.dumps(plain, ensure_ascii=False)


class OrderTakingLogger:
    """Logger with keyword context, bound context and task-local context.

    Handlers are installed on the underlying ``logging.Logger`` once, when the
    logger is created; ``bind`` returns a copy sharing that logger.
    """

    def __init__(
        self,
        name: str,
        level: str | None = None,
        settings: LoggingSettings | None = None,
    ) -> None:
        self.name = name
        self._settings = settings or LoggingSettings.load()
        self._logger = logging.getLogger(name)
        self._bound_context: dict[str, Any] = {}
        self._install_handlers()
        self._logger.setLevel((level or self._settings.level).upper())

    def _install_handlers(self) -> None:
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)

        formatter = StructuredFormatter(
            json_format=self._settings.json_format,
            include_timestamp=self._settings.include_timestamp,
            include_level=self._settings.include_level,
        )
        handlers: list[logging.Handler] = []
        if self._settings.console_enabled:
            handlers.append(StreamHandler(sys.stdout))
        if self._settings.file_enabled and self._settings.file_path:
            handlers.append(logging.FileHandler(self._settings.file_path))
        for handler in handlers:
            handler.setFormatter(formatter)
            self._logger.addHandler(handler)

        self._logger.propagate = False

    def _log(self, level: int, msg: str, exc_info: bool = False, **kwargs: Any) -> None:
        self._logger.log(
            level,
            msg,
            exc_info=exc_info,
            extra={CONTEXT_ATTR: {**self._bound_context, **kwargs}},
        )

    def debug(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, **kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, **kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, msg, **kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, msg, **kwargs)

    def critical(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.CRITICAL, msg, **kwargs)

    def exception(self, msg: str, **kwargs: Any) -> None:
        """Log at ERROR with the traceback of the exception being handled."""
        self._log(logging.ERROR, msg, exc_info=True, **kwargs)

    def set_level(self, level: LogLevel) -> None:
        self._logger.setLevel(level.to_stdlib_level())

    @contextlib.contextmanager
    def context(self, **kwargs: Any) -> Generator[None]:
        """Add values to every record logged in the current task, by any logger."""
        token = _log_context.set({**_log_context.get(), **kwargs})
        try:
            yield
        finally:
            _log_context.reset(token)

    def bind(self, **kwargs: Any) -> LoggerProtocol:
        """A logger that adds ``kwargs`` to each of its records."""
        bound = copy.copy(self)
        bound._bound_context = {**self._bound_context, **kwargs}
        return bound

    def with_correlation_id(self, correlation_id: str) -> LoggerProtocol:
        return self.bind(correlation_id=correlation_id)


def get_logger(name: str, level: LogLevel | None = None) -> OrderTakingLogger:
    """Logger for ``name`` (usually ``__name__``) configured from the environment."""
    logger = OrderTakingLogger(name)
    if level is not None:
        logger.set_level(level)
    return logger
