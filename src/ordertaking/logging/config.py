# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ordertaking
"""
Logging settings, read from ``ORDERTAKING_LOGGING_*`` environment variables.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ordertaking.logging.level import LogLevel


class LoggingSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ORDERTAKING_LOGGING_",
        extra="ignore",
        case_sensitive=False,
    )

    level: str = Field(default=LogLevel.INFO.value)
    json_format: bool = Field(default=False, description="One JSON object per line")
    include_timestamp: bool = True
    include_level: bool = True
    console_enabled: bool = Field(default=True, description="Write to stdout")
    file_enabled: bool = False
    file_path: str | None = None

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> str:
        if isinstance(v, LogLevel):
            return v.value
        if not isinstance(v, str):
            raise ValueError(f"Log level must be a string, got {type(v).__name__}")
        return LogLevel.from_string(v).value

    @classmethod
    def load(cls) -> LoggingSettings:
        return cls()
