# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ordertaking
"""
Deployment environment the order-taking service runs in.
"""

from __future__ import annotations

import os
from enum import Enum

from ordertaking.config.errors import CONFIG_ENVIRONMENT_ERROR, ConfigError

# Checked in order; the first one set wins
ENVIRONMENT_VARIABLES = ("ORDERTAKING_ENV", "ENVIRONMENT", "ENV")

_SHORT_NAMES = {"dev": "development", "test": "testing", "prod": "production"}


class Environment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"

    @classmethod
    def from_string(cls, value: str | None) -> Environment:
        """Parse an environment name or its short form (dev, test, prod).

        A missing value means development.

        Raises:
            ConfigError: if the name is not recognised
        """
        if value is None:
            return cls.DEVELOPMENT

        normalized = value.lower().strip()
        try:
            return cls(_SHORT_NAMES.get(normalized, normalized))
        except ValueError:
            raise ConfigError(
                message=f"Invalid environment: {value}",
                code=CONFIG_ENVIRONMENT_ERROR,
                context={"provided_value": value},
            ) from None

    @classmethod
    def get_current(cls) -> Environment:
        value = next(
            (os.environ[name] for name in ENVIRONMENT_VARIABLES if os.environ.get(name)),
            None,
        )
        return cls.from_string(value)
