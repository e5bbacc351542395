# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ordertaking
"""
Configuration for the order-taking package.
"""

from ordertaking.config.environment import Environment
from ordertaking.config.errors import CONFIG_ERROR, ConfigError
from ordertaking.config.settings import (
    OrderTakingSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "CONFIG_ERROR",
    "ConfigError",
    "Environment",
    "OrderTakingSettings",
    "clear_settings_cache",
    "get_settings",
]
