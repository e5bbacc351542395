# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ordertaking
"""
Order taking: the PlaceOrder workflow as a typed, fail-fast pipeline.
"""

__version__ = "0.1.0"
