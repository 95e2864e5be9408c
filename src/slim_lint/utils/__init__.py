# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Utility helpers shared across slim_lint modules."""

from .sequences import (
    DEFAULT_MIN_CONSECUTIVE,
    count_consecutive,
    for_consecutive_items,
    iter_consecutive_items,
)

__all__ = [
    "DEFAULT_MIN_CONSECUTIVE",
    "count_consecutive",
    "for_consecutive_items",
    "iter_consecutive_items",
]
