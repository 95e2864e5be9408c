# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception types raised by slim_lint support components."""

from __future__ import annotations


class SlimLintError(Exception):
    """Base class for errors raised by slim_lint."""


class UnknownReporterError(SlimLintError, LookupError):
    """Raised when a reporter name has no registered implementation."""

    def __init__(self, name: str, available: tuple[str, ...]) -> None:
        self.name = name
        self.available = available
        choices = ", ".join(available) or "<none>"
        super().__init__(f"unknown reporter '{name}' (available: {choices})")


__all__ = ["SlimLintError", "UnknownReporterError"]
