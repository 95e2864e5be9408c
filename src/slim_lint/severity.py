# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from enum import Enum
from typing import Final


class Severity(str, Enum):
    """Severity levels attached to lint findings."""

    ERROR = "error"
    WARNING = "warning"


_SEVERITY_MARKERS: Final[dict[Severity, str]] = {
    Severity.ERROR: "E",
    Severity.WARNING: "W",
}


def severity_marker(severity: Severity) -> str:
    """Return the single-letter marker used by text reporters.

    Args:
        severity: Severity of the finding.

    Returns:
        str: ``"E"`` for errors and ``"W"`` for warnings.
    """
    return _SEVERITY_MARKERS[Severity(severity)]


def coerce_severity(value: Severity | str) -> Severity:
    """Return ``value`` as a :class:`Severity`.

    Args:
        value: Enum member or case-insensitive severity name.

    Returns:
        Severity: Matching severity member.

    Raises:
        ValueError: If ``value`` does not name a known severity.
    """
    if isinstance(value, Severity):
        return value
    try:
        return Severity(str(value).strip().lower())
    except ValueError as exc:
        raise ValueError(f"invalid severity level '{value}'") from exc


__all__ = ["Severity", "coerce_severity", "severity_marker"]
