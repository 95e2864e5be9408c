# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Report renderers and the registry used to select them by name."""

from __future__ import annotations

from typing import Final

from ..errors import UnknownReporterError
from .base import Reporter
from .default import DefaultReporter
from .emitters import JsonReporter, build_json_payload, write_json_report

REPORTERS: Final[dict[str, type[Reporter]]] = {
    "default": DefaultReporter,
    "json": JsonReporter,
}


def reporter_for(name: str) -> type[Reporter]:
    """Return the reporter class registered under ``name``.

    Raises:
        UnknownReporterError: If no reporter is registered under ``name``.
    """
    try:
        return REPORTERS[name.strip().lower()]
    except KeyError:
        raise UnknownReporterError(name, tuple(sorted(REPORTERS))) from None


__all__ = [
    "REPORTERS",
    "DefaultReporter",
    "JsonReporter",
    "Reporter",
    "build_json_payload",
    "reporter_for",
    "write_json_report",
]
