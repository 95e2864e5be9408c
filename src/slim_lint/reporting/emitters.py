# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Emit machine-readable reports."""

from __future__ import annotations

import json
import platform
from itertools import groupby
from pathlib import Path

from ..constants import AppInfo, load_app_info
from ..logging import Logger
from ..models import Lint, Report
from .base import Reporter


class JsonReporter(Reporter):
    """Print the report as a single JSON document."""

    def __init__(self, logger: Logger, app_info: AppInfo | None = None) -> None:
        super().__init__(logger)
        self.app_info = app_info if app_info is not None else load_app_info()

    def display_report(self, report: Report) -> None:
        self.log.log(json.dumps(build_json_payload(report, self.app_info), indent=2))


def build_json_payload(report: Report, app_info: AppInfo) -> dict[str, object]:
    """Return the JSON-serialisable representation of ``report``.

    Args:
        report: Findings to serialise.
        app_info: Application identity recorded under ``metadata``.

    Returns:
        dict[str, object]: Payload with ``metadata``, ``files`` and ``summary`` keys.
    """
    lints = report.sorted_lints()
    files = [
        {"path": filename, "offenses": [_serialize_lint(lint) for lint in grouped]}
        for filename, grouped in groupby(lints, key=lambda lint: lint.filename)
    ]
    return {
        "metadata": {
            "app_name": app_info.app_name,
            "version": app_info.version,
            "python_version": platform.python_version(),
            "python_implementation": platform.python_implementation(),
        },
        "files": files,
        "summary": {
            "offense_count": len(lints),
            "target_file_count": len(files),
            "inspected_file_count": len(report.files),
        },
    }


def write_json_report(report: Report, path: Path, app_info: AppInfo | None = None) -> None:
    """Write the JSON payload for ``report`` to ``path``."""
    payload = build_json_payload(report, app_info if app_info is not None else load_app_info())
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


def _serialize_lint(lint: Lint) -> dict[str, object]:
    return {
        "severity": lint.severity.value,
        "message": lint.message,
        "location": {"line": lint.line},
        "linter": lint.rule_name,
    }


__all__ = ["JsonReporter", "build_json_payload", "write_json_report"]
