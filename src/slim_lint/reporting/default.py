# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Plain text reporter: one ``file:line [E|W] rule: message`` line per finding."""

from __future__ import annotations

from ..models import Lint, Report
from ..severity import severity_marker
from .base import Reporter


class DefaultReporter(Reporter):
    """Print findings sorted by filename and line number."""

    def display_report(self, report: Report) -> None:
        for lint in report.sorted_lints():
            self._print_location(lint)
            self._print_type(lint)
            self._print_message(lint)

    def _print_location(self, lint: Lint) -> None:
        self.log.info(lint.filename, newline=False)
        self.log.log(":", newline=False)
        self.log.bold(lint.line, newline=False)

    def _print_type(self, lint: Lint) -> None:
        marker = f" [{severity_marker(lint.severity)}] "
        if lint.error:
            self.log.error(marker, newline=False)
        else:
            self.log.warning(marker, newline=False)

    def _print_message(self, lint: Lint) -> None:
        self.log.success(f"{lint.rule_name}: ", newline=False)
        self.log.log(lint.message)


__all__ = ["DefaultReporter"]
