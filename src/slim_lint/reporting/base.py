# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Base class shared by report renderers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..logging import Logger
from ..models import Report


class Reporter(ABC):
    """Render a :class:`Report` through a :class:`Logger`."""

    def __init__(self, logger: Logger) -> None:
        self.log = logger

    @abstractmethod
    def display_report(self, report: Report) -> None:
        """Write ``report`` to the bound logger."""


__all__ = ["Reporter"]
