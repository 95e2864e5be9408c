# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models describing lint findings and reports."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .severity import Severity, coerce_severity


class Lint(BaseModel):
    """A single finding produced by a lint rule."""

    model_config = ConfigDict(frozen=True)

    filename: str
    line: int = Field(ge=0)
    severity: Severity
    rule_name: str
    message: str

    @field_validator("severity", mode="before")
    @classmethod
    def _coerce_severity(cls, value: object) -> Severity:
        """Accept severity names in any case."""
        if isinstance(value, (Severity, str)):
            return coerce_severity(value)
        raise ValueError(f"invalid severity level '{value}'")

    @property
    def error(self) -> bool:
        """Return ``True`` when the finding is error-level."""
        return self.severity is Severity.ERROR


class Report(BaseModel):
    """Findings collected for a set of inspected files."""

    model_config = ConfigDict(validate_assignment=True)

    lints: list[Lint] = Field(default_factory=list)
    files: list[str] = Field(default_factory=list)

    def sorted_lints(self) -> list[Lint]:
        """Return findings ordered by filename then line, ties in input order."""
        return sorted(self.lints, key=lambda lint: (lint.filename, lint.line))

    def has_errors(self) -> bool:
        """Return ``True`` when any finding is error-level."""
        return any(lint.error for lint in self.lints)

    @property
    def failed(self) -> bool:
        """Expose :meth:`has_errors` as an attribute-style accessor."""
        return self.has_errors()


__all__ = ["Lint", "Report"]
