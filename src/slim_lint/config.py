# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Output configuration models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict
from rich.console import Console

from .logging import Logger
from .reporting import Reporter, reporter_for


class OutputConfig(BaseModel):
    """Configuration for controlling how reports are rendered."""

    model_config = ConfigDict(validate_assignment=True)

    color: bool | None = None
    reporter: Literal["default", "json"] = "default"


def build_reporter(config: OutputConfig, console: Console | None = None) -> Reporter:
    """Construct the reporter selected by ``config``.

    Args:
        config: Output preferences.
        console: Optional destination console, mainly for capturing output.

    Returns:
        Reporter: Reporter bound to a :class:`Logger` honouring ``config.color``.
    """
    logger = Logger(console, color=config.color)
    return reporter_for(config.reporter)(logger)


__all__ = ["OutputConfig", "build_reporter"]
