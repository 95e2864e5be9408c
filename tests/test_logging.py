# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the console logger."""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from slim_lint import logging as slim_logging
from slim_lint.logging import Logger


def test_colour_follows_supplied_terminal_console(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(slim_logging, "detect_tty", lambda: False)
    buffer = io.StringIO()
    console = Console(file=buffer, force_terminal=True, color_system="standard", width=80)

    logger = Logger(console)
    logger.error("boom")

    assert logger.color
    assert "\x1b[" in buffer.getvalue()


def test_colour_off_for_supplied_plain_console(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(slim_logging, "detect_tty", lambda: True)
    buffer = io.StringIO()
    console = Console(file=buffer, force_terminal=False, width=80)

    logger = Logger(console)
    logger.error("boom")

    assert not logger.color
    assert buffer.getvalue() == "boom\n"


def test_newline_false_continues_the_line(logger: Logger, output: io.StringIO) -> None:
    logger.info("a.slim", newline=False)
    logger.log(":", newline=False)
    logger.bold(3)

    assert output.getvalue() == "a.slim:3\n"
