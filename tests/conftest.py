# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from slim_lint.logging import Logger


@pytest.fixture
def output() -> io.StringIO:
    """Return the buffer backing the :func:`logger` fixture."""
    return io.StringIO()


@pytest.fixture
def console(output: io.StringIO) -> Console:
    """Return a colourless console writing into ``output``."""
    return Console(file=output, color_system=None, width=200, highlight=False, soft_wrap=True)


@pytest.fixture
def logger(console: Console) -> Logger:
    """Return a logger that records plain text."""
    return Logger(console, color=False)
