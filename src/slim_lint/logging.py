# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing output helpers built on a Rich console.

Reporters write through a :class:`Logger` so colour handling lives in one
place. Every writer accepts ``newline=False`` to keep composing the current
line, which lets a reporter style each fragment of a finding separately.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from .runtime.console import detect_tty, get_console_manager

STYLE_BOLD = "bold"
STYLE_INFO = "cyan"
STYLE_ERROR = "bold red"
STYLE_WARNING = "bold yellow"
STYLE_SUCCESS = "green"


class Logger:
    """Write styled text fragments to a Rich console."""

    def __init__(self, console: Console | None = None, *, color: bool | None = None) -> None:
        """Bind the logger to ``console``.

        Args:
            console: Destination console; a shared stdout console when omitted.
            color: Explicit colour preference. ``None`` follows whether the
                destination console (or stdout) is a terminal.
        """

        if console is None:
            self.color = detect_tty() if color is None else color
            self.console = get_console_manager().get(color=self.color, emoji=False)
        else:
            self.color = console.is_terminal if color is None else color
            self.console = console

    def log(self, msg: object = "", newline: bool = True) -> None:
        """Write ``msg`` without styling."""

        self._write(msg, style=None, newline=newline)

    def bold(self, msg: object = "", newline: bool = True) -> None:
        """Write ``msg`` in bold."""

        self._write(msg, style=STYLE_BOLD, newline=newline)

    def info(self, msg: object = "", newline: bool = True) -> None:
        """Write ``msg`` as informational text."""

        self._write(msg, style=STYLE_INFO, newline=newline)

    def error(self, msg: object = "", newline: bool = True) -> None:
        """Write ``msg`` as error text."""

        self._write(msg, style=STYLE_ERROR, newline=newline)

    def warning(self, msg: object = "", newline: bool = True) -> None:
        """Write ``msg`` as warning text."""

        self._write(msg, style=STYLE_WARNING, newline=newline)

    def success(self, msg: object = "", newline: bool = True) -> None:
        """Write ``msg`` as success text."""

        self._write(msg, style=STYLE_SUCCESS, newline=newline)

    def _write(self, msg: object, *, style: str | None, newline: bool) -> None:
        text = Text(str(msg))
        if style and self.color:
            text.stylize(style)
        self.console.print(text, end="\n" if newline else "", soft_wrap=True)


__all__ = ["Logger"]
