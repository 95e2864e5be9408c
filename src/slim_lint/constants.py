# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Process-wide application constants.

The values are gathered into a single immutable :class:`AppInfo` built once by
:func:`load_app_info`. Components that need them (for example the JSON
reporter) receive the instance explicitly instead of reading globals.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Final

from . import __version__

APP_NAME: Final[str] = "slim-lint-standard"
REPO_URL: Final[str] = "https://github.com/pvande/slim-lint-standard"
BUG_REPORT_URL: Final[str] = f"{REPO_URL}/issues"

# installed package directory
HOME: Final[Path] = Path(__file__).resolve().parent


@dataclass(frozen=True, slots=True)
class AppInfo:
    """Immutable bundle of application identity and locations.

    Attributes:
        home: Directory of the installed ``slim_lint`` package.
        app_name: Distribution name used in reports and messages.
        repo_url: Upstream source repository.
        version: Installed package version.
    """

    home: Path
    app_name: str
    repo_url: str
    version: str

    @property
    def bug_report_url(self) -> str:
        """Return the issue tracker URL derived from :attr:`repo_url`."""

        return f"{self.repo_url}/issues"


@lru_cache(maxsize=1)
def load_app_info() -> AppInfo:
    """Return the cached :class:`AppInfo` for the running process.

    Returns:
        AppInfo: Application constants computed on first use.
    """

    return AppInfo(home=HOME, app_name=APP_NAME, repo_url=REPO_URL, version=__version__)


__all__ = [
    "APP_NAME",
    "BUG_REPORT_URL",
    "HOME",
    "REPO_URL",
    "AppInfo",
    "load_app_info",
]
