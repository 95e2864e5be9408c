# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helpers for reasoning about filesystem paths."""

from __future__ import annotations

import os
from os import PathLike
from pathlib import Path

_Pathish = str | PathLike[str] | Path


def expand_path(path: _Pathish) -> str:
    """Return ``path`` as an absolute, lexically normalised POSIX string.

    ``~`` prefixes are expanded and relative inputs are anchored at the current
    working directory. Symlinks are left untouched so glob patterns and
    candidate paths are canonicalised by exactly the same rules.

    Args:
        path: Filesystem path or glob pattern supplied by the caller.

    Returns:
        str: Absolute representation using ``/`` separators.

    Raises:
        OSError: If the current working directory cannot be determined.
        ValueError: If ``path`` is ``None``.

    """

    if path is None:
        raise ValueError("path must not be None")

    expanded = os.path.abspath(os.path.expanduser(os.fspath(path)))
    if os.sep != "/":
        expanded = expanded.replace(os.sep, "/")
    return expanded


__all__ = ("expand_path",)
