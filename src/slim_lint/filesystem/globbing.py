# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Pathname-aware glob matching shared by every file filter.

All globbing goes through this module so include/exclude options behave the
same everywhere. Patterns follow ``fnmatch(3)`` with ``FNM_PATHNAME`` and
``FNM_DOTMATCH`` semantics plus ``**/`` directory recursion:

* ``*`` and ``?`` never cross a ``/`` boundary.
* ``**/`` spanning a whole segment matches zero or more directories.
* Hidden files are matched by wildcards like any other name.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from functools import lru_cache
from os import PathLike
from typing import Final

from .paths import expand_path

LOGGER = logging.getLogger(__name__)

_GlobLike = str | PathLike[str]
_DEFAULT_CACHE_SIZE: Final[int] = 1024
_SEPARATOR: Final[str] = "/"
_GLOBSTAR: Final[str] = "**/"
_ANY_SEGMENT_CHARS: Final[str] = "[^/]*"
_ONE_SEGMENT_CHAR: Final[str] = "[^/]"
_ANY_DIRECTORIES: Final[str] = "(?:[^/]*/)*"


def translate_glob(pattern: str) -> str:
    """Translate ``pattern`` into an anchored regular expression.

    Args:
        pattern: Glob pattern using ``*``, ``**/``, ``?``, ``[...]`` and ``\\``.

    Returns:
        str: Regular expression source matching whole paths only.
    """

    parts: list[str] = []
    index = 0
    length = len(pattern)
    while index < length:
        char = pattern[index]
        if char == "*":
            at_segment_start = index == 0 or pattern[index - 1] == _SEPARATOR
            if at_segment_start and pattern.startswith(_GLOBSTAR, index):
                parts.append(_ANY_DIRECTORIES)
                index += len(_GLOBSTAR)
                continue
            while index < length and pattern[index] == "*":
                index += 1
            parts.append(_ANY_SEGMENT_CHARS)
            continue
        if char == "?":
            parts.append(_ONE_SEGMENT_CHAR)
        elif char == "[":
            translated, index = _translate_class(pattern, index)
            parts.append(translated)
            continue
        elif char == "\\" and index + 1 < length:
            index += 1
            parts.append(re.escape(pattern[index]))
        else:
            parts.append(re.escape(char))
        index += 1
    return rf"\A{''.join(parts)}\Z"


def _translate_class(pattern: str, start: int) -> tuple[str, int]:
    """Translate the character class opening at ``start``.

    Args:
        pattern: Full glob pattern.
        start: Index of the opening ``[``.

    Returns:
        tuple[str, int]: Regex fragment and the index just past the class. An
        unterminated class yields an escaped literal ``[``.
    """

    index = start + 1
    negate = index < len(pattern) and pattern[index] in "!^"
    if negate:
        index += 1
    members: list[str] = []
    range_start: str | None = None
    in_range = False
    first = True
    while index < len(pattern):
        char = pattern[index]
        if char == "]" and not first:
            return _class_fragment(members, negate=negate), index + 1
        if char == "\\" and index + 1 < len(pattern):
            index += 1
            char = pattern[index]
        if in_range:
            if range_start is not None and char < range_start:
                # a reversed range matches nothing
                del members[-2:]
            else:
                members.append(re.escape(char))
            in_range = False
            range_start = None
        elif (
            char == "-"
            and range_start is not None
            and index + 1 < len(pattern)
            and pattern[index + 1] != "]"
        ):
            members.append("-")
            in_range = True
        else:
            members.append(re.escape(char))
            range_start = char
        first = False
        index += 1
    return re.escape("["), start + 1


def _class_fragment(members: list[str], *, negate: bool) -> str:
    """Return the regex for a closed class; classes never consume ``/``."""

    if not members:
        return "[^/]" if negate else "(?!)"
    prefix = "^" if negate else ""
    return f"(?!/)[{prefix}{''.join(members)}]"


@lru_cache(maxsize=_DEFAULT_CACHE_SIZE)
def compile_glob(pattern: str) -> re.Pattern[str]:
    """Return the compiled expression for ``pattern``.

    Args:
        pattern: Glob pattern, already canonicalised by the caller if needed.

    Returns:
        re.Pattern[str]: Compiled matcher for whole paths.
    """

    return re.compile(translate_glob(pattern))


def glob_matches(pattern: _GlobLike, path: _GlobLike) -> bool:
    """Return whether a single glob ``pattern`` matches ``path``.

    Both values are expanded to absolute form first so relative patterns and
    relative paths compare against the same working directory.

    Args:
        pattern: Glob pattern, relative or absolute.
        path: Candidate file path, relative or absolute.

    Returns:
        bool: ``True`` on a match; ``False`` when either side cannot be expanded.
    """

    try:
        expanded_path = expand_path(path)
        expanded_pattern = expand_path(pattern)
    except (OSError, ValueError) as exc:
        LOGGER.debug("treating %r as unmatched by %r: %s", path, pattern, exc)
        return False
    return _matches(expanded_pattern, expanded_path)


def any_glob_matches(patterns: _GlobLike | Iterable[_GlobLike], path: _GlobLike) -> bool:
    """Return whether any of ``patterns`` matches ``path``.

    Args:
        patterns: Single pattern or collection of patterns. An empty collection
            never matches.
        path: Candidate file path.

    Returns:
        bool: ``True`` when at least one pattern matches.
    """

    try:
        expanded_path = expand_path(path)
    except (OSError, ValueError) as exc:
        LOGGER.debug("treating unresolvable path %r as unmatched: %s", path, exc)
        return False
    for pattern in _as_pattern_list(patterns):
        try:
            expanded_pattern = expand_path(pattern)
        except (OSError, ValueError) as exc:
            LOGGER.debug("skipping unresolvable pattern %r: %s", pattern, exc)
            continue
        if _matches(expanded_pattern, expanded_path):
            return True
    return False


def _matches(expanded_pattern: str, expanded_path: str) -> bool:
    try:
        matcher = compile_glob(expanded_pattern)
    except re.error as exc:
        LOGGER.debug("treating invalid pattern %r as unmatched: %s", expanded_pattern, exc)
        return False
    return matcher.match(expanded_path) is not None


def _as_pattern_list(patterns: _GlobLike | Iterable[_GlobLike]) -> list[_GlobLike]:
    """Wrap a lone pattern so callers may pass one pattern or many."""

    if isinstance(patterns, (str, PathLike)):
        return [patterns]
    return list(patterns)


__all__ = [
    "any_glob_matches",
    "compile_glob",
    "glob_matches",
    "translate_glob",
]
