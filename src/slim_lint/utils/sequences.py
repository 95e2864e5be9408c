# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Detect runs of consecutive items sharing a condition.

Lint rules use these helpers to flag patterns such as several blank lines in a
row. A run is reported once and the scan resumes after its last item, so runs
never overlap.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from typing import Final, TypeVar

ItemT = TypeVar("ItemT")

DEFAULT_MIN_CONSECUTIVE: Final[int] = 2


def count_consecutive(
    items: Sequence[ItemT],
    offset: int,
    satisfies: Callable[[ItemT], bool],
) -> int:
    """Count the consecutive items starting at ``offset`` that satisfy a predicate.

    The item at ``offset`` is assumed to satisfy ``satisfies`` already and is
    counted without being re-evaluated.

    Args:
        items: Sequence being scanned.
        offset: Index of the first item of the candidate run.
        satisfies: Predicate evaluated against each following item.

    Returns:
        int: Length of the run, always at least ``1``.
    """

    count = 1
    while offset + count < len(items) and satisfies(items[offset + count]):
        count += 1
    return count


def iter_consecutive_items(
    items: Sequence[ItemT],
    satisfies: Callable[[ItemT], bool],
    min_consecutive: int = DEFAULT_MIN_CONSECUTIVE,
) -> Iterator[Sequence[ItemT]]:
    """Yield each maximal run of at least ``min_consecutive`` matching items.

    Runs are slices of ``items`` yielded in increasing start order. After a
    run is yielded the scan continues at the first index past it. A run that
    is too short is skipped one position at a time, so its later members are
    still examined as potential starts.

    Args:
        items: Sequence to scan from left to right.
        satisfies: Predicate deciding whether an item belongs to a run.
        min_consecutive: Minimum run length worth reporting.

    Yields:
        Sequence[ItemT]: Consecutive items that all satisfy ``satisfies``.
    """

    index = 0
    while index < len(items):
        if not satisfies(items[index]):
            index += 1
            continue
        count = count_consecutive(items, index, satisfies)
        if count < min_consecutive:
            index += 1
            continue
        yield items[index : index + count]
        index += count


def for_consecutive_items(
    items: Sequence[ItemT],
    satisfies: Callable[[ItemT], bool],
    on_run: Callable[[Sequence[ItemT]], object],
    min_consecutive: int = DEFAULT_MIN_CONSECUTIVE,
) -> None:
    """Invoke ``on_run`` for every run found by :func:`iter_consecutive_items`.

    Exceptions raised by ``satisfies`` or ``on_run`` propagate unchanged and
    stop the scan.
    """

    for run in iter_consecutive_items(items, satisfies, min_consecutive):
        on_run(run)


__all__ = [
    "DEFAULT_MIN_CONSECUTIVE",
    "count_consecutive",
    "for_consecutive_items",
    "iter_consecutive_items",
]
