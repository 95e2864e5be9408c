# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for consecutive run detection."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import pytest

from slim_lint.utils import count_consecutive, for_consecutive_items, iter_consecutive_items

F, T = False, True
SAMPLE = [F, F, T, T, T, F, T, T]


@dataclass(frozen=True)
class Line:
    index: int
    blank: bool


def _identity(value: bool) -> bool:
    return value


def _lines(flags: Sequence[bool]) -> list[Line]:
    return [Line(index, flag) for index, flag in enumerate(flags)]


def _ranges(runs: Sequence[Sequence[Line]]) -> list[tuple[int, int]]:
    return [(run[0].index, run[-1].index + 1) for run in runs]


def _collect(items: Sequence[Line], min_consecutive: int = 2) -> list[Sequence[Line]]:
    runs: list[Sequence[Line]] = []
    for_consecutive_items(items, lambda line: line.blank, runs.append, min_consecutive)
    return runs


def test_reports_each_run_of_minimum_length() -> None:
    runs = _collect(_lines(SAMPLE))

    assert _ranges(runs) == [(2, 5), (6, 8)]


def test_short_runs_are_not_reported() -> None:
    runs = _collect(_lines(SAMPLE), min_consecutive=3)

    assert _ranges(runs) == [(2, 5)]


def test_empty_input_reports_nothing() -> None:
    assert _collect([]) == []


def test_min_of_one_reports_singletons() -> None:
    runs = _collect(_lines([T, F, T, T, F, T]), min_consecutive=1)

    assert _ranges(runs) == [(0, 1), (2, 4), (5, 6)]


def test_all_matching_items_form_a_single_run() -> None:
    items = _lines([T] * 5)

    assert _ranges(_collect(items, min_consecutive=1)) == [(0, 5)]
    assert _ranges(_collect(items, min_consecutive=0)) == [(0, 5)]
    assert _ranges(_collect(items, min_consecutive=5)) == [(0, 5)]
    assert _collect(items, min_consecutive=6) == []


def test_runs_reference_original_items() -> None:
    items = _lines(SAMPLE)

    runs = _collect(items)

    assert runs[0][0] is items[2]
    assert list(runs[1]) == items[6:8]


@pytest.mark.parametrize(
    "flags",
    [
        SAMPLE,
        [T, T, F, T, T, T, T, F, F, T],
        [F, T, F, T, F],
        [T] * 7,
        [],
    ],
)
@pytest.mark.parametrize("min_consecutive", [1, 2, 3])
def test_runs_are_disjoint_sorted_and_repeatable(flags: list[bool], min_consecutive: int) -> None:
    items = _lines(flags)

    first = _ranges(_collect(items, min_consecutive))
    second = _ranges(_collect(items, min_consecutive))

    assert first == second
    assert first == sorted(first)
    for (_, end), (start, _) in zip(first, first[1:]):
        assert end < start
    for start, end in first:
        assert end - start >= max(min_consecutive, 1)


def test_short_run_is_rescanned_one_position_at_a_time() -> None:
    items = _lines([T, T, F])
    calls: list[int] = []

    def satisfies(line: Line) -> bool:
        calls.append(line.index)
        return line.blank

    runs = list(iter_consecutive_items(items, satisfies, min_consecutive=3))

    assert runs == []
    assert calls == [0, 1, 2, 1, 2, 2]


def test_scan_resumes_after_reported_run() -> None:
    items = _lines([T, T, F])
    calls: list[int] = []

    def satisfies(line: Line) -> bool:
        calls.append(line.index)
        return line.blank

    runs = list(iter_consecutive_items(items, satisfies))

    assert _ranges(runs) == [(0, 2)]
    assert calls == [0, 1, 2, 2]


def test_iterator_accepts_any_sequence() -> None:
    assert list(iter_consecutive_items((F, T, T), _identity)) == [(T, T)]
    assert list(iter_consecutive_items("ab  c   d", str.isspace, 3)) == ["   "]


def test_predicate_errors_propagate() -> None:
    def satisfies(line: Line) -> bool:
        if line.index == 2:
            raise RuntimeError("boom")
        return line.blank

    with pytest.raises(RuntimeError, match="boom"):
        for_consecutive_items(_lines(SAMPLE), satisfies, lambda run: None)


def test_callback_errors_propagate() -> None:
    def on_run(run: Sequence[Line]) -> None:
        raise KeyError("stop")

    with pytest.raises(KeyError):
        for_consecutive_items(_lines(SAMPLE), lambda line: line.blank, on_run)


@pytest.mark.parametrize(
    ("flags", "offset", "expected"),
    [
        ([T, T, F, T], 0, 2),
        ([T, T, F, T], 1, 1),
        ([T, T, F, T], 3, 1),
        ([T, T, T], 0, 3),
    ],
)
def test_count_consecutive(flags: list[bool], offset: int, expected: int) -> None:
    assert count_consecutive(flags, offset, _identity) == expected
