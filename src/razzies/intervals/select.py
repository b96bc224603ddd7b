"""Extremal interval selection.

Two policies are kept side by side because consumers depend on both
response shapes:

- select_extremal: one entry, first one wins a tie, None when empty
- select_extremal_set: every tying entry for min and max, empty lists when empty
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence

from razzies.models.domain import IntervalEntry, IntervalsSummary


class ExtremalMode(str, Enum):
    """Which end of the interval range to select."""

    MIN = "min"
    MAX = "max"


def _beats(candidate: int, best: int, mode: ExtremalMode) -> bool:
    if mode is ExtremalMode.MIN:
        return candidate < best
    return candidate > best


def select_extremal(
    entries: Sequence[IntervalEntry],
    mode: ExtremalMode,
) -> IntervalEntry | None:
    """Select the single shortest or longest interval.

    Only a strictly better interval replaces the running best, so on a
    tie the entry seen first is returned.

    Args:
        entries: Interval entries, in aggregation order.
        mode: MIN for the shortest interval, MAX for the longest.

    Returns:
        The selected entry, or None if there are no entries.
    """
    best: IntervalEntry | None = None
    for entry in entries:
        if best is None or _beats(entry.interval, best.interval, mode):
            best = entry
    return best


def select_extremal_set(entries: Sequence[IntervalEntry]) -> IntervalsSummary:
    """Select every entry tying the global minimum and maximum interval.

    Args:
        entries: Interval entries.

    Returns:
        IntervalsSummary; both lists are empty when there are no entries.
    """
    if not entries:
        return IntervalsSummary(min=[], max=[])

    min_interval = min(e.interval for e in entries)
    max_interval = max(e.interval for e in entries)

    return IntervalsSummary(
        min=[e for e in entries if e.interval == min_interval],
        max=[e for e in entries if e.interval == max_interval],
    )
