"""Per-producer consecutive-win interval aggregation.

Enumeration order is part of the contract: producers come out in order
of first appearance in the input records, and each producer's pairs in
ascending year order. First-wins selection relies on this.
"""

from __future__ import annotations

from typing import Iterable

from razzies.intervals.credits import parse_producers
from razzies.models.domain import IntervalEntry, MovieEntity


def build_producer_index(
    records: Iterable[MovieEntity],
    dedupe_credits: bool = False,
) -> dict[str, list[int]]:
    """Group win years by producer name.

    Args:
        records: Winning records. Winner status is not checked here.
        dedupe_credits: Passed through to parse_producers.

    Returns:
        Mapping producer -> win years, unsorted, keyed in first-seen order.
    """
    index: dict[str, list[int]] = {}
    for record in records:
        for producer in parse_producers(record.producers, dedupe=dedupe_credits):
            if producer not in index:
                index[producer] = []
            index[producer].append(record.year)
    return index


def aggregate_intervals(
    records: Iterable[MovieEntity],
    dedupe_credits: bool = False,
) -> list[IntervalEntry]:
    """Compute every consecutive-win interval across all producers.

    Producers with fewer than two wins contribute nothing. Two wins in
    the same year give a zero interval.

    Args:
        records: Winning records.
        dedupe_credits: Drop repeated names within a single credit.

    Returns:
        All interval entries. Treat as a set; see module docstring for
        the order they are produced in.
    """
    index = build_producer_index(records, dedupe_credits=dedupe_credits)

    entries: list[IntervalEntry] = []
    for producer, years in index.items():
        if len(years) < 2:
            continue

        sorted_years = sorted(years)
        for previous_win, following_win in zip(sorted_years, sorted_years[1:]):
            entries.append(
                IntervalEntry(
                    producer=producer,
                    interval=following_win - previous_win,
                    previous_win=previous_win,
                    following_win=following_win,
                )
            )

    return entries
