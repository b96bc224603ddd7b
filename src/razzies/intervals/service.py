"""Producer interval queries bound to a record source.

The service pulls winning records from a caller-supplied callable, so it
works the same against the database repository or an in-memory list.
Each query builds its own index and entry list; nothing is shared
between calls.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Literal, Sequence

from razzies.intervals.aggregate import aggregate_intervals
from razzies.intervals.select import ExtremalMode, select_extremal, select_extremal_set
from razzies.models.domain import IntervalEntry, IntervalsSummary, MovieEntity

logger = logging.getLogger(__name__)

QueryName = Literal["longest", "shortest", "summary"]
QueryPhase = Literal["start", "end"]

RecordSource = Callable[[], Sequence[MovieEntity]]


@dataclass(frozen=True)
class QueryEvent:
    """Emitted to the observability hook at query start and end.

    Counts and elapsed time are only set on the "end" event.
    """

    query: QueryName
    phase: QueryPhase
    record_count: int | None = None
    entry_count: int | None = None
    elapsed_ms: float | None = None


QueryHook = Callable[[QueryEvent], None]


def logging_hook(event: QueryEvent) -> None:
    """Hook that writes query events to the module logger."""
    if event.phase == "start":
        logger.debug(f"Interval query '{event.query}' started")
        return
    logger.info(
        f"Interval query '{event.query}' done: {event.record_count} winning records, "
        f"{event.entry_count} intervals in {event.elapsed_ms:.1f} ms"
    )


class ProducerIntervalService:
    """Longest/shortest consecutive-win interval queries.

    Args:
        get_winning_records: Returns the winning records to analyse.
            The service does not filter on the winner flag.
        dedupe_credits: Drop repeated names within one credit string.
        hook: Optional callable receiving a QueryEvent on query start
            and end.
    """

    def __init__(
        self,
        get_winning_records: RecordSource,
        dedupe_credits: bool = False,
        hook: QueryHook | None = None,
    ) -> None:
        self._get_winning_records = get_winning_records
        self._dedupe_credits = dedupe_credits
        self._hook = hook

    def _emit(self, event: QueryEvent) -> None:
        if self._hook is not None:
            self._hook(event)

    def _compute_entries(self, query: QueryName) -> list[IntervalEntry]:
        self._emit(QueryEvent(query=query, phase="start"))
        started = time.perf_counter()

        records = self._get_winning_records()
        entries = aggregate_intervals(records, dedupe_credits=self._dedupe_credits)

        self._emit(
            QueryEvent(
                query=query,
                phase="end",
                record_count=len(records),
                entry_count=len(entries),
                elapsed_ms=(time.perf_counter() - started) * 1000,
            )
        )
        return entries

    def get_longest_interval(self) -> IntervalEntry | None:
        """Producer with the longest gap between two consecutive wins.

        Returns:
            The first entry reaching the maximum, or None if no producer
            won more than once.

        Example:
            >>> service.get_longest_interval()
            IntervalEntry(producer='John Doe', interval=25, previous_win=1995, following_win=2020)
        """
        return select_extremal(self._compute_entries("longest"), ExtremalMode.MAX)

    def get_shortest_interval(self) -> IntervalEntry | None:
        """Producer with the shortest gap between two consecutive wins.

        Returns:
            The first entry reaching the minimum, or None if no producer
            won more than once.
        """
        return select_extremal(self._compute_entries("shortest"), ExtremalMode.MIN)

    def get_intervals_summary(self) -> IntervalsSummary:
        """All producers tying the shortest and the longest interval."""
        return select_extremal_set(self._compute_entries("summary"))
