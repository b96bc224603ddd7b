"""Producer-interval analysis engine.

Pure and synchronous: works on an in-memory list of winning records,
never touches the database or the network.

- credits:   producer credit string parsing
- aggregate: per-producer consecutive-win gaps
- select:    extremal selection (first-wins and tie-inclusive)
- service:   binds the above to a record source
"""

from razzies.intervals.aggregate import aggregate_intervals, build_producer_index
from razzies.intervals.credits import parse_producers
from razzies.intervals.select import ExtremalMode, select_extremal, select_extremal_set
from razzies.intervals.service import (
    ProducerIntervalService,
    QueryEvent,
    logging_hook,
)

__all__ = [
    "ExtremalMode",
    "ProducerIntervalService",
    "QueryEvent",
    "aggregate_intervals",
    "build_producer_index",
    "logging_hook",
    "parse_producers",
    "select_extremal",
    "select_extremal_set",
]
