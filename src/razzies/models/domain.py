"""Domain models for Razzies.

Pure Python dataclasses representing domain entities.
These models are independent of SQLAlchemy and are what the
interval engine consumes and produces.
"""

from __future__ import annotations

from dataclasses import dataclass


# ============================================================================
# Movie Domain
# ============================================================================


@dataclass(frozen=True)
class MovieEntity:
    """Domain model for a nominated movie.

    The interval engine only reads ``year`` and ``producers``.
    """

    year: int
    producers: str | None = None
    title: str = ""
    studios: str | None = None
    winner: bool = False
    movie_id: int | None = None


# ============================================================================
# Interval Domain
# ============================================================================


@dataclass(frozen=True)
class IntervalEntry:
    """Gap between two adjacent wins of the same producer.

    Invariant: interval == following_win - previous_win >= 0
    """

    producer: str
    interval: int
    previous_win: int
    following_win: int


@dataclass(frozen=True)
class IntervalsSummary:
    """Every entry tying the minimum and the maximum interval."""

    min: list[IntervalEntry]
    max: list[IntervalEntry]
