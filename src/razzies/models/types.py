"""Pydantic models for the Razzies API.

Interval payloads use camelCase keys on the wire
(``previousWin``, ``followingWin``).
"""

from pydantic import BaseModel, ConfigDict, Field

from razzies.models.domain import IntervalEntry, IntervalsSummary, MovieEntity


class ProducerInterval(BaseModel):
    """A producer's gap between two consecutive wins."""

    model_config = ConfigDict(populate_by_name=True)

    producer: str
    interval: int
    previous_win: int = Field(alias="previousWin")
    following_win: int = Field(alias="followingWin")

    @classmethod
    def from_entry(cls, entry: IntervalEntry) -> "ProducerInterval":
        return cls(
            producer=entry.producer,
            interval=entry.interval,
            previous_win=entry.previous_win,
            following_win=entry.following_win,
        )


class ProducerIntervals(BaseModel):
    """Tie-inclusive min/max interval response."""

    min: list[ProducerInterval]
    max: list[ProducerInterval]

    @classmethod
    def from_summary(cls, summary: IntervalsSummary) -> "ProducerIntervals":
        return cls(
            min=[ProducerInterval.from_entry(e) for e in summary.min],
            max=[ProducerInterval.from_entry(e) for e in summary.max],
        )


class MovieDetail(BaseModel):
    """Movie details for API response."""

    id: int | None
    year: int
    title: str
    studios: str | None
    producers: str | None
    winner: bool

    @classmethod
    def from_entity(cls, movie: MovieEntity) -> "MovieDetail":
        return cls(
            id=movie.movie_id,
            year=movie.year,
            title=movie.title,
            studios=movie.studios,
            producers=movie.producers,
            winner=movie.winner,
        )
