"""Repository for movie persistence.

Encapsulates all SQLAlchemy queries, keeping domain logic pure.
Returns domain models (not SQLAlchemy entities) to external callers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from sqlalchemy.orm import Session

from razzies.db.schema import Movie
from razzies.models.domain import MovieEntity

if TYPE_CHECKING:
    from sqlalchemy.orm import Session as DbSession
else:
    DbSession = Session

__all__ = ["DbSession"]


def _movie_to_entity(movie: Movie) -> MovieEntity:
    """Convert SQLAlchemy Movie to domain entity."""
    return MovieEntity(
        movie_id=movie.id,
        year=movie.year,
        title=movie.title,
        studios=movie.studios,
        producers=movie.producers,
        winner=movie.winner,
    )


def get_all_movies(session: DbSession) -> list[MovieEntity]:
    """Get every movie, ordered by insertion."""
    movies = session.query(Movie).order_by(Movie.id).all()
    return [_movie_to_entity(m) for m in movies]


def get_winning_movies(session: DbSession) -> list[MovieEntity]:
    """Get winning movies, ordered by insertion.

    Insertion order is CSV order, which fixes the producer enumeration
    order seen by the interval engine.
    """
    movies = session.query(Movie).filter(Movie.winner.is_(True)).order_by(Movie.id).all()
    return [_movie_to_entity(m) for m in movies]


def get_movies(session: DbSession, winner: bool | None = None) -> list[MovieEntity]:
    """Get movies, optionally filtered on the winner flag."""
    if winner is None:
        return get_all_movies(session)
    if winner:
        return get_winning_movies(session)
    movies = session.query(Movie).filter(Movie.winner.is_(False)).order_by(Movie.id).all()
    return [_movie_to_entity(m) for m in movies]


def count_movies(session: DbSession) -> int:
    """Count all movies."""
    return session.query(Movie).count()


def delete_all_movies(session: DbSession) -> int:
    """Delete every movie. Returns the number of rows removed."""
    return session.query(Movie).delete()


def add_movies(session: DbSession, movies: Iterable[MovieEntity]) -> int:
    """Insert movies. Returns the number of rows added."""
    rows = [
        Movie(
            year=m.year,
            title=m.title,
            studios=m.studios,
            producers=m.producers,
            winner=m.winner,
        )
        for m in movies
    ]
    session.add_all(rows)
    session.flush()
    return len(rows)


def replace_movies(session: DbSession, movies: Iterable[MovieEntity]) -> int:
    """Replace the table contents with the given movies.

    Caller owns the transaction; nothing is committed here.
    """
    delete_all_movies(session)
    return add_movies(session, movies)
