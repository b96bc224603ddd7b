"""Database seeding from the movie list CSV.

The movies table is replaced wholesale on every seed, so the database
always mirrors the CSV it was last loaded from.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from razzies.db import repo
from razzies.db.repo import DbSession
from razzies.ingest.csv_reader import read_movie_rows

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeedResult:
    """Outcome of a seed run."""

    csv_path: Path
    inserted: int
    winners: int


def seed_movies(session: DbSession, csv_path: Path) -> SeedResult:
    """Replace the movies table with the contents of a CSV file.

    The CSV is read and validated before anything is deleted, so a bad
    file leaves the existing rows untouched. The caller commits.

    Args:
        session: Database session.
        csv_path: Movie list CSV.

    Returns:
        SeedResult with inserted and winner counts.

    Raises:
        FileNotFoundError: If the CSV does not exist.
        CsvLayoutError: If required columns are missing.
        UnicodeDecodeError: If the CSV is not UTF-8.
    """
    csv_path = Path(csv_path)
    movies = read_movie_rows(csv_path)

    inserted = repo.replace_movies(session, movies)
    if not inserted:
        logger.warning(f"CSV {csv_path} is empty, no movies inserted")
        return SeedResult(csv_path=csv_path, inserted=0, winners=0)

    winners = sum(1 for m in movies if m.winner)

    logger.info(f"Seeded {inserted} movies ({winners} winners) from {csv_path}")
    return SeedResult(csv_path=csv_path, inserted=inserted, winners=winners)
