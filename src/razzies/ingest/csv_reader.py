"""Movie list CSV reader.

Expected layout (header names are case-insensitive, order is free):

    year;title;studios;producers;winner
    1980;Can't Stop the Music;Associated Film Distribution;Allan Carr;yes

``winner`` is optional and only ``yes`` counts as a win. The delimiter
is ``;`` or ``,``, whichever the header line uses.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from pathlib import Path

from razzies.models.domain import MovieEntity

logger = logging.getLogger(__name__)

EXPECTED_COLUMNS: tuple[str, ...] = ("year", "title", "studios", "producers")


class CsvLayoutError(ValueError):
    """CSV header is missing required columns."""

    def __init__(self, path: Path, missing: list[str], found: list[str]) -> None:
        self.path = path
        self.missing = missing
        self.found = found
        super().__init__(
            f"Missing columns [{', '.join(missing)}] in {path}. "
            f"Columns found: [{', '.join(found)}]"
        )


def detect_delimiter(header_line: str) -> str:
    """Pick ';' or ',' based on which appears more often in the header."""
    return ";" if header_line.count(";") > header_line.count(",") else ","


@dataclass(frozen=True)
class CsvLayout:
    """Normalized header columns and the delimiter they were split on."""

    columns: list[str]
    delimiter: str


def validate_csv_layout(
    path: Path,
    expected_columns: tuple[str, ...] = EXPECTED_COLUMNS,
) -> CsvLayout:
    """Check that the CSV header contains every expected column.

    Args:
        path: CSV file.
        expected_columns: Column names that must be present.

    Returns:
        CsvLayout with the normalized columns and detected delimiter.

    Raises:
        FileNotFoundError: If the file does not exist.
        CsvLayoutError: If any expected column is missing.
    """
    path = Path(path)
    with path.open(encoding="utf-8-sig", newline="") as f:
        header_line = f.readline()

    delimiter = detect_delimiter(header_line)
    header = next(csv.reader([header_line], delimiter=delimiter), [])
    columns = [h.strip().lower() for h in header]

    missing = [col for col in expected_columns if col not in columns]
    if missing:
        raise CsvLayoutError(path, missing, columns)

    logger.info(f"Valid layout for {path}")
    return CsvLayout(columns=columns, delimiter=delimiter)


def _parse_year(value: str | None) -> int | None:
    try:
        return int((value or "").strip())
    except ValueError:
        return None


def _optional(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def row_to_movie(row: dict[str, str | None]) -> MovieEntity | None:
    """Convert one CSV row (normalized keys) to a MovieEntity.

    Returns None when the year is not an integer.
    """
    year = _parse_year(row.get("year"))
    if year is None:
        return None

    return MovieEntity(
        year=year,
        title=(row.get("title") or "").strip(),
        studios=_optional(row.get("studios")),
        producers=_optional(row.get("producers")),
        winner=(row.get("winner") or "").strip().lower() == "yes",
    )


def read_movie_rows(path: Path) -> list[MovieEntity]:
    """Read and validate the movie list CSV.

    Rows with a non-integer year are skipped with a warning.

    Args:
        path: CSV file.

    Returns:
        Movies in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        CsvLayoutError: If required columns are missing.
        UnicodeDecodeError: If the file is not UTF-8.
    """
    path = Path(path)
    layout = validate_csv_layout(path)

    logger.info(f"Reading CSV from {path}")

    movies: list[MovieEntity] = []
    with path.open(encoding="utf-8-sig", newline="") as f:
        reader = csv.reader(f, delimiter=layout.delimiter)
        next(reader, None)
        # line 1 is the header
        for line_no, values in enumerate(reader, start=2):
            if not any(v.strip() for v in values):
                continue
            row = dict(zip(layout.columns, values))
            movie = row_to_movie(row)
            if movie is None:
                logger.warning(f"Skipping line {line_no} of {path}: invalid year {row.get('year')!r}")
                continue
            movies.append(movie)

    logger.info(f"Read {len(movies)} movies from {path}")
    return movies
