"""CSV ingestion for the movie list.

Ingestion boundary:
- Reads and validates the CSV layout, converts rows, seeds the database
- Forbidden: interval computation
"""

from razzies.ingest.csv_reader import (
    EXPECTED_COLUMNS,
    CsvLayout,
    CsvLayoutError,
    read_movie_rows,
    validate_csv_layout,
)
from razzies.ingest.seed import SeedResult, seed_movies

__all__ = [
    "EXPECTED_COLUMNS",
    "CsvLayout",
    "CsvLayoutError",
    "SeedResult",
    "read_movie_rows",
    "seed_movies",
    "validate_csv_layout",
]
