#!/usr/bin/env python3
"""Seed the movies database from the CSV and print the interval summary.

Usage:
    python scripts/seed_movies.py [CSV_PATH]

Reads RAZZIES_DB_PATH / RAZZIES_CSV_PATH like the API does. A CSV path
given on the command line overrides RAZZIES_CSV_PATH.

Exit codes:
    0: Seeded successfully
    1: CSV missing, invalid or unreadable
"""

from __future__ import annotations

import csv
import json
import logging
import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from razzies.config import load_settings  # noqa: E402
from razzies.db import repo  # noqa: E402
from razzies.db.session import get_session, init_db, session_scope  # noqa: E402
from razzies.ingest import CsvLayoutError, seed_movies  # noqa: E402
from razzies.intervals import ProducerIntervalService  # noqa: E402
from razzies.models.types import ProducerIntervals  # noqa: E402


def main() -> int:
    """Seed the database and print the min/max producer intervals."""
    settings = load_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    csv_path = Path(sys.argv[1]) if len(sys.argv) > 1 else settings.csv_path

    init_db(settings.db_path)
    try:
        with session_scope(settings.db_path) as session:
            result = seed_movies(session, csv_path)
    except FileNotFoundError:
        print(f"FAIL: CSV not found: {csv_path}")
        return 1
    except CsvLayoutError as e:
        print(f"FAIL: {e}")
        return 1
    except (UnicodeDecodeError, csv.Error) as e:
        print(f"FAIL: unreadable CSV {csv_path}: {e}")
        return 1

    print(f"OK: {result.inserted} movies, {result.winners} winners -> {settings.db_path}")

    session = get_session(settings.db_path)
    try:
        service = ProducerIntervalService(
            lambda: repo.get_winning_movies(session),
            dedupe_credits=settings.dedupe_credits,
        )
        summary = ProducerIntervals.from_summary(service.get_intervals_summary())
    finally:
        session.close()

    print(json.dumps(summary.model_dump(by_alias=True), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
