"""FastAPI application factory.

API layer:
- Validates inputs, reads DB through the repository
- Returns JSON payloads
- Forbidden: CSV parsing, interval computation outside razzies.intervals
"""

from __future__ import annotations

import csv
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Generator

from fastapi import Depends, FastAPI, Request

from razzies import __version__
from razzies.config import Settings, load_settings
from razzies.db import repo
from razzies.db.repo import DbSession
from razzies.db.session import get_session, init_db, session_scope
from razzies.ingest import CsvLayoutError, seed_movies
from razzies.intervals import ProducerIntervalService, logging_hook

logger = logging.getLogger(__name__)


def get_settings(request: Request) -> Settings:
    """Dependency returning the settings the app was created with."""
    return request.app.state.settings


def get_db_session(
    settings: Settings = Depends(get_settings),
) -> Generator[DbSession, None, None]:
    """Dependency to get database session.

    Yields:
        Database session that is automatically closed after request.
    """
    session = get_session(settings.db_path)
    try:
        yield session
    finally:
        session.close()


def get_interval_service(
    session: DbSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
) -> ProducerIntervalService:
    """Dependency wiring the interval engine to the winning movies query."""
    return ProducerIntervalService(
        lambda: repo.get_winning_movies(session),
        dedupe_credits=settings.dedupe_credits,
        hook=logging_hook,
    )


def seed_database(settings: Settings) -> None:
    """Create tables and reload movies from the configured CSV.

    Seeding failures are logged and the app keeps serving whatever the
    database already holds.
    """
    init_db(settings.db_path)

    if not settings.seed_on_startup:
        with session_scope(settings.db_path) as session:
            existing = repo.count_movies(session)
        logger.info(f"Seeding disabled, using existing database with {existing} movies")
        return

    try:
        with session_scope(settings.db_path) as session:
            seed_movies(session, settings.csv_path)
    except FileNotFoundError:
        logger.error(f"Seed CSV not found: {settings.csv_path}")
    except CsvLayoutError as e:
        logger.error(f"Invalid CSV, seeding aborted: {e}")
    except (UnicodeDecodeError, csv.Error):
        logger.exception(f"Unreadable CSV, seeding aborted: {settings.csv_path}")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        settings: Application settings. Defaults to load_settings().

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        settings = load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logging.basicConfig(
            level=settings.log_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        seed_database(settings)
        logger.info(f"Razzies API ready, database at {settings.db_path}")
        yield

    app = FastAPI(
        title="Razzies API",
        description="Golden Raspberry Awards producer win intervals",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Include routes
    from razzies.api.routes import movies, producers

    app.include_router(producers.router, prefix="/api")
    app.include_router(movies.router, prefix="/api")

    # Health check endpoint
    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


# Default app instance
app = create_app()
