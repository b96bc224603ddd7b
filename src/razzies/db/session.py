"""Database session management.

SQLite engines and session factories are cached per resolved database
path so the API and the seeding script share connections.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from razzies.config import DEFAULT_DB_PATH
from razzies.db.schema import Base

_engine_cache: dict[str, Engine] = {}
_session_factory_cache: dict[str, sessionmaker] = {}


def _cache_key(db_path: Path | None) -> tuple[Path, str]:
    path = Path(db_path) if db_path is not None else DEFAULT_DB_PATH
    return path, str(path.resolve())


def get_engine(db_path: Path | None = None) -> Engine:
    """Get the cached SQLAlchemy engine for a database file.

    The engine uses StaticPool with check_same_thread=False so one SQLite
    connection can be shared by FastAPI's worker threads.

    Args:
        db_path: SQLite file. Defaults to data/razzies.db.

    Returns:
        SQLAlchemy engine (cached).
    """
    path, key = _cache_key(db_path)
    if key in _engine_cache:
        return _engine_cache[key]

    path.parent.mkdir(parents=True, exist_ok=True)
    engine = create_engine(
        f"sqlite:///{path}",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    _engine_cache[key] = engine
    return engine


def get_session(db_path: Path | None = None) -> Session:
    """Open a new session. The caller must close it."""
    _, key = _cache_key(db_path)
    factory = _session_factory_cache.get(key)
    if factory is None:
        factory = sessionmaker(bind=get_engine(db_path))
        _session_factory_cache[key] = factory
    return factory()


@contextmanager
def session_scope(db_path: Path | None = None) -> Generator[Session, None, None]:
    """Session that commits on success and rolls back on error.

    Example:
        with session_scope() as session:
            repo.replace_movies(session, movies)
    """
    session = get_session(db_path)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db(db_path: Path | None = None) -> None:
    """Create missing tables."""
    Base.metadata.create_all(get_engine(db_path))


def dispose_engines() -> None:
    """Dispose and forget every cached engine."""
    for engine in _engine_cache.values():
        engine.dispose()
    _engine_cache.clear()
    _session_factory_cache.clear()
