"""Shared pytest fixtures for razzies tests."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from razzies.db.schema import Base
from razzies.models.domain import MovieEntity


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine for testing."""
    engine = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def session(engine):
    """Create a database session for testing."""
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def example_winners():
    """John Doe wins 1980/1995/2020, Jane Smith wins 2001/2005."""
    return [
        MovieEntity(year=1980, producers="John Doe"),
        MovieEntity(year=1995, producers="John Doe"),
        MovieEntity(year=2020, producers="John Doe"),
        MovieEntity(year=2001, producers="Jane Smith"),
        MovieEntity(year=2005, producers="Jane Smith"),
    ]


@pytest.fixture
def write_csv(tmp_path):
    """Write CSV text to a temp file and return its path."""

    def _write(text: str, name: str = "movies.csv"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
