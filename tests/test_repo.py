"""Tests for the movie repository and schema."""

from razzies.db import repo
from razzies.db.schema import Base, Movie
from razzies.models.domain import MovieEntity


def _add_sample(session):
    repo.add_movies(
        session,
        [
            MovieEntity(year=1984, title="Bolero", producers="Bo Derek", winner=True),
            MovieEntity(year=1984, title="Sheena", producers="Paul Aratow", winner=False),
            MovieEntity(year=1990, title="Ghosts Can't Do It", producers="Bo Derek", winner=True),
        ],
    )
    session.commit()


class TestSchema:
    def test_movies_table_created(self, engine):
        assert "movies" in Base.metadata.tables

    def test_winner_defaults_false(self, session):
        session.add(Movie(year=1980, title="Cruising", producers="Jerry Weintraub"))
        session.commit()
        assert session.query(Movie).one().winner is False


class TestMovieQueries:
    """Winner filter and entity conversion."""

    def test_get_winning_movies(self, session):
        _add_sample(session)
        winners = repo.get_winning_movies(session)
        assert [m.title for m in winners] == ["Bolero", "Ghosts Can't Do It"]
        assert all(m.winner for m in winners)

    def test_returns_domain_entities(self, session):
        _add_sample(session)
        movie = repo.get_all_movies(session)[0]
        assert isinstance(movie, MovieEntity)
        assert movie.movie_id is not None
        assert movie.producers == "Bo Derek"

    def test_get_movies_filter(self, session):
        _add_sample(session)
        assert len(repo.get_movies(session)) == 3
        assert len(repo.get_movies(session, winner=True)) == 2
        assert [m.title for m in repo.get_movies(session, winner=False)] == ["Sheena"]

    def test_replace_movies(self, session):
        _add_sample(session)
        inserted = repo.replace_movies(session, [MovieEntity(year=2002, title="Swept Away")])
        session.commit()
        assert inserted == 1
        assert [m.title for m in repo.get_all_movies(session)] == ["Swept Away"]

    def test_delete_all_movies(self, session):
        _add_sample(session)
        assert repo.delete_all_movies(session) == 3
        assert repo.count_movies(session) == 0


class TestMovieEntityDefaults:
    """Only the year is required to build a movie."""

    def test_producers_default_none(self):
        movie = MovieEntity(year=2002, title="Swept Away")
        assert movie.producers is None
        assert movie.winner is False

    def test_round_trip_without_producers(self, session):
        repo.add_movies(session, [MovieEntity(year=2002, title="Swept Away")])
        session.commit()
        assert repo.get_all_movies(session)[0].producers is None
