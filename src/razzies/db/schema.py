"""Database schema for Razzies.

One table: every nominated movie from the CSV, winners flagged.
"""

from sqlalchemy import Boolean, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class Movie(Base):
    """A nominated movie.

    ``producers`` holds the raw credit string; it is split only at query time.
    """

    __tablename__ = "movies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    year: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(512), nullable=False)
    studios: Mapped[str | None] = mapped_column(Text, nullable=True)
    producers: Mapped[str | None] = mapped_column(Text, nullable=True)
    winner: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, index=True)
