"""Movies API endpoint.

GET /api/movies?winner=true|false - List nominated movies
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from razzies.api.app import get_db_session
from razzies.db import repo
from razzies.db.repo import DbSession
from razzies.models.types import MovieDetail

router = APIRouter(tags=["movies"])


@router.get("/movies", response_model=list[MovieDetail])
def list_movies(
    winner: bool | None = None,
    session: DbSession = Depends(get_db_session),
) -> list[MovieDetail]:
    """List movies in CSV order.

    Args:
        winner: Only winners (true) or only non-winners (false).
        session: Database session (injected).
    """
    return [MovieDetail.from_entity(m) for m in repo.get_movies(session, winner=winner)]
