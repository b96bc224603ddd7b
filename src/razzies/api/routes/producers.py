"""Producer interval endpoints.

GET /api/producers/intervals          - All producers tying min and max
GET /api/producers/intervals/longest  - First producer with the longest gap
GET /api/producers/intervals/shortest - First producer with the shortest gap
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from razzies.api.app import get_interval_service
from razzies.intervals import ProducerIntervalService
from razzies.models.types import ProducerInterval, ProducerIntervals

router = APIRouter(prefix="/producers", tags=["producers"])


@router.get("/intervals", response_model=ProducerIntervals)
def get_producers_intervals(
    service: ProducerIntervalService = Depends(get_interval_service),
) -> ProducerIntervals:
    """Get every producer tying the shortest and the longest interval.

    Both lists are empty when no producer has won twice.
    """
    return ProducerIntervals.from_summary(service.get_intervals_summary())


@router.get("/intervals/longest", response_model=ProducerInterval | None)
def get_longest_interval(
    service: ProducerIntervalService = Depends(get_interval_service),
) -> ProducerInterval | None:
    """Get the producer with the longest gap between consecutive wins, or null."""
    entry = service.get_longest_interval()
    return ProducerInterval.from_entry(entry) if entry else None


@router.get("/intervals/shortest", response_model=ProducerInterval | None)
def get_shortest_interval(
    service: ProducerIntervalService = Depends(get_interval_service),
) -> ProducerInterval | None:
    """Get the producer with the shortest gap between consecutive wins, or null."""
    entry = service.get_shortest_interval()
    return ProducerInterval.from_entry(entry) if entry else None
