"""
Dashboard metrics endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from app.core.store import MemoryStore, get_store
from app.schemas.metric import MetricResponse, MetricUpdate
from app.services.dashboard_repository import MetricsRepository

router = APIRouter(prefix="/metrics", tags=["Dashboard"])


@router.get("/{user_id}", response_model=MetricResponse)
def get_metrics(user_id: int, store: MemoryStore = Depends(get_store)):
    """
    Get the dashboard metrics of a user.

    Raises:
        HTTPException 404: If the user has no metrics yet
    """
    metrics = MetricsRepository.get(store, user_id)
    if not metrics:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Metrics not found"
        )
    return metrics


@router.put("/{user_id}", response_model=MetricResponse)
def update_metrics(
    user_id: int,
    metrics_update: MetricUpdate,
    store: MemoryStore = Depends(get_store),
):
    """Create or update the metrics of a user"""
    return MetricsRepository.update(store, user_id, metrics_update)
