"""Admin dashboard endpoints."""

from fastapi import APIRouter

from danovel.schemas.dashboard import DashboardStats
from danovel.services.dashboard import DashboardAggregator

from ..dependencies import SessionDep

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStats)
async def get_dashboard_stats(db: SessionDep) -> DashboardStats:
    """Return platform totals and today's activity."""
    return DashboardAggregator.compute_stats(db)
