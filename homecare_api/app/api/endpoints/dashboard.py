"""Admin dashboard endpoints."""

from fastapi import APIRouter

from homecare_api.app.schemas.dashboard import DashboardStats
from homecare_api.app.services.statistics_service import StatisticsService


router = APIRouter()


@router.get("/stats", response_model=DashboardStats)
async def dashboard_stats() -> DashboardStats:
    """Booking totals, revenue, a seven-day trend and a per-category breakdown."""
    return await StatisticsService.dashboard()
