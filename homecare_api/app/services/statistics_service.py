"""
Service layer for dashboard statistics.

All figures are derived on request from the full booking collection,
the provider list and the service catalogue.  Nothing is cached.

``revenue`` keeps its historical meaning, the sum of ``total_price``
over every booking including unpaid, refunded and cancelled ones.
``paid_revenue`` only counts bookings whose payment has settled.
"""

from __future__ import annotations

from collections import Counter
from datetime import date, timedelta
from typing import Dict, List, Optional

from ..core.config import settings
from ..schemas.base import utcnow
from ..schemas.booking import BookingRead, BookingStatus, PaymentStatus
from ..schemas.dashboard import CategoryStat, DashboardStats, TrendPoint
from ..schemas.service import ServiceRead
from ..schemas.user import UserRole
from ..storage import get_storage
from .booking_lifecycle import ACTIVE_STATUSES

TREND_DAYS = 7


def bookings_trend(bookings: List[BookingRead], today: date, days: int = TREND_DAYS) -> List[TrendPoint]:
    """Count bookings per scheduled day for the ``days`` days ending ``today``.

    Days are calendar days in UTC, oldest first; days without bookings
    are reported with a count of zero.
    """
    per_day = Counter(b.scheduled_date.date() for b in bookings)
    start = today - timedelta(days=days - 1)
    return [
        TrendPoint(date=(start + timedelta(days=offset)).isoformat(), count=per_day[start + timedelta(days=offset)])
        for offset in range(days)
    ]


def category_breakdown(bookings: List[BookingRead], services: List[ServiceRead]) -> List[CategoryStat]:
    """Number of bookings per service category, sorted by category name.

    Every category in the catalogue is listed, even without bookings.
    Bookings for unknown services are left out.
    """
    category_of: Dict[int, str] = {s.id: s.category for s in services}
    counts: Counter = Counter({category: 0 for category in category_of.values()})
    for booking in bookings:
        category = category_of.get(booking.service_id)
        if category is not None:
            counts[category] += 1
    return [CategoryStat(name=name, value=counts[name]) for name in sorted(counts)]


class StatisticsService:
    """Aggregated metrics for the admin dashboard."""

    @classmethod
    async def dashboard(cls, today: Optional[date] = None) -> DashboardStats:
        """Compute the dashboard figures.

        ``today`` anchors the seven‑day trend and defaults to the
        current UTC date.
        """
        storage = get_storage()
        bookings = storage.get_bookings()
        providers = storage.get_users_by_role(UserRole.PROVIDER.value)
        services = storage.get_services()
        today = today or utcnow().date()

        return DashboardStats(
            total_bookings=len(bookings),
            active_bookings=sum(1 for b in bookings if b.status in ACTIVE_STATUSES),
            completed_bookings=sum(1 for b in bookings if b.status == BookingStatus.COMPLETED),
            revenue=sum(b.total_price for b in bookings),
            paid_revenue=sum(b.total_price for b in bookings if b.payment_status == PaymentStatus.PAID),
            active_providers=len(providers),
            satisfaction=settings.satisfaction_score,
            bookings_trend=bookings_trend(bookings, today),
            category_stats=category_breakdown(bookings, services),
        )
