"""Response models for the admin dashboard."""

from typing import List

from .base import CamelModel


class TrendPoint(CamelModel):
    date: str
    count: int


class CategoryStat(CamelModel):
    name: str
    value: int


class DashboardStats(CamelModel):
    total_bookings: int
    active_bookings: int
    completed_bookings: int
    # Sum of ``total_price`` over every booking regardless of payment
    # status; ``paid_revenue`` only counts settled bookings.
    revenue: int
    paid_revenue: int
    active_providers: int
    satisfaction: float
    bookings_trend: List[TrendPoint]
    category_stats: List[CategoryStat]
