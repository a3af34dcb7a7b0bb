"""Admin dashboard statistics schema."""

from pydantic import BaseModel, Field


class DashboardStats(BaseModel):
    """Point-in-time platform totals and today's activity."""

    total_users: int
    total_novels: int
    total_chapters: int
    total_transactions: int
    total_revenue: float = Field(..., description="Sum of completed transaction amounts")
    active_users_today: int
    new_users_today: int
    chapters_published_today: int
