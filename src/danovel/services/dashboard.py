"""Point-in-time platform statistics for the admin dashboard."""
from __future__ import annotations

from datetime import datetime

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session

from danovel.core.settings import settings
from danovel.db.time import local_day_bounds
from danovel.models import Chapter, ChapterStatus, Novel, Transaction, TransactionStatus, User
from danovel.schemas.dashboard import DashboardStats


class DashboardAggregator:
    """Read-only aggregation recomputed from source rows on every call."""

    @staticmethod
    def compute_stats(db: Session, now: datetime | None = None) -> DashboardStats:
        """Return global totals and activity for the current local day.

        Args:
            db: Database session
            now: Reference instant for the "today" window; defaults to the wall clock.

        Returns:
            Dashboard statistics. "Today" is local midnight to midnight in
            ``settings.stats_timezone``. Published chapters are counted by
            creation time, not by ``published_at``.
        """
        start, end = local_day_bounds(settings.stats_timezone, now)

        def count(stmt: Select[tuple[int]]) -> int:
            return int(db.scalar(stmt) or 0)

        total_revenue = db.scalar(
            select(func.coalesce(func.sum(Transaction.amount), 0)).where(
                Transaction.status == TransactionStatus.COMPLETED
            )
        )

        return DashboardStats(
            total_users=count(select(func.count()).select_from(User)),
            total_novels=count(select(func.count()).select_from(Novel)),
            total_chapters=count(select(func.count()).select_from(Chapter)),
            total_transactions=count(select(func.count()).select_from(Transaction)),
            total_revenue=float(total_revenue or 0),
            active_users_today=count(
                select(func.count(func.distinct(Transaction.user_id))).where(
                    Transaction.created_at >= start,
                    Transaction.created_at < end,
                )
            ),
            new_users_today=count(
                select(func.count()).select_from(User).where(
                    User.created_at >= start,
                    User.created_at < end,
                )
            ),
            chapters_published_today=count(
                select(func.count()).select_from(Chapter).where(
                    Chapter.status == ChapterStatus.PUBLISHED,
                    Chapter.created_at >= start,
                    Chapter.created_at < end,
                )
            ),
        )
