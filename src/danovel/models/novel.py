"""SQLAlchemy model for novels and their denormalized counters."""

from __future__ import annotations

import enum
from datetime import datetime
from decimal import Decimal

from sqlalchemy import Boolean, DateTime, Enum, ForeignKey, Integer, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column

from danovel.db.session import Base
from danovel.db.time import utcnow


class NovelStatus(str, enum.Enum):
    """Publication lifecycle of a novel as a whole."""

    DRAFT = "draft"
    ONGOING = "ongoing"
    COMPLETED = "completed"
    HIATUS = "hiatus"
    DROPPED = "dropped"


class Novel(Base):
    """Authored content aggregate owning chapters and ratings.

    ``total_chapters`` and ``average_rating`` summarize rows of other tables
    and are maintained by the services in the same transaction as the rows
    they summarize.
    """

    __tablename__ = "novels"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    slug: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    cover_image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    author_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), nullable=False)
    status: Mapped[NovelStatus] = mapped_column(
        Enum(NovelStatus, name="novel_status", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=NovelStatus.DRAFT,
    )
    genre_id: Mapped[int] = mapped_column(Integer, ForeignKey("genres.id"), nullable=False)

    total_chapters: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    total_views: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    total_likes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # Null until the first rating arrives.
    average_rating: Mapped[Decimal | None] = mapped_column(Numeric(3, 2), nullable=True)

    is_featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_premium: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )
