"""Read-side listings consumed by presentation code."""
from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import asc, desc, select
from sqlalchemy.orm import Session

from danovel.core.settings import settings
from danovel.models import (
    Chapter,
    Comment,
    Genre,
    Library,
    Notification,
    Novel,
    Rating,
    ReadingProgress,
    Transaction,
    User,
)
from danovel.schemas.membership import LibraryResponse, ReadingProgressResponse
from danovel.schemas.novel import ChapterResponse, NovelFilters, NovelResponse, NovelSort
from danovel.schemas.rating import RatingResponse
from danovel.schemas.social import CommentResponse, NotificationResponse
from danovel.schemas.transaction import TransactionResponse
from danovel.schemas.user import GenreResponse, UserResponse

from .lookups import require_chapter, require_novel

_NOVEL_SORT_COLUMNS = {
    "recent": Novel.created_at,
    "popular": Novel.total_views,
    "rating": Novel.average_rating,
    "title": Novel.title,
}


def get_users(db: Session, skip: int = 0, limit: int = 100) -> list[UserResponse]:
    """Return users with simple offset-based pagination."""
    users = db.scalars(select(User).order_by(User.id).offset(skip).limit(limit)).all()
    return [UserResponse.model_validate(user) for user in users]


def get_genres(db: Session) -> list[GenreResponse]:
    genres = db.scalars(select(Genre).order_by(Genre.name)).all()
    return [GenreResponse.model_validate(genre) for genre in genres]


def get_novel(db: Session, novel_id: int) -> NovelResponse:
    return NovelResponse.model_validate(require_novel(db, novel_id))


def get_novels(
    db: Session,
    filters: NovelFilters | None = None,
    sort_by: NovelSort = "recent",
    sort_order: str = "desc",
    limit: int | None = None,
    offset: int = 0,
) -> list[NovelResponse]:
    """Return novels matching ``filters``, sorted and paginated."""
    stmt = select(Novel)
    if filters is not None:
        for key, value in filters.model_dump(exclude_none=True).items():
            stmt = stmt.where(getattr(Novel, key) == value)

    direction = asc if sort_order == "asc" else desc
    column = _NOVEL_SORT_COLUMNS.get(sort_by, Novel.created_at)
    stmt = stmt.order_by(direction(column), Novel.id)
    stmt = stmt.offset(offset).limit(limit or settings.default_page_size)
    return [NovelResponse.model_validate(novel) for novel in db.scalars(stmt).all()]


def get_chapters(db: Session, novel_id: int) -> list[ChapterResponse]:
    """Return a novel's chapters in reading order."""
    chapters = db.scalars(
        select(Chapter).where(Chapter.novel_id == novel_id).order_by(Chapter.chapter_number)
    ).all()
    return [ChapterResponse.model_validate(chapter) for chapter in chapters]


def get_chapter(db: Session, chapter_id: int) -> ChapterResponse:
    return ChapterResponse.model_validate(require_chapter(db, chapter_id))


def get_ratings(db: Session, novel_id: int) -> list[RatingResponse]:
    ratings = db.scalars(
        select(Rating).where(Rating.novel_id == novel_id).order_by(Rating.id)
    ).all()
    return [RatingResponse.model_validate(rating) for rating in ratings]


def get_comments(db: Session, chapter_id: int) -> list[CommentResponse]:
    """Return a chapter's comments oldest first; replies carry ``parent_id``."""
    comments = db.scalars(
        select(Comment)
        .where(Comment.chapter_id == chapter_id)
        .order_by(Comment.created_at, Comment.id)
    ).all()
    return [CommentResponse.model_validate(comment) for comment in comments]


def get_transactions(db: Session, user_id: int | None = None) -> list[TransactionResponse]:
    """Return ledger entries newest first, optionally for a single user."""
    stmt = select(Transaction)
    if user_id is not None:
        stmt = stmt.where(Transaction.user_id == user_id)
    entries: Sequence[Transaction] = db.scalars(
        stmt.order_by(Transaction.created_at.desc(), Transaction.id.desc())
    ).all()
    return [TransactionResponse.model_validate(entry) for entry in entries]


def get_reading_progress(
    db: Session,
    user_id: int,
    novel_id: int | None = None,
) -> list[ReadingProgressResponse]:
    stmt = select(ReadingProgress).where(ReadingProgress.user_id == user_id)
    if novel_id is not None:
        stmt = stmt.where(ReadingProgress.novel_id == novel_id)
    rows = db.scalars(stmt.order_by(ReadingProgress.last_read_at.desc())).all()
    return [ReadingProgressResponse.model_validate(row) for row in rows]


def get_library(db: Session, user_id: int) -> list[LibraryResponse]:
    """Return a user's library, most recently added first."""
    entries = db.scalars(
        select(Library)
        .where(Library.user_id == user_id)
        .order_by(Library.added_at.desc(), Library.id.desc())
    ).all()
    return [LibraryResponse.model_validate(entry) for entry in entries]


def get_notifications(db: Session, user_id: int) -> list[NotificationResponse]:
    notifications = db.scalars(
        select(Notification)
        .where(Notification.user_id == user_id)
        .order_by(Notification.created_at.desc(), Notification.id.desc())
    ).all()
    return [NotificationResponse.model_validate(item) for item in notifications]
