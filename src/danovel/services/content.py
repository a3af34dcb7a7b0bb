"""Novel and chapter lifecycle services."""
from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from danovel.db.session import transaction
from danovel.db.time import utcnow
from danovel.models import Chapter, ChapterStatus, Genre, Novel, UserRole
from danovel.schemas.novel import (
    ChapterCreate,
    ChapterResponse,
    ChapterUpdate,
    NovelCreate,
    NovelResponse,
    NovelUpdate,
)

from .errors import ConflictError, InvalidOperationError
from .lookups import get_or_404, require_chapter, require_novel, require_user, unique_insert

logger = logging.getLogger(__name__)

AUTHOR_ROLES = frozenset({UserRole.WRITER, UserRole.ADMIN})


def count_words(content: str) -> int:
    """Return the number of whitespace-delimited tokens in ``content``."""
    return len(content.split())


def apply_status_transition(
    chapter: Chapter,
    new_status: ChapterStatus,
    now: datetime,
) -> None:
    """Move ``chapter`` to ``new_status`` keeping ``published_at`` consistent.

    Entering ``published`` stamps ``published_at``; leaving it clears the
    stamp; staying ``published`` keeps the original stamp.
    """
    was_published = chapter.status == ChapterStatus.PUBLISHED
    if new_status == ChapterStatus.PUBLISHED:
        if not was_published:
            chapter.published_at = now
    else:
        chapter.published_at = None
    chapter.status = new_status


class ContentLifecycleService:
    """Service maintaining chapter state and the novel counters derived from it."""

    @staticmethod
    def create_novel(db: Session, data: NovelCreate) -> NovelResponse:
        """Create a novel for a writer or admin.

        Raises:
            NotFoundError: If the author or genre does not exist.
            InvalidOperationError: If the author may not publish novels.
            ConflictError: If the slug is already taken.
        """
        author = require_user(db, data.author_id)
        if author.role not in AUTHOR_ROLES:
            raise InvalidOperationError(
                f"User with id {author.id} does not have permission to create novels",
                entity="User",
                entity_id=author.id,
            )
        get_or_404(db, Genre, data.genre_id)

        duplicate = ConflictError(
            f"A novel with slug '{data.slug}' already exists", entity="Novel"
        )
        if db.scalar(select(Novel.id).where(Novel.slug == data.slug)) is not None:
            raise duplicate

        novel = Novel(
            title=data.title,
            slug=data.slug,
            description=data.description,
            cover_image_url=data.cover_image_url,
            author_id=data.author_id,
            genre_id=data.genre_id,
            status=data.status,
            is_premium=data.is_premium,
        )
        with unique_insert(db, duplicate):
            db.add(novel)
            db.flush()
        db.refresh(novel)
        logger.info("Created novel %s (%s) for author %s", novel.id, novel.slug, novel.author_id)
        return NovelResponse.model_validate(novel)

    @staticmethod
    def update_novel(db: Session, novel_id: int, data: NovelUpdate) -> NovelResponse:
        """Apply a partial update to a novel.

        Counters are never writable through this path.
        """
        novel = require_novel(db, novel_id)
        changes = data.changes()
        if "genre_id" in changes:
            get_or_404(db, Genre, changes["genre_id"])

        with transaction(db):
            for key, value in changes.items():
                setattr(novel, key, value)
            novel.updated_at = utcnow()
        db.refresh(novel)
        return NovelResponse.model_validate(novel)

    @staticmethod
    def create_chapter(db: Session, data: ChapterCreate) -> ChapterResponse:
        """Create a chapter and bump the owning novel's chapter count.

        The insert and the counter increment commit together.

        Raises:
            NotFoundError: If the novel or its author does not exist.
            ConflictError: If the chapter number is already used in the novel.
        """
        novel = require_novel(db, data.novel_id)
        require_user(db, novel.author_id)

        existing = db.scalar(
            select(Chapter.id).where(
                Chapter.novel_id == data.novel_id,
                Chapter.chapter_number == data.chapter_number,
            )
        )
        duplicate = ConflictError(
            f"Chapter number {data.chapter_number} already exists for novel {data.novel_id}",
            entity="Chapter",
            entity_id=(data.novel_id, data.chapter_number),
        )
        if existing is not None:
            raise duplicate

        now = utcnow()
        chapter = Chapter(
            novel_id=data.novel_id,
            chapter_number=data.chapter_number,
            title=data.title,
            content=data.content,
            word_count=count_words(data.content),
            status=data.status,
            is_premium=data.is_premium,
            coin_cost=Decimal(str(data.coin_cost)),
            published_at=now if data.status == ChapterStatus.PUBLISHED else None,
        )

        with unique_insert(db, duplicate):
            db.add(chapter)
            db.flush()
            db.execute(
                update(Novel)
                .where(Novel.id == data.novel_id)
                .values(total_chapters=Novel.total_chapters + 1, updated_at=now)
            )

        db.refresh(chapter)
        db.refresh(novel)
        logger.info(
            "Created chapter %s (#%s, %s) in novel %s; novel now has %s chapters",
            chapter.id,
            chapter.chapter_number,
            chapter.status.value,
            novel.id,
            novel.total_chapters,
        )
        return ChapterResponse.model_validate(chapter)

    @staticmethod
    def update_chapter(db: Session, chapter_id: int, data: ChapterUpdate) -> ChapterResponse:
        """Apply a partial update to a chapter.

        ``word_count`` is recomputed only when content is supplied, and the
        publication timestamp follows the status rules of
        :func:`apply_status_transition` only when status is supplied.

        Raises:
            NotFoundError: If the chapter does not exist.
        """
        chapter = require_chapter(db, chapter_id)
        changes = data.changes()
        previous_status = chapter.status

        with transaction(db):
            if "title" in changes:
                chapter.title = changes["title"]
            if "content" in changes:
                chapter.content = changes["content"]
                chapter.word_count = count_words(changes["content"])
            if "is_premium" in changes:
                chapter.is_premium = changes["is_premium"]
            if "coin_cost" in changes:
                chapter.coin_cost = Decimal(str(changes["coin_cost"]))
            if "status" in changes:
                apply_status_transition(chapter, changes["status"], utcnow())
            chapter.updated_at = utcnow()

        db.refresh(chapter)
        if chapter.status != previous_status:
            logger.info(
                "Chapter %s moved from %s to %s",
                chapter.id,
                previous_status.value,
                chapter.status.value,
            )
        return ChapterResponse.model_validate(chapter)

