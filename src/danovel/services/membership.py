"""Library membership and reading-progress tracking.

Library entries are reject-on-duplicate while reading progress is an upsert;
both are keyed on (user, novel).
"""
from __future__ import annotations

import logging
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.orm import Session

from danovel.db.session import transaction
from danovel.db.time import utcnow
from danovel.models import Chapter, Library, ReadingProgress
from danovel.schemas.membership import (
    LibraryAdd,
    LibraryResponse,
    ReadingProgressResponse,
    ReadingProgressUpdate,
)

from .errors import ConflictError, InvalidOperationError, NotFoundError
from .lookups import require_novel, require_user, unique_insert

logger = logging.getLogger(__name__)


class MembershipTracker:
    """Service for per-(user, novel) membership rows."""

    @staticmethod
    def add_to_library(db: Session, data: LibraryAdd) -> LibraryResponse:
        """Add a novel to a user's library.

        Raises:
            NotFoundError: If the user or novel does not exist.
            ConflictError: If the novel is already in the user's library.
        """
        require_user(db, data.user_id)
        require_novel(db, data.novel_id)

        existing = db.scalar(
            select(Library.id).where(
                Library.user_id == data.user_id,
                Library.novel_id == data.novel_id,
            )
        )
        duplicate = ConflictError(
            f"Novel with id {data.novel_id} is already in the library of user {data.user_id}",
            entity="Library",
            entity_id=existing,
        )
        if existing is not None:
            logger.debug(
                "Rejected duplicate library entry for user %s novel %s",
                data.user_id,
                data.novel_id,
            )
            raise duplicate

        entry = Library(user_id=data.user_id, novel_id=data.novel_id, is_favorite=data.is_favorite)
        with unique_insert(db, duplicate):
            db.add(entry)
            db.flush()
        db.refresh(entry)
        return LibraryResponse.model_validate(entry)

    @staticmethod
    def update_reading_progress(
        db: Session,
        data: ReadingProgressUpdate,
    ) -> ReadingProgressResponse:
        """Record where a user is in a novel, creating the row on first read.

        Raises:
            InvalidOperationError: If the percentage is outside 0..100.
            NotFoundError: If the user, novel, or chapter (within the novel) is missing.
        """
        if not 0 <= data.progress_percentage <= 100:
            raise InvalidOperationError(
                f"Progress percentage must be between 0 and 100, got {data.progress_percentage}",
                entity="ReadingProgress",
            )
        require_user(db, data.user_id)
        require_novel(db, data.novel_id)
        chapter = db.get(Chapter, data.chapter_id)
        if chapter is None or chapter.novel_id != data.novel_id:
            raise NotFoundError("Chapter", data.chapter_id, f"in novel {data.novel_id}")

        now = utcnow()
        percentage = Decimal(str(data.progress_percentage))
        with transaction(db):
            progress = db.scalars(
                select(ReadingProgress).where(
                    ReadingProgress.user_id == data.user_id,
                    ReadingProgress.novel_id == data.novel_id,
                )
            ).first()
            if progress is not None:
                progress.chapter_id = data.chapter_id
                progress.progress_percentage = percentage
                progress.last_read_at = now
                progress.updated_at = now
            else:
                progress = ReadingProgress(
                    user_id=data.user_id,
                    novel_id=data.novel_id,
                    chapter_id=data.chapter_id,
                    progress_percentage=percentage,
                    last_read_at=now,
                )
                db.add(progress)
            db.flush()

        db.refresh(progress)
        return ReadingProgressResponse.model_validate(progress)
