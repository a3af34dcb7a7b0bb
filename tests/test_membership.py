# tests/test_membership.py
"""Tests for library entries and reading progress."""

from datetime import UTC, datetime
from unittest.mock import patch

import pytest
from sqlalchemy import func, select

from danovel.models import Library, ReadingProgress
from danovel.schemas.membership import LibraryAdd, ReadingProgressUpdate
from danovel.services.errors import ConflictError, InvalidOperationError, NotFoundError
from danovel.services.membership import MembershipTracker


def test_add_to_library_rejects_duplicates(db_session, reader, novel) -> None:
    entry = MembershipTracker.add_to_library(
        db_session, LibraryAdd(user_id=reader.id, novel_id=novel.id, is_favorite=True)
    )
    assert entry.is_favorite is True

    with pytest.raises(ConflictError):
        MembershipTracker.add_to_library(
            db_session, LibraryAdd(user_id=reader.id, novel_id=novel.id)
        )

    rows = db_session.scalar(
        select(func.count()).select_from(Library).where(Library.user_id == reader.id)
    )
    assert rows == 1


def test_add_to_library_unknown_novel(db_session, reader) -> None:
    with pytest.raises(NotFoundError):
        MembershipTracker.add_to_library(db_session, LibraryAdd(user_id=reader.id, novel_id=404))


def test_reading_progress_upserts(db_session, reader, novel, make_chapter) -> None:
    first_chapter = make_chapter(novel, 1)
    second_chapter = make_chapter(novel, 2)
    times = [
        datetime(2024, 5, 10, 8, 0, tzinfo=UTC),
        datetime(2024, 5, 10, 9, 0, tzinfo=UTC),
    ]

    with patch("danovel.services.membership.utcnow", side_effect=times):
        first = MembershipTracker.update_reading_progress(
            db_session,
            ReadingProgressUpdate(
                user_id=reader.id,
                novel_id=novel.id,
                chapter_id=first_chapter.id,
                progress_percentage=40,
            ),
        )
        first_read_at = first.last_read_at
        second = MembershipTracker.update_reading_progress(
            db_session,
            ReadingProgressUpdate(
                user_id=reader.id,
                novel_id=novel.id,
                chapter_id=second_chapter.id,
                progress_percentage=12.5,
            ),
        )

    assert second.id == first.id
    assert second.chapter_id == second_chapter.id
    assert second.progress_percentage == pytest.approx(12.5)
    assert second.last_read_at > first_read_at

    rows = db_session.scalar(select(func.count()).select_from(ReadingProgress))
    assert rows == 1


def test_reading_progress_chapter_must_belong_to_novel(
    db_session, reader, make_novel, make_chapter
) -> None:
    novel = make_novel()
    other_novel = make_novel()
    foreign_chapter = make_chapter(other_novel, 1)

    with pytest.raises(NotFoundError) as exc_info:
        MembershipTracker.update_reading_progress(
            db_session,
            ReadingProgressUpdate(
                user_id=reader.id,
                novel_id=novel.id,
                chapter_id=foreign_chapter.id,
                progress_percentage=10,
            ),
        )
    assert f"in novel {novel.id}" in str(exc_info.value)


@pytest.mark.parametrize("percentage", [-0.5, 100.5])
def test_reading_progress_range(db_session, reader, novel, make_chapter, percentage) -> None:
    chapter = make_chapter(novel, 1)
    data = ReadingProgressUpdate.model_construct(
        user_id=reader.id,
        novel_id=novel.id,
        chapter_id=chapter.id,
        progress_percentage=percentage,
    )

    with pytest.raises(InvalidOperationError):
        MembershipTracker.update_reading_progress(db_session, data)


def test_library_insert_race_reports_conflict(db_session, reader, novel) -> None:
    data = LibraryAdd(user_id=reader.id, novel_id=novel.id)
    MembershipTracker.add_to_library(db_session, data)

    # A concurrent request saved the novel after the duplicate check ran.
    with patch.object(db_session, "scalar", return_value=None):
        with pytest.raises(ConflictError):
            MembershipTracker.add_to_library(db_session, data)

    assert db_session.scalar(select(func.count()).select_from(Library)) == 1
