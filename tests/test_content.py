# tests/test_content.py
"""Tests for novel and chapter lifecycle rules."""

from datetime import UTC, datetime
from unittest.mock import patch

import pytest
from sqlalchemy import func, select

from danovel.models import Chapter, ChapterStatus, UserRole
from danovel.schemas.novel import ChapterCreate, ChapterUpdate, NovelCreate, NovelUpdate
from danovel.services.content import ContentLifecycleService, count_words
from danovel.services.errors import ConflictError, InvalidOperationError, NotFoundError

T0 = datetime(2024, 5, 10, 8, 0, tzinfo=UTC)
T1 = datetime(2024, 5, 11, 9, 30, tzinfo=UTC)


def _naive(value: datetime) -> datetime:
    return value.replace(tzinfo=None)


@pytest.mark.parametrize(
    ("content", "expected"),
    [
        ("Hello brave world", 3),
        ("  spaced\tout\n\nwords  ", 3),
        ("   ", 0),
        ("single", 1),
    ],
)
def test_count_words(content: str, expected: int) -> None:
    assert count_words(content) == expected


def test_create_novel_requires_writer_role(db_session, make_user, genre) -> None:
    reader = make_user(UserRole.READER)
    data = NovelCreate(title="Story", slug="story", author_id=reader.id, genre_id=genre.id)

    with pytest.raises(InvalidOperationError):
        ContentLifecycleService.create_novel(db_session, data)


def test_create_novel_unknown_genre(db_session, writer) -> None:
    data = NovelCreate(title="Story", slug="story", author_id=writer.id, genre_id=9999)

    with pytest.raises(NotFoundError) as exc_info:
        ContentLifecycleService.create_novel(db_session, data)
    assert str(exc_info.value) == "Genre with id 9999 not found"


def test_create_novel_duplicate_slug(db_session, writer, genre) -> None:
    data = NovelCreate(title="Story", slug="story", author_id=writer.id, genre_id=genre.id)
    created = ContentLifecycleService.create_novel(db_session, data)
    assert created.total_chapters == 0
    assert created.average_rating is None

    with pytest.raises(ConflictError):
        ContentLifecycleService.create_novel(db_session, data)


def test_update_novel_partial(db_session, make_novel) -> None:
    novel = make_novel(description="Original blurb", cover_image_url="https://example.com/c.png")

    updated = ContentLifecycleService.update_novel(
        db_session, novel.id, NovelUpdate(title="Renamed")
    )
    assert updated.title == "Renamed"
    assert updated.description == "Original blurb"

    cleared = ContentLifecycleService.update_novel(
        db_session, novel.id, NovelUpdate(cover_image_url=None)
    )
    assert cleared.cover_image_url is None
    assert cleared.description == "Original blurb"


def test_novel_update_rejects_null_title() -> None:
    with pytest.raises(ValueError):
        NovelUpdate(title=None)


def test_create_chapter_derives_word_count_and_bumps_counter(db_session, novel) -> None:
    chapter = ContentLifecycleService.create_chapter(
        db_session,
        ChapterCreate(
            novel_id=novel.id,
            chapter_number=1,
            title="Opening",
            content="Hello brave world",
        ),
    )

    assert chapter.word_count == 3
    assert chapter.status == ChapterStatus.DRAFT
    assert chapter.published_at is None

    db_session.refresh(novel)
    assert novel.total_chapters == 1


def test_chapter_counter_matches_rows(db_session, novel) -> None:
    for number in (1, 2, 3):
        ContentLifecycleService.create_chapter(
            db_session,
            ChapterCreate(novel_id=novel.id, chapter_number=number, title="T", content="x y"),
        )

    rows = db_session.scalar(
        select(func.count()).select_from(Chapter).where(Chapter.novel_id == novel.id)
    )
    db_session.refresh(novel)
    assert novel.total_chapters == rows == 3


def test_create_chapter_duplicate_number_leaves_counter(db_session, novel) -> None:
    data = ChapterCreate(novel_id=novel.id, chapter_number=1, title="One", content="a b")
    ContentLifecycleService.create_chapter(db_session, data)

    with pytest.raises(ConflictError):
        ContentLifecycleService.create_chapter(db_session, data)

    db_session.refresh(novel)
    assert novel.total_chapters == 1


def test_create_chapter_unknown_novel(db_session) -> None:
    data = ChapterCreate(novel_id=4242, chapter_number=1, title="One", content="a b")

    with pytest.raises(NotFoundError):
        ContentLifecycleService.create_chapter(db_session, data)


def test_create_published_chapter_stamps_published_at(db_session, novel) -> None:
    with patch("danovel.services.content.utcnow", return_value=T0):
        chapter = ContentLifecycleService.create_chapter(
            db_session,
            ChapterCreate(
                novel_id=novel.id,
                chapter_number=1,
                title="Live",
                content="already out",
                status=ChapterStatus.PUBLISHED,
            ),
        )

    assert chapter.published_at is not None
    assert _naive(chapter.published_at) == _naive(T0)


def test_status_transitions_manage_published_at(db_session, novel) -> None:
    created = ContentLifecycleService.create_chapter(
        db_session,
        ChapterCreate(novel_id=novel.id, chapter_number=1, title="Draft", content="a b c"),
    )

    with patch("danovel.services.content.utcnow", return_value=T0):
        published = ContentLifecycleService.update_chapter(
            db_session, created.id, ChapterUpdate(status=ChapterStatus.PUBLISHED)
        )
    assert _naive(published.published_at) == _naive(T0)

    # Re-publishing keeps the original stamp.
    with patch("danovel.services.content.utcnow", return_value=T1):
        republished = ContentLifecycleService.update_chapter(
            db_session, created.id, ChapterUpdate(status=ChapterStatus.PUBLISHED)
        )
    assert _naive(republished.published_at) == _naive(T0)

    unpublished = ContentLifecycleService.update_chapter(
        db_session, created.id, ChapterUpdate(status=ChapterStatus.DRAFT)
    )
    assert unpublished.status == ChapterStatus.DRAFT
    assert unpublished.published_at is None


def test_update_chapter_only_touches_supplied_fields(db_session, novel) -> None:
    created = ContentLifecycleService.create_chapter(
        db_session,
        ChapterCreate(
            novel_id=novel.id,
            chapter_number=1,
            title="Title",
            content="one two three four",
            status=ChapterStatus.PUBLISHED,
        ),
    )
    original_published_at = created.published_at

    retitled = ContentLifecycleService.update_chapter(
        db_session, created.id, ChapterUpdate(title="New title")
    )
    assert retitled.title == "New title"
    assert retitled.word_count == 4
    assert retitled.status == ChapterStatus.PUBLISHED
    assert retitled.published_at == original_published_at

    rewritten = ContentLifecycleService.update_chapter(
        db_session, created.id, ChapterUpdate(content="just two")
    )
    assert rewritten.word_count == 2
    assert rewritten.content == "just two"


def test_update_missing_chapter(db_session) -> None:
    with pytest.raises(NotFoundError):
        ContentLifecycleService.update_chapter(db_session, 777, ChapterUpdate(title="x"))


def test_chapter_number_race_reports_conflict(db_session, novel) -> None:
    data = ChapterCreate(novel_id=novel.id, chapter_number=1, title="One", content="a b")
    ContentLifecycleService.create_chapter(db_session, data)

    # A concurrent writer inserted the same number after the duplicate check ran.
    with patch.object(db_session, "scalar", return_value=None):
        with pytest.raises(ConflictError):
            ContentLifecycleService.create_chapter(db_session, data)

    db_session.refresh(novel)
    assert novel.total_chapters == 1
