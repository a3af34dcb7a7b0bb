# tests/test_ratings.py
"""Tests for rating upserts and the novel average."""

from decimal import Decimal

import pytest
from sqlalchemy import func, select

from danovel.models import Rating
from danovel.schemas.novel import ChapterCreate
from danovel.schemas.rating import RatingCreate
from danovel.services.content import ContentLifecycleService
from danovel.services.errors import InvalidOperationError, NotFoundError
from danovel.services.ratings import RatingAggregator, quantize_rating


def test_quantize_rating_rounds_half_up() -> None:
    assert quantize_rating(Decimal("3.335")) == Decimal("3.34")
    assert quantize_rating(4) == Decimal("4.00")
    assert quantize_rating(Decimal("3.3333333")) == Decimal("3.33")


def test_publishing_flow_average(db_session, make_user, novel) -> None:
    """Chapter creation then two ratings yield averages 3.0 and 3.5."""
    first_reader = make_user()
    second_reader = make_user()

    chapter = ContentLifecycleService.create_chapter(
        db_session,
        ChapterCreate(
            novel_id=novel.id, chapter_number=1, title="One", content="Hello brave world"
        ),
    )
    assert chapter.word_count == 3
    db_session.refresh(novel)
    assert novel.total_chapters == 1

    RatingAggregator.submit_rating(
        db_session, RatingCreate(user_id=first_reader.id, novel_id=novel.id, rating=3)
    )
    db_session.refresh(novel)
    assert novel.average_rating == Decimal("3.00")

    RatingAggregator.submit_rating(
        db_session, RatingCreate(user_id=second_reader.id, novel_id=novel.id, rating=4)
    )
    db_session.refresh(novel)
    assert novel.average_rating == Decimal("3.50")


def test_resubmission_updates_single_row(db_session, reader, novel) -> None:
    first = RatingAggregator.submit_rating(
        db_session,
        RatingCreate(user_id=reader.id, novel_id=novel.id, rating=2, review="meh"),
    )
    second = RatingAggregator.submit_rating(
        db_session,
        RatingCreate(user_id=reader.id, novel_id=novel.id, rating=5, review="grew on me"),
    )

    assert first.id == second.id
    assert second.rating == 5
    assert second.review == "grew on me"

    rows = db_session.scalar(
        select(func.count()).select_from(Rating).where(Rating.novel_id == novel.id)
    )
    assert rows == 1
    db_session.refresh(novel)
    assert novel.average_rating == Decimal("5.00")


def test_average_tracks_mean(db_session, make_user, novel) -> None:
    for stars in (5, 4, 4):
        RatingAggregator.submit_rating(
            db_session,
            RatingCreate(user_id=make_user().id, novel_id=novel.id, rating=stars),
        )

    db_session.refresh(novel)
    assert novel.average_rating == Decimal("4.33")


@pytest.mark.parametrize("stars", [0, 6])
def test_out_of_range_rating_rejected(db_session, reader, novel, stars: int) -> None:
    data = RatingCreate.model_construct(
        user_id=reader.id, novel_id=novel.id, rating=stars, review=None
    )

    with pytest.raises(InvalidOperationError):
        RatingAggregator.submit_rating(db_session, data)

    db_session.refresh(novel)
    assert novel.average_rating is None


def test_rating_schema_bounds() -> None:
    with pytest.raises(ValueError):
        RatingCreate(user_id=1, novel_id=1, rating=6)


def test_rating_unknown_novel(db_session, reader) -> None:
    with pytest.raises(NotFoundError):
        RatingAggregator.submit_rating(
            db_session, RatingCreate(user_id=reader.id, novel_id=31337, rating=4)
        )
    assert db_session.scalar(select(func.count()).select_from(Rating)) == 0


def test_rating_unknown_user(db_session, novel) -> None:
    with pytest.raises(NotFoundError):
        RatingAggregator.submit_rating(
            db_session, RatingCreate(user_id=31337, novel_id=novel.id, rating=4)
        )


def test_updating_one_of_several_ratings(db_session, make_user, novel) -> None:
    first_reader = make_user()
    second_reader = make_user()

    RatingAggregator.submit_rating(
        db_session, RatingCreate(user_id=first_reader.id, novel_id=novel.id, rating=4)
    )
    RatingAggregator.submit_rating(
        db_session, RatingCreate(user_id=second_reader.id, novel_id=novel.id, rating=2)
    )
    db_session.refresh(novel)
    assert novel.average_rating == Decimal("3.00")

    RatingAggregator.submit_rating(
        db_session, RatingCreate(user_id=first_reader.id, novel_id=novel.id, rating=5)
    )
    db_session.refresh(novel)
    assert novel.average_rating == Decimal("3.50")

    rows = db_session.scalar(
        select(func.count()).select_from(Rating).where(Rating.novel_id == novel.id)
    )
    assert rows == 2
