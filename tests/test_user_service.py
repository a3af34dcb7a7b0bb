# tests/test_user_service.py
"""Tests for account and genre management."""

from unittest.mock import patch

import pytest

from danovel.core.security import hash_password, verify_password
from danovel.models import User, UserRole
from danovel.schemas.user import GenreCreate, UserCreate, UserUpdate
from danovel.services import listing, user_service
from danovel.services.errors import ConflictError, NotFoundError


def _user_data(**overrides) -> UserCreate:
    fields = {
        "username": "alice",
        "email": "alice@example.com",
        "password": "correct horse battery",
        "role": UserRole.WRITER,
    }
    fields.update(overrides)
    return UserCreate(**fields)


def test_create_user_hashes_password(db_session) -> None:
    created = user_service.create_user(db_session, _user_data())

    assert created.role == UserRole.WRITER
    assert created.coin_balance == 0.0
    stored = db_session.get(User, created.id)
    assert stored.password_hash != "correct horse battery"
    assert verify_password("correct horse battery", stored.password_hash)
    assert not verify_password("wrong horse battery", stored.password_hash)


def test_password_hashes_are_salted() -> None:
    first = hash_password("hunter2hunter2")
    second = hash_password("hunter2hunter2")

    assert first != second
    assert verify_password("hunter2hunter2", first)
    assert verify_password("hunter2hunter2", second)


def test_password_longer_than_hash_input_rejected() -> None:
    with pytest.raises(ValueError):
        _user_data(password="\u00e9" * 40)


@pytest.mark.parametrize(
    "overrides",
    [{"email": "other@example.com"}, {"username": "bob"}],
)
def test_create_user_conflicts(db_session, overrides) -> None:
    user_service.create_user(db_session, _user_data())

    with pytest.raises(ConflictError):
        user_service.create_user(db_session, _user_data(**overrides))


def test_update_user_partial(db_session, reader) -> None:
    user_service.update_user(
        db_session, reader.id, UserUpdate(display_name="Reader One", bio="Likes dragons")
    )

    updated = user_service.update_user(db_session, reader.id, UserUpdate(bio=None))
    assert updated.display_name == "Reader One"
    assert updated.bio is None
    assert updated.is_active is True


def test_update_user_rejects_null_role() -> None:
    with pytest.raises(ValueError):
        UserUpdate(role=None)


def test_update_missing_user(db_session) -> None:
    with pytest.raises(NotFoundError):
        user_service.update_user(db_session, 4040, UserUpdate(display_name="ghost"))


def test_create_genre_unique(db_session) -> None:
    genre = user_service.create_genre(db_session, GenreCreate(name="Wuxia", slug="wuxia"))
    assert genre.is_active is True

    with pytest.raises(ConflictError):
        user_service.create_genre(db_session, GenreCreate(name="Wuxia", slug="wuxia-2"))


def test_genre_insert_race_reports_conflict(db_session) -> None:
    user_service.create_genre(db_session, GenreCreate(name="Horror", slug="horror"))

    # A concurrent writer committed the same genre after the duplicate check ran.
    with patch.object(db_session, "scalar", return_value=None):
        with pytest.raises(ConflictError):
            user_service.create_genre(db_session, GenreCreate(name="Horror", slug="horror"))

    assert [g.slug for g in listing.get_genres(db_session)] == ["horror"]
