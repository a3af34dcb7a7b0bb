"""CRUD-style helpers for managing users and genres."""
from __future__ import annotations

from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from danovel.core import security
from danovel.db.session import transaction
from danovel.db.time import utcnow
from danovel.models import Genre, User
from danovel.schemas.user import (
    GenreCreate,
    GenreResponse,
    UserCreate,
    UserResponse,
    UserUpdate,
)

from .errors import ConflictError
from .lookups import require_user, unique_insert

__all__ = [
    "create_user",
    "update_user",
    "create_genre",
]


def create_user(db: Session, user: UserCreate) -> UserResponse:
    """Persist a new account with a hashed password and an empty coin balance."""
    clash = db.scalars(
        select(User).where(or_(User.username == user.username, User.email == user.email))
    ).first()
    if clash is not None:
        field = "username" if clash.username == user.username else "email"
        raise ConflictError(
            f"A user with this {field} already exists", entity="User", entity_id=clash.id
        )
    duplicate = ConflictError("A user with this username or email already exists", entity="User")

    db_user = User(
        username=user.username,
        email=str(user.email),
        password_hash=security.hash_password(user.password),
        role=user.role,
        display_name=user.display_name,
    )
    with unique_insert(db, duplicate):
        db.add(db_user)
        db.flush()
    db.refresh(db_user)
    return UserResponse.model_validate(db_user)


def update_user(db: Session, user_id: int, update_data: UserUpdate) -> UserResponse:
    """Apply partial updates to an existing user."""
    db_user = require_user(db, user_id)
    with transaction(db):
        for key, value in update_data.changes().items():
            setattr(db_user, key, value)
        db_user.updated_at = utcnow()
    db.refresh(db_user)
    return UserResponse.model_validate(db_user)


def create_genre(db: Session, genre: GenreCreate) -> GenreResponse:
    """Persist a new genre; names and slugs are unique."""
    clash = db.scalar(
        select(Genre.id).where(or_(Genre.name == genre.name, Genre.slug == genre.slug))
    )
    duplicate = ConflictError(
        "A genre with this name or slug already exists", entity="Genre", entity_id=clash
    )
    if clash is not None:
        raise duplicate

    db_genre = Genre(name=genre.name, slug=genre.slug, description=genre.description)
    with unique_insert(db, duplicate):
        db.add(db_genre)
        db.flush()
    db.refresh(db_genre)
    return GenreResponse.model_validate(db_genre)
