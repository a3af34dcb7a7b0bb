"""Existence and uniqueness checks shared by the core services."""
from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from danovel.db.session import transaction
from danovel.models import Chapter, Novel, User

from .errors import ConflictError, NotFoundError

T = TypeVar("T")


def get_or_404(db: Session, model: type[T], entity_id: int) -> T:
    """Return the row of ``model`` with primary key ``entity_id`` or raise NotFoundError."""
    instance = db.get(model, entity_id)
    if instance is None:
        raise NotFoundError(model.__name__, entity_id)
    return instance


def require_user(db: Session, user_id: int) -> User:
    return get_or_404(db, User, user_id)


def require_novel(db: Session, novel_id: int) -> Novel:
    return get_or_404(db, Novel, novel_id)


def require_chapter(db: Session, chapter_id: int) -> Chapter:
    return get_or_404(db, Chapter, chapter_id)


@contextmanager
def unique_insert(db: Session, conflict: ConflictError) -> Iterator[Session]:
    """Run an insert in ``transaction(db)``, raising ``conflict`` on a unique violation.

    Covers the window between a duplicate pre-check and the insert, where a
    concurrent request may have written the same key.
    """
    try:
        with transaction(db):
            yield db
    except IntegrityError as exc:
        raise conflict from exc
