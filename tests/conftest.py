# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator
from decimal import Decimal
from itertools import count
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("PYTEST_RUNNING", "true")

from danovel.core.security import hash_password
from danovel.db.session import Base
from danovel.db.session import get_db as app_get_session
from danovel.main import app as fastapi_app
from danovel.models import (
    Chapter,
    ChapterStatus,
    Genre,
    Novel,
    NovelStatus,
    User,
    UserRole,
)

TEST_DB_URL = "sqlite://"

_USER_COUNTER = count(1)
_PASSWORD_HASH = hash_password("password123")
_GENRE_COUNTER = count(1)
_NOVEL_COUNTER = count(1)


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()

        # Services commit their own units of work, so wipe every table between tests.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def make_user(db_session: Session) -> Callable[..., User]:
    """Return a factory persisting users with unique names."""

    def _make_user(role: UserRole = UserRole.READER, **overrides: Any) -> User:
        n = next(_USER_COUNTER)
        fields: dict[str, Any] = {
            "username": f"user{n}",
            "email": f"user{n}@example.com",
            "password_hash": _PASSWORD_HASH,
            "role": role,
            "coin_balance": Decimal("0"),
        }
        fields.update(overrides)
        user = User(**fields)
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture()
def genre(db_session: Session) -> Genre:
    """Create a default genre."""
    n = next(_GENRE_COUNTER)
    genre = Genre(name=f"Fantasy {n}", slug=f"fantasy-{n}")
    db_session.add(genre)
    db_session.commit()
    db_session.refresh(genre)
    return genre


@pytest.fixture()
def writer(make_user: Callable[..., User]) -> User:
    return make_user(UserRole.WRITER)


@pytest.fixture()
def reader(make_user: Callable[..., User]) -> User:
    return make_user(UserRole.READER)


@pytest.fixture()
def make_novel(db_session: Session, writer: User, genre: Genre) -> Callable[..., Novel]:
    """Return a factory persisting novels owned by ``writer``."""

    def _make_novel(**overrides: Any) -> Novel:
        n = next(_NOVEL_COUNTER)
        fields: dict[str, Any] = {
            "title": f"Novel {n}",
            "slug": f"novel-{n}",
            "author_id": writer.id,
            "genre_id": genre.id,
            "status": NovelStatus.ONGOING,
        }
        fields.update(overrides)
        novel = Novel(**fields)
        db_session.add(novel)
        db_session.commit()
        db_session.refresh(novel)
        return novel

    return _make_novel


@pytest.fixture()
def novel(make_novel: Callable[..., Novel]) -> Novel:
    return make_novel()


@pytest.fixture()
def make_chapter(db_session: Session) -> Callable[..., Chapter]:
    """Return a factory inserting chapter rows directly, bypassing the counters."""

    def _make_chapter(novel: Novel, chapter_number: int, **overrides: Any) -> Chapter:
        fields: dict[str, Any] = {
            "novel_id": novel.id,
            "chapter_number": chapter_number,
            "title": f"Chapter {chapter_number}",
            "content": "Once upon a time",
            "word_count": 4,
            "status": ChapterStatus.DRAFT,
        }
        fields.update(overrides)
        chapter = Chapter(**fields)
        db_session.add(chapter)
        db_session.commit()
        db_session.refresh(chapter)
        return chapter

    return _make_chapter
