"""Novel and chapter Pydantic schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from danovel.models.chapter import ChapterStatus
from danovel.models.novel import NovelStatus

from .common import PartialUpdate


class NovelCreate(BaseModel):
    """Schema for creating a novel."""

    title: str = Field(..., min_length=1, max_length=200)
    slug: str = Field(..., min_length=1, max_length=200)
    description: str | None = Field(None, max_length=5000)
    cover_image_url: str | None = None
    author_id: int
    genre_id: int
    status: NovelStatus = NovelStatus.DRAFT
    is_premium: bool = False


class NovelUpdate(PartialUpdate):
    """Partial novel update; explicit null clears description or cover image."""

    non_nullable_fields = ("title", "status", "genre_id", "is_featured", "is_premium")

    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = Field(None, max_length=5000)
    cover_image_url: str | None = None
    status: NovelStatus | None = None
    genre_id: int | None = None
    is_featured: bool | None = None
    is_premium: bool | None = None


class NovelResponse(BaseModel):
    """Novel with its denormalized counters."""

    id: int
    title: str
    slug: str
    description: str | None
    cover_image_url: str | None
    author_id: int
    status: NovelStatus
    genre_id: int
    total_chapters: int
    total_views: int
    total_likes: int
    average_rating: float | None
    is_featured: bool
    is_premium: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class NovelFilters(BaseModel):
    """Optional equality filters for novel listings."""

    genre_id: int | None = None
    status: NovelStatus | None = None
    is_featured: bool | None = None
    is_premium: bool | None = None
    author_id: int | None = None


NovelSort = Literal["recent", "popular", "rating", "title"]


class ChapterCreate(BaseModel):
    """Schema for creating a chapter; ``word_count`` is always derived."""

    novel_id: int
    chapter_number: int = Field(..., gt=0)
    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1)
    status: ChapterStatus = ChapterStatus.DRAFT
    is_premium: bool = False
    coin_cost: float = Field(0, ge=0)


class ChapterUpdate(PartialUpdate):
    """Partial chapter update; omitted fields are left unchanged."""

    non_nullable_fields = ("title", "content", "status", "is_premium", "coin_cost")

    title: str | None = Field(None, min_length=1, max_length=200)
    content: str | None = Field(None, min_length=1)
    status: ChapterStatus | None = None
    is_premium: bool | None = None
    coin_cost: float | None = Field(None, ge=0)


class ChapterResponse(BaseModel):
    id: int
    novel_id: int
    chapter_number: int
    title: str
    content: str
    word_count: int
    status: ChapterStatus
    is_premium: bool
    coin_cost: float
    views: int
    likes: int
    published_at: datetime | None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
