"""Library and reading-progress Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class LibraryAdd(BaseModel):
    user_id: int
    novel_id: int
    is_favorite: bool = False


class LibraryResponse(BaseModel):
    id: int
    user_id: int
    novel_id: int
    is_favorite: bool
    added_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ReadingProgressUpdate(BaseModel):
    """Upsert payload for a reader's position in a novel."""

    user_id: int
    novel_id: int
    chapter_id: int
    progress_percentage: float = Field(..., ge=0, le=100)


class ReadingProgressResponse(BaseModel):
    id: int
    user_id: int
    novel_id: int
    chapter_id: int
    progress_percentage: float
    last_read_at: datetime
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
