"""Rating-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class RatingCreate(BaseModel):
    """Schema for submitting (or resubmitting) a rating."""

    user_id: int
    novel_id: int
    rating: int = Field(..., ge=1, le=5, description="Whole stars from 1 to 5")
    review: str | None = Field(None, max_length=2000)


class RatingResponse(BaseModel):
    id: int
    user_id: int
    novel_id: int
    rating: int
    review: str | None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
