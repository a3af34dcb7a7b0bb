"""Follow, comment, and notification Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from danovel.models.notification import NotificationType


class FollowCreate(BaseModel):
    follower_id: int
    following_id: int


class FollowResponse(BaseModel):
    id: int
    follower_id: int
    following_id: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CommentCreate(BaseModel):
    """Schema for creating a comment or a reply on the same chapter."""

    user_id: int
    chapter_id: int
    content: str = Field(..., min_length=1, max_length=1000)
    parent_id: int | None = Field(None, description="Comment being replied to")


class CommentResponse(BaseModel):
    id: int
    user_id: int
    chapter_id: int
    parent_id: int | None
    content: str
    likes: int
    is_deleted: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class NotificationCreate(BaseModel):
    user_id: int
    type: NotificationType
    title: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1, max_length=500)
    reference_id: int | None = None


class NotificationResponse(BaseModel):
    id: int
    user_id: int
    type: NotificationType
    title: str
    message: str
    reference_id: int | None
    is_read: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
