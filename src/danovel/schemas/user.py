"""User and genre Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from danovel.core.security import MAX_PASSWORD_BYTES
from danovel.models.user import UserRole

from .common import PartialUpdate


class UserCreate(BaseModel):
    """Schema for registering a new account."""

    username: str = Field(..., min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=8)
    role: UserRole = UserRole.READER
    display_name: str | None = Field(None, max_length=100)

    @field_validator("password")
    @classmethod
    def _password_fits_hash(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class UserUpdate(PartialUpdate):
    """Partial profile update; omitted fields are left unchanged."""

    non_nullable_fields = ("is_active", "role")

    display_name: str | None = Field(None, max_length=100)
    avatar_url: str | None = None
    bio: str | None = Field(None, max_length=1000)
    is_active: bool | None = None
    role: UserRole | None = None


class UserResponse(BaseModel):
    """Account information returned to callers (credentials excluded)."""

    id: int
    username: str
    email: str
    role: UserRole
    display_name: str | None
    avatar_url: str | None
    bio: str | None
    coin_balance: float
    is_active: bool
    email_verified: bool
    two_factor_enabled: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class GenreCreate(BaseModel):
    """Schema for creating a catalog genre."""

    name: str = Field(..., min_length=1, max_length=100)
    slug: str = Field(..., min_length=1, max_length=100)
    description: str | None = Field(None, max_length=500)


class GenreResponse(BaseModel):
    id: int
    name: str
    slug: str
    description: str | None
    is_active: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
