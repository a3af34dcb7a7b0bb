"""User account endpoints."""

from fastapi import APIRouter, status

from danovel.schemas.user import UserCreate, UserResponse, UserUpdate
from danovel.services import listing, user_service

from ..dependencies import SessionDep

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(user_data: UserCreate, db: SessionDep) -> UserResponse:
    """Register a new account."""
    return user_service.create_user(db, user_data)


@router.get("/", response_model=list[UserResponse])
async def list_users(db: SessionDep, skip: int = 0, limit: int = 100) -> list[UserResponse]:
    """List users."""
    return listing.get_users(db, skip=skip, limit=limit)


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user(user_id: int, update_data: UserUpdate, db: SessionDep) -> UserResponse:
    """Update the supplied profile fields of a user."""
    return user_service.update_user(db, user_id, update_data)
