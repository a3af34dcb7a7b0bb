"""Reader library endpoints."""

from fastapi import APIRouter, status

from danovel.schemas.membership import LibraryAdd, LibraryResponse
from danovel.services import listing
from danovel.services.membership import MembershipTracker

from ..dependencies import SessionDep

router = APIRouter(prefix="/library", tags=["library"])


@router.post("/", response_model=LibraryResponse, status_code=status.HTTP_201_CREATED)
async def add_to_library(entry_data: LibraryAdd, db: SessionDep) -> LibraryResponse:
    """Save a novel to a user's library."""
    return MembershipTracker.add_to_library(db, entry_data)


@router.get("/{user_id}", response_model=list[LibraryResponse])
async def get_library(user_id: int, db: SessionDep) -> list[LibraryResponse]:
    """List a user's library, newest first."""
    return listing.get_library(db, user_id)
