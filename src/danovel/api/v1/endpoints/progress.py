"""Reading progress endpoints."""

from fastapi import APIRouter

from danovel.schemas.membership import ReadingProgressResponse, ReadingProgressUpdate
from danovel.services import listing
from danovel.services.membership import MembershipTracker

from ..dependencies import SessionDep

router = APIRouter(prefix="/reading-progress", tags=["reading-progress"])


@router.put("/", response_model=ReadingProgressResponse)
async def update_reading_progress(
    progress_data: ReadingProgressUpdate,
    db: SessionDep,
) -> ReadingProgressResponse:
    """Record a reader's current chapter and percentage."""
    return MembershipTracker.update_reading_progress(db, progress_data)


@router.get("/{user_id}", response_model=list[ReadingProgressResponse])
async def get_reading_progress(
    user_id: int,
    db: SessionDep,
    novel_id: int | None = None,
) -> list[ReadingProgressResponse]:
    """List a reader's progress, optionally for one novel."""
    return listing.get_reading_progress(db, user_id, novel_id)
