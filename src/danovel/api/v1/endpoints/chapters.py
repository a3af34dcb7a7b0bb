"""Chapter endpoints."""

from fastapi import APIRouter, status

from danovel.schemas.novel import ChapterCreate, ChapterResponse, ChapterUpdate
from danovel.schemas.social import CommentResponse
from danovel.services import listing
from danovel.services.content import ContentLifecycleService

from ..dependencies import SessionDep

router = APIRouter(prefix="/chapters", tags=["chapters"])


@router.post("/", response_model=ChapterResponse, status_code=status.HTTP_201_CREATED)
async def create_chapter(chapter_data: ChapterCreate, db: SessionDep) -> ChapterResponse:
    """Create a chapter and bump the novel's chapter count."""
    return ContentLifecycleService.create_chapter(db, chapter_data)


@router.get("/{chapter_id}", response_model=ChapterResponse)
async def get_chapter(chapter_id: int, db: SessionDep) -> ChapterResponse:
    """Get a specific chapter by ID."""
    return listing.get_chapter(db, chapter_id)


@router.patch("/{chapter_id}", response_model=ChapterResponse)
async def update_chapter(
    chapter_id: int,
    update_data: ChapterUpdate,
    db: SessionDep,
) -> ChapterResponse:
    """Update the supplied fields of a chapter."""
    return ContentLifecycleService.update_chapter(db, chapter_id, update_data)


@router.get("/{chapter_id}/comments", response_model=list[CommentResponse])
async def list_comments(chapter_id: int, db: SessionDep) -> list[CommentResponse]:
    """List a chapter's comments oldest first."""
    return listing.get_comments(db, chapter_id)
