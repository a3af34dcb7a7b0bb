"""Novel endpoints."""

from typing import Annotated, Literal

from fastapi import APIRouter, Depends, Query, status

from danovel.schemas.novel import (
    ChapterResponse,
    NovelCreate,
    NovelFilters,
    NovelResponse,
    NovelSort,
    NovelUpdate,
)
from danovel.schemas.rating import RatingResponse
from danovel.services import listing
from danovel.services.content import ContentLifecycleService

from ..dependencies import SessionDep

router = APIRouter(prefix="/novels", tags=["novels"])
FiltersDep = Annotated[NovelFilters, Depends()]


@router.post("/", response_model=NovelResponse, status_code=status.HTTP_201_CREATED)
async def create_novel(novel_data: NovelCreate, db: SessionDep) -> NovelResponse:
    """Create a novel for a writer."""
    return ContentLifecycleService.create_novel(db, novel_data)


@router.get("/", response_model=list[NovelResponse])
async def list_novels(
    db: SessionDep,
    filters: FiltersDep,
    sort_by: NovelSort = "recent",
    sort_order: Literal["asc", "desc"] = "desc",
    limit: Annotated[int | None, Query(ge=1, le=100)] = None,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> list[NovelResponse]:
    """List novels with optional filters and sorting."""
    return listing.get_novels(
        db,
        filters=filters,
        sort_by=sort_by,
        sort_order=sort_order,
        limit=limit,
        offset=offset,
    )


@router.get("/{novel_id}", response_model=NovelResponse)
async def get_novel(novel_id: int, db: SessionDep) -> NovelResponse:
    """Get a specific novel by ID."""
    return listing.get_novel(db, novel_id)


@router.patch("/{novel_id}", response_model=NovelResponse)
async def update_novel(novel_id: int, update_data: NovelUpdate, db: SessionDep) -> NovelResponse:
    """Update the supplied fields of a novel."""
    return ContentLifecycleService.update_novel(db, novel_id, update_data)


@router.get("/{novel_id}/chapters", response_model=list[ChapterResponse])
async def list_chapters(novel_id: int, db: SessionDep) -> list[ChapterResponse]:
    """List a novel's chapters in reading order."""
    return listing.get_chapters(db, novel_id)


@router.get("/{novel_id}/ratings", response_model=list[RatingResponse])
async def list_ratings(novel_id: int, db: SessionDep) -> list[RatingResponse]:
    """List ratings left on a novel."""
    return listing.get_ratings(db, novel_id)
