"""Genre catalog endpoints."""

from fastapi import APIRouter, status

from danovel.schemas.user import GenreCreate, GenreResponse
from danovel.services import listing, user_service

from ..dependencies import SessionDep

router = APIRouter(prefix="/genres", tags=["genres"])


@router.post("/", response_model=GenreResponse, status_code=status.HTTP_201_CREATED)
async def create_genre(genre_data: GenreCreate, db: SessionDep) -> GenreResponse:
    """Create a genre."""
    return user_service.create_genre(db, genre_data)


@router.get("/", response_model=list[GenreResponse])
async def list_genres(db: SessionDep) -> list[GenreResponse]:
    """List all genres by name."""
    return listing.get_genres(db)
