"""Rating endpoints."""

from fastapi import APIRouter, status

from danovel.schemas.rating import RatingCreate, RatingResponse
from danovel.services.ratings import RatingAggregator

from ..dependencies import SessionDep

router = APIRouter(prefix="/ratings", tags=["ratings"])


@router.post("/", response_model=RatingResponse, status_code=status.HTTP_201_CREATED)
async def submit_rating(rating_data: RatingCreate, db: SessionDep) -> RatingResponse:
    """Rate a novel; resubmitting replaces the caller's previous rating."""
    return RatingAggregator.submit_rating(db, rating_data)
