"""Rating submission and per-novel average aggregation."""
from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from danovel.db.session import transaction
from danovel.db.time import utcnow
from danovel.models import Novel, Rating
from danovel.schemas.rating import RatingCreate, RatingResponse

from .errors import InvalidOperationError, NotFoundError
from .lookups import require_user

logger = logging.getLogger(__name__)

RATING_PRECISION = Decimal("0.01")
MIN_RATING = 1
MAX_RATING = 5


def quantize_rating(value: object) -> Decimal:
    """Round an average to the two decimal places stored on the novel."""
    return Decimal(str(value)).quantize(RATING_PRECISION, rounding=ROUND_HALF_UP)


class RatingAggregator:
    """Service keeping ``Novel.average_rating`` equal to the mean of its ratings."""

    @staticmethod
    def recompute_average(db: Session, novel: Novel) -> Decimal | None:
        """Recompute and assign the novel's average from its current ratings.

        Pending writes are flushed first so the aggregate sees them.
        """
        db.flush()
        average = db.scalar(select(func.avg(Rating.rating)).where(Rating.novel_id == novel.id))
        novel.average_rating = quantize_rating(average) if average is not None else None
        novel.updated_at = utcnow()
        return novel.average_rating

    @staticmethod
    def submit_rating(db: Session, data: RatingCreate) -> RatingResponse:
        """Insert or update the caller's rating and refresh the novel average.

        A second submission for the same (user, novel) pair updates the
        existing row instead of adding one. The novel row is locked for the
        read-modify-write so concurrent submissions cannot recompute from a
        stale set of ratings.

        Raises:
            NotFoundError: If the user or novel does not exist.
            InvalidOperationError: If the rating is outside 1..5.
        """
        if not MIN_RATING <= data.rating <= MAX_RATING:
            raise InvalidOperationError(
                f"Rating must be between {MIN_RATING} and {MAX_RATING}, got {data.rating}",
                entity="Rating",
            )
        require_user(db, data.user_id)

        with transaction(db):
            novel = db.scalars(
                select(Novel).where(Novel.id == data.novel_id).with_for_update()
            ).first()
            if novel is None:
                raise NotFoundError("Novel", data.novel_id)

            rating = db.scalars(
                select(Rating).where(
                    Rating.user_id == data.user_id,
                    Rating.novel_id == data.novel_id,
                )
            ).first()
            if rating is not None:
                rating.rating = data.rating
                rating.review = data.review
                rating.updated_at = utcnow()
            else:
                rating = Rating(
                    user_id=data.user_id,
                    novel_id=data.novel_id,
                    rating=data.rating,
                    review=data.review,
                )
                db.add(rating)

            average = RatingAggregator.recompute_average(db, novel)

        db.refresh(rating)
        logger.info(
            "Rating by user %s on novel %s set to %s; average now %s",
            data.user_id,
            data.novel_id,
            data.rating,
            average,
        )
        return RatingResponse.model_validate(rating)
