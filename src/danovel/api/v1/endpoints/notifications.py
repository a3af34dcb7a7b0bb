"""Notification endpoints."""

from fastapi import APIRouter, status

from danovel.schemas.social import NotificationCreate, NotificationResponse
from danovel.services import listing, notifications

from ..dependencies import SessionDep

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.post("/", response_model=NotificationResponse, status_code=status.HTTP_201_CREATED)
async def create_notification(
    notification_data: NotificationCreate,
    db: SessionDep,
) -> NotificationResponse:
    """Queue a notification for a user."""
    return notifications.create_notification(db, notification_data)


@router.get("/{user_id}", response_model=list[NotificationResponse])
async def get_notifications(user_id: int, db: SessionDep) -> list[NotificationResponse]:
    """List a user's notifications, newest first."""
    return listing.get_notifications(db, user_id)
