"""Notification records; delivery channels live outside this service."""
from __future__ import annotations

from sqlalchemy.orm import Session

from danovel.db.session import transaction
from danovel.models import Notification
from danovel.schemas.social import NotificationCreate, NotificationResponse

from .lookups import require_user


def create_notification(db: Session, data: NotificationCreate) -> NotificationResponse:
    """Store an unread notification for an existing user."""
    require_user(db, data.user_id)
    notification = Notification(
        user_id=data.user_id,
        type=data.type,
        title=data.title,
        message=data.message,
        reference_id=data.reference_id,
    )
    with transaction(db):
        db.add(notification)
        db.flush()
    db.refresh(notification)
    return NotificationResponse.model_validate(notification)
