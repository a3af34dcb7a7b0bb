"""Follow relationships and threaded chapter comments."""
from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from danovel.db.session import transaction
from danovel.models import Comment, Follow
from danovel.schemas.social import CommentCreate, CommentResponse, FollowCreate, FollowResponse

from .errors import ConflictError, InvalidOperationError, NotFoundError
from .lookups import require_chapter, require_user, unique_insert

logger = logging.getLogger(__name__)


class SocialGraphService:
    """Service enforcing follow-edge and comment-thread integrity."""

    @staticmethod
    def create_follow(db: Session, data: FollowCreate) -> FollowResponse:
        """Create the directed edge ``follower_id`` -> ``following_id``.

        Raises:
            InvalidOperationError: If a user tries to follow themselves.
            NotFoundError: If either user does not exist.
            ConflictError: If the edge already exists.
        """
        if data.follower_id == data.following_id:
            raise InvalidOperationError(
                "Users cannot follow themselves",
                entity="User",
                entity_id=data.follower_id,
            )
        require_user(db, data.follower_id)
        require_user(db, data.following_id)

        existing = db.scalar(
            select(Follow.id).where(
                Follow.follower_id == data.follower_id,
                Follow.following_id == data.following_id,
            )
        )
        duplicate = ConflictError(
            f"User {data.follower_id} already follows user {data.following_id}",
            entity="Follow",
            entity_id=existing,
        )
        if existing is not None:
            raise duplicate

        follow = Follow(follower_id=data.follower_id, following_id=data.following_id)
        with unique_insert(db, duplicate):
            db.add(follow)
            db.flush()
        db.refresh(follow)
        logger.info("User %s now follows user %s", follow.follower_id, follow.following_id)
        return FollowResponse.model_validate(follow)

    @staticmethod
    def create_comment(db: Session, data: CommentCreate) -> CommentResponse:
        """Create a comment, or a reply when ``parent_id`` is given.

        A reply's parent must exist on the same chapter as the reply.

        Raises:
            NotFoundError: If the user, chapter, or parent comment (on that chapter) is missing.
        """
        require_user(db, data.user_id)
        require_chapter(db, data.chapter_id)

        if data.parent_id is not None:
            parent = db.scalar(
                select(Comment.id).where(
                    Comment.id == data.parent_id,
                    Comment.chapter_id == data.chapter_id,
                )
            )
            if parent is None:
                raise NotFoundError(
                    "Comment",
                    data.parent_id,
                    f"on chapter {data.chapter_id}",
                )

        comment = Comment(
            user_id=data.user_id,
            chapter_id=data.chapter_id,
            parent_id=data.parent_id,
            content=data.content,
        )
        with transaction(db):
            db.add(comment)
            db.flush()
        db.refresh(comment)
        return CommentResponse.model_validate(comment)

