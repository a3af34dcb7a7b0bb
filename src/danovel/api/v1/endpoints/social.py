"""Follow and comment endpoints."""

from fastapi import APIRouter, status

from danovel.schemas.social import CommentCreate, CommentResponse, FollowCreate, FollowResponse
from danovel.services.social import SocialGraphService

from ..dependencies import SessionDep

follows_router = APIRouter(prefix="/follows", tags=["follows"])
comments_router = APIRouter(prefix="/comments", tags=["comments"])


@follows_router.post("/", response_model=FollowResponse, status_code=status.HTTP_201_CREATED)
async def create_follow(follow_data: FollowCreate, db: SessionDep) -> FollowResponse:
    """Follow another user."""
    return SocialGraphService.create_follow(db, follow_data)


@comments_router.post("/", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
async def create_comment(comment_data: CommentCreate, db: SessionDep) -> CommentResponse:
    """Comment on a chapter or reply to a comment on the same chapter."""
    return SocialGraphService.create_comment(db, comment_data)
