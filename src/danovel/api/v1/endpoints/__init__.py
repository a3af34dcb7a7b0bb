"""API endpoint modules for version 1."""

from .chapters import router as chapters_router
from .dashboard import router as dashboard_router
from .genres import router as genres_router
from .library import router as library_router
from .notifications import router as notifications_router
from .novels import router as novels_router
from .progress import router as progress_router
from .ratings import router as ratings_router
from .social import comments_router, follows_router
from .transactions import router as transactions_router
from .users import router as users_router

__all__ = [
    "chapters_router",
    "comments_router",
    "dashboard_router",
    "follows_router",
    "genres_router",
    "library_router",
    "notifications_router",
    "novels_router",
    "progress_router",
    "ratings_router",
    "transactions_router",
    "users_router",
]
