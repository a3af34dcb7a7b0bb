"""Version 1 API endpoints."""

from .endpoints import (
    chapters_router,
    comments_router,
    dashboard_router,
    follows_router,
    genres_router,
    library_router,
    notifications_router,
    novels_router,
    progress_router,
    ratings_router,
    transactions_router,
    users_router,
)

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
