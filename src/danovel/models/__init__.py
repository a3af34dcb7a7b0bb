"""SQLAlchemy models for the DaNovel application."""

from .chapter import Chapter, ChapterStatus
from .comment import Comment
from .follow import Follow
from .genre import Genre
from .library import Library
from .notification import Notification, NotificationType
from .novel import Novel, NovelStatus
from .rating import Rating
from .reading_progress import ReadingProgress
from .transaction import Transaction, TransactionStatus, TransactionType
from .user import User, UserRole

__all__ = [
    "Chapter", "ChapterStatus",
    "Comment",
    "Follow",
    "Genre",
    "Library",
    "Notification", "NotificationType",
    "Novel", "NovelStatus",
    "Rating",
    "ReadingProgress",
    "Transaction", "TransactionStatus", "TransactionType",
    "User", "UserRole",
]
