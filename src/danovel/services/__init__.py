# src/danovel/services/__init__.py
"""Business logic services for the DaNovel application."""

from .content import ContentLifecycleService
from .dashboard import DashboardAggregator
from .errors import ConflictError, DomainError, InvalidOperationError, NotFoundError
from .ledger import LedgerService
from .membership import MembershipTracker
from .ratings import RatingAggregator
from .social import SocialGraphService

__all__ = [
    "ContentLifecycleService",
    "DashboardAggregator",
    "LedgerService",
    "MembershipTracker",
    "RatingAggregator",
    "SocialGraphService",
    "DomainError",
    "NotFoundError",
    "ConflictError",
    "InvalidOperationError",
]
