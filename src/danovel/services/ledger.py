"""Coin ledger: records transactions without settling them."""
from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy.orm import Session

from danovel.db.session import transaction
from danovel.models import Chapter, Novel, Transaction, TransactionStatus
from danovel.schemas.transaction import TransactionCreate, TransactionResponse

from .errors import InvalidOperationError
from .lookups import get_or_404, require_user

logger = logging.getLogger(__name__)

MONEY_PRECISION = Decimal("0.01")


def to_money(value: object) -> Decimal:
    """Round ``value`` to the two decimal places stored in the ledger."""
    return Decimal(str(value)).quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)


class LedgerService:
    """Service appending entries to the coin ledger.

    Entries are always recorded as ``pending``. Moving an entry to
    completed/failed/refunded and applying it to ``User.coin_balance`` is the
    job of a settlement process outside this service.
    """

    @staticmethod
    def create_transaction(db: Session, data: TransactionCreate) -> TransactionResponse:
        """Record a pending ledger entry for a user.

        Raises:
            InvalidOperationError: If ``amount`` or ``coin_amount`` rounds to zero or less
                at cent precision.
            NotFoundError: If the user, or a referenced novel or chapter, does not exist.
        """
        amounts: dict[str, Decimal] = {}
        for field in ("amount", "coin_amount"):
            value = getattr(data, field)
            stored = to_money(value) if value is not None else None
            if stored is None or stored <= 0:
                raise InvalidOperationError(
                    f"Transaction {field} must be at least {MONEY_PRECISION}, got {value}",
                    entity="Transaction",
                )
            amounts[field] = stored

        require_user(db, data.user_id)
        if data.novel_id is not None:
            get_or_404(db, Novel, data.novel_id)
        if data.chapter_id is not None:
            get_or_404(db, Chapter, data.chapter_id)

        entry = Transaction(
            user_id=data.user_id,
            type=data.type,
            amount=amounts["amount"],
            coin_amount=amounts["coin_amount"],
            status=TransactionStatus.PENDING,
            reference_id=data.reference_id,
            novel_id=data.novel_id,
            chapter_id=data.chapter_id,
        )
        with transaction(db):
            db.add(entry)
            db.flush()

        db.refresh(entry)
        logger.info(
            "Recorded %s transaction %s for user %s: amount=%s coins=%s",
            entry.type.value,
            entry.id,
            entry.user_id,
            entry.amount,
            entry.coin_amount,
        )
        return TransactionResponse.model_validate(entry)
