"""Coin ledger endpoints."""

from fastapi import APIRouter, status

from danovel.schemas.transaction import TransactionCreate, TransactionResponse
from danovel.services import listing
from danovel.services.ledger import LedgerService

from ..dependencies import SessionDep

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.post("/", response_model=TransactionResponse, status_code=status.HTTP_201_CREATED)
async def create_transaction(
    transaction_data: TransactionCreate,
    db: SessionDep,
) -> TransactionResponse:
    """Record a pending ledger entry."""
    return LedgerService.create_transaction(db, transaction_data)


@router.get("/", response_model=list[TransactionResponse])
async def list_transactions(
    db: SessionDep,
    user_id: int | None = None,
) -> list[TransactionResponse]:
    """List ledger entries newest first, optionally for one user."""
    return listing.get_transactions(db, user_id)
