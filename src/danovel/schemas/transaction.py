"""Ledger Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from danovel.models.transaction import TransactionStatus, TransactionType


class TransactionCreate(BaseModel):
    """Schema for recording a ledger entry."""

    user_id: int
    type: TransactionType
    amount: float = Field(..., gt=0)
    coin_amount: float = Field(..., gt=0)
    reference_id: str | None = None
    novel_id: int | None = None
    chapter_id: int | None = None


class TransactionResponse(BaseModel):
    id: int
    user_id: int
    type: TransactionType
    amount: float
    coin_amount: float
    status: TransactionStatus
    reference_id: str | None
    novel_id: int | None
    chapter_id: int | None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
