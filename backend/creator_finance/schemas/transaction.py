"""
Pydantic schemas for Transaction entity.
"""
from pydantic import BaseModel, Field, field_serializer, field_validator
from typing import Optional
from datetime import date as dt_date, datetime
from decimal import Decimal
from creator_finance.models.transaction import TransactionType, TransactionStatus


class TransactionBase(BaseModel):
    """Base transaction schema."""
    source: str = Field(min_length=1, max_length=255)
    amount: Decimal = Field(gt=0, max_digits=10, decimal_places=2)
    type: TransactionType

    @field_validator("source")
    @classmethod
    def strip_source(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Source is required")
        return v


class TransactionCreate(TransactionBase):
    """Schema for transaction creation."""
    date: Optional[dt_date] = None  # Defaults to today
    status: Optional[TransactionStatus] = None  # Defaults to completed
    description: Optional[str] = None


class TransactionUpdate(BaseModel):
    """Schema for transaction update. Only supplied fields are changed."""
    source: Optional[str] = Field(default=None, min_length=1, max_length=255)
    amount: Optional[Decimal] = Field(default=None, gt=0, max_digits=10, decimal_places=2)
    type: Optional[TransactionType] = None
    date: Optional[dt_date] = None
    status: Optional[TransactionStatus] = None
    description: Optional[str] = None

    @field_validator("source")
    @classmethod
    def strip_source(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("Source is required")
        return v


class TransactionResponse(BaseModel):
    """Schema for transaction response."""
    id: int
    user_id: int
    source: str
    amount: Decimal
    type: TransactionType
    status: TransactionStatus
    date: dt_date
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @field_serializer("amount")
    def serialize_amount(self, amount: Decimal) -> str:
        return f"{amount:.2f}"

    class Config:
        from_attributes = True


class TransactionEnvelope(BaseModel):
    """Schema for create/update responses."""
    message: str
    transaction: TransactionResponse
