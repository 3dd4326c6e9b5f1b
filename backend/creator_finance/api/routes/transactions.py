"""
Transaction ledger routes.
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
from creator_finance.api.dependencies import get_current_identity, get_db, get_app_settings
from creator_finance.core.config import Settings
from creator_finance.core.security import TokenPayload
from creator_finance.core.utils import format_message
from creator_finance.schemas.transaction import (
    TransactionCreate, TransactionUpdate, TransactionResponse, TransactionEnvelope
)
from creator_finance.services import ledger_service

router = APIRouter(prefix="/transactions", tags=["transactions"])

MAX_LIMIT = 10000


@router.get("", response_model=List[TransactionResponse])
def list_transactions(
    limit: Optional[int] = Query(default=None, ge=1, le=MAX_LIMIT),
    identity: TokenPayload = Depends(get_current_identity),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings)
):
    """Get the current user's transactions, newest first."""
    return ledger_service.list_transactions(
        db, identity.user_id, limit or settings.TRANSACTIONS_DEFAULT_LIMIT
    )


@router.post("", response_model=TransactionEnvelope, status_code=status.HTTP_201_CREATED)
def create_transaction(
    transaction_data: TransactionCreate,
    identity: TokenPayload = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    """Add a new transaction."""
    transaction = ledger_service.add_transaction(db, identity.user_id, transaction_data)
    return TransactionEnvelope(
        message="Transaction added successfully",
        transaction=TransactionResponse.model_validate(transaction)
    )


@router.put("/{transaction_id}", response_model=TransactionEnvelope)
def update_transaction(
    transaction_id: int,
    transaction_data: TransactionUpdate,
    identity: TokenPayload = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    """Update a transaction owned by the current user."""
    transaction = ledger_service.update_transaction(db, identity.user_id, transaction_id, transaction_data)
    return TransactionEnvelope(
        message="Transaction updated successfully",
        transaction=TransactionResponse.model_validate(transaction)
    )


@router.delete("/{transaction_id}")
def delete_transaction(
    transaction_id: int,
    identity: TokenPayload = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    """Delete a transaction owned by the current user."""
    ledger_service.delete_transaction(db, identity.user_id, transaction_id)
    return format_message("Transaction deleted successfully")
