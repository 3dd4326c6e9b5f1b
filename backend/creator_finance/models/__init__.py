"""Models package - Import all models for SQLAlchemy registration."""
from creator_finance.models.user import User
from creator_finance.models.transaction import Transaction, TransactionType, TransactionStatus
from creator_finance.models.platform import PlatformRevenue

__all__ = [
    "User",
    "Transaction",
    "TransactionType",
    "TransactionStatus",
    "PlatformRevenue",
]
