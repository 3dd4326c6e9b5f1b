"""
Transaction model for the income/expense ledger.
"""
from sqlalchemy import Column, String, Numeric, Date, Enum as SQLEnum, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship
from creator_finance.db.base import BaseModel
import enum


class TransactionType(str, enum.Enum):
    """Direction of money movement."""
    INCOME = "income"
    EXPENSE = "expense"


class TransactionStatus(str, enum.Enum):
    """Settlement state; only completed rows count towards totals."""
    COMPLETED = "completed"
    PENDING = "pending"
    CANCELLED = "cancelled"


def _enum_values(enum_cls):
    return [member.value for member in enum_cls]


class Transaction(BaseModel):
    """A single income or expense owned by one user."""
    __tablename__ = "transactions"

    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    source = Column(String(255), nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    type = Column(
        SQLEnum(TransactionType, name="transaction_type", values_callable=_enum_values),
        nullable=False,
        index=True
    )
    status = Column(
        SQLEnum(TransactionStatus, name="transaction_status", values_callable=_enum_values),
        nullable=False,
        default=TransactionStatus.COMPLETED,
        index=True
    )
    date = Column(Date, nullable=False, index=True)
    description = Column(Text, nullable=True)

    # Relationships
    user = relationship("User", back_populates="transactions")
