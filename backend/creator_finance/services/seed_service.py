"""
Sample data for freshly registered accounts.
"""
import logging
from datetime import date, timedelta
from decimal import Decimal
from typing import Optional
from sqlalchemy.orm import Session
from creator_finance.models.platform import PlatformRevenue
from creator_finance.models.transaction import Transaction, TransactionType, TransactionStatus

logger = logging.getLogger(__name__)

# (source, amount, type, days ago)
SAMPLE_TRANSACTIONS = [
    ("YouTube Ad Revenue", Decimal("2450.00"), TransactionType.INCOME, 1),
    ("Patreon Subscription", Decimal("1890.00"), TransactionType.INCOME, 2),
    ("Video Equipment", Decimal("850.00"), TransactionType.EXPENSE, 3),
    ("Twitch Donations", Decimal("567.50"), TransactionType.INCOME, 4),
    ("Software Subscription", Decimal("99.99"), TransactionType.EXPENSE, 5),
]

SAMPLE_PLATFORMS = [
    ("YouTube", Decimal("5000.00")),
    ("Patreon", Decimal("3500.00")),
    ("Twitch", Decimal("2000.00")),
]


def create_sample_data(db: Session, user_id: int, today: Optional[date] = None):
    """Insert a handful of transactions and current-month platform revenue for a user."""
    today = today or date.today()

    for source, amount, tx_type, days_ago in SAMPLE_TRANSACTIONS:
        db.add(Transaction(
            user_id=user_id,
            source=source,
            amount=amount,
            type=tx_type,
            status=TransactionStatus.COMPLETED,
            date=today - timedelta(days=days_ago)
        ))

    for platform_name, revenue in SAMPLE_PLATFORMS:
        db.add(PlatformRevenue(
            user_id=user_id,
            platform_name=platform_name,
            revenue=revenue,
            month=today.month,
            year=today.year
        ))

    db.commit()
    logger.info(f"Sample data created for user {user_id}")
