"""
Ledger service: per-user transactions and the aggregates built on them.

Every query filters on ``user_id``; ownership is part of the lookup predicate,
so a row belonging to someone else is simply not found.
"""
import calendar
import logging
from datetime import date
from decimal import Decimal
from typing import List, Optional
from sqlalchemy import case, extract, func
from sqlalchemy.orm import Session
from creator_finance.core.exceptions import NotFoundError
from creator_finance.core.utils import month_range, shift_month
from creator_finance.models.transaction import Transaction, TransactionType, TransactionStatus
from creator_finance.models.user import User
from creator_finance.schemas.dashboard import DashboardSummary, MonthlyTrendPoint
from creator_finance.schemas.transaction import TransactionCreate, TransactionUpdate

logger = logging.getLogger(__name__)


def list_transactions(db: Session, user_id: int, limit: int = 10) -> List[Transaction]:
    """Get a user's transactions, newest date first."""
    return db.query(Transaction).filter(
        Transaction.user_id == user_id
    ).order_by(
        Transaction.date.desc(),
        Transaction.id.desc()
    ).limit(limit).all()


def _get_owned_transaction(db: Session, user_id: int, transaction_id: int) -> Transaction:
    transaction = db.query(Transaction).filter(
        Transaction.id == transaction_id,
        Transaction.user_id == user_id
    ).first()
    if not transaction:
        raise NotFoundError("Transaction not found")
    return transaction


def add_transaction(db: Session, user_id: int, data: TransactionCreate, today: Optional[date] = None) -> Transaction:
    """Record a transaction for a user."""
    transaction = Transaction(
        user_id=user_id,
        source=data.source,
        amount=data.amount,
        type=data.type,
        status=data.status or TransactionStatus.COMPLETED,
        date=data.date or today or date.today(),
        description=data.description
    )
    db.add(transaction)
    db.commit()
    db.refresh(transaction)
    logger.debug(f"User {user_id} added transaction {transaction.id}")
    return transaction


def update_transaction(db: Session, user_id: int, transaction_id: int, data: TransactionUpdate) -> Transaction:
    """Update the supplied fields of a transaction the user owns."""
    transaction = _get_owned_transaction(db, user_id, transaction_id)

    for field, value in data.model_dump(exclude_unset=True).items():
        if value is None and field != "description":
            # Required columns keep their current value
            continue
        setattr(transaction, field, value)

    db.commit()
    db.refresh(transaction)
    return transaction


def delete_transaction(db: Session, user_id: int, transaction_id: int) -> None:
    """Delete a transaction the user owns."""
    transaction = _get_owned_transaction(db, user_id, transaction_id)
    db.delete(transaction)
    db.commit()
    logger.debug(f"User {user_id} deleted transaction {transaction_id}")


def sum_amount(
    db: Session,
    user_id: int,
    tx_type: TransactionType,
    start: Optional[date] = None,
    end: Optional[date] = None
) -> Decimal:
    """Sum completed transactions of one type, optionally within [start, end)."""
    query = db.query(func.sum(Transaction.amount)).filter(
        Transaction.user_id == user_id,
        Transaction.type == tx_type,
        Transaction.status == TransactionStatus.COMPLETED
    )
    if start is not None:
        query = query.filter(Transaction.date >= start)
    if end is not None:
        query = query.filter(Transaction.date < end)
    return query.scalar() or Decimal(0)


def revenue_growth(current, previous) -> float:
    """Month-over-month growth in percent, 0 when there is no previous revenue."""
    if previous <= 0:
        return 0.0
    return round(float((current - previous) / previous * 100), 1)


def dashboard_summary(db: Session, user: User, today: Optional[date] = None) -> DashboardSummary:
    """Headline revenue and expense figures for the dashboard."""
    today = today or date.today()
    month_start, next_month_start = month_range(today.year, today.month)
    prev_year, prev_month = shift_month(today.year, today.month, -1)
    prev_start, prev_end = month_range(prev_year, prev_month)

    total_revenue = sum_amount(db, user.id, TransactionType.INCOME)
    monthly_revenue = sum_amount(db, user.id, TransactionType.INCOME, month_start, next_month_start)
    monthly_expenses = sum_amount(db, user.id, TransactionType.EXPENSE, month_start, next_month_start)
    last_month_revenue = sum_amount(db, user.id, TransactionType.INCOME, prev_start, prev_end)

    return DashboardSummary(
        name=user.name,
        email=user.email,
        total_revenue=float(total_revenue),
        monthly_revenue=float(monthly_revenue),
        expenses=float(monthly_expenses),
        revenue_growth=revenue_growth(monthly_revenue, last_month_revenue),
        subscribers=0
    )


def monthly_trend(db: Session, user_id: int, today: Optional[date] = None, months: int = 6) -> List[MonthlyTrendPoint]:
    """
    Income and expense totals per calendar month, oldest first.

    Covers the current month and the ``months - 1`` before it; months without
    completed transactions are reported as zeros.
    """
    today = today or date.today()
    first_year, first_month = shift_month(today.year, today.month, -(months - 1))
    start, _ = month_range(first_year, first_month)
    _, end = month_range(today.year, today.month)

    year_col = extract("year", Transaction.date)
    month_col = extract("month", Transaction.date)
    rows = db.query(
        year_col.label("year"),
        month_col.label("month"),
        func.sum(case((Transaction.type == TransactionType.INCOME, Transaction.amount), else_=0)).label("revenue"),
        func.sum(case((Transaction.type == TransactionType.EXPENSE, Transaction.amount), else_=0)).label("expenses")
    ).filter(
        Transaction.user_id == user_id,
        Transaction.status == TransactionStatus.COMPLETED,
        Transaction.date >= start,
        Transaction.date < end
    ).group_by(year_col, month_col).all()

    totals = {(int(row.year), int(row.month)): row for row in rows}

    points = []
    for offset in range(months):
        year, month = shift_month(first_year, first_month, offset)
        row = totals.get((year, month))
        points.append(MonthlyTrendPoint(
            month=calendar.month_abbr[month],
            year=year,
            revenue=float(row.revenue or 0) if row else 0.0,
            expenses=float(row.expenses or 0) if row else 0.0
        ))
    return points
