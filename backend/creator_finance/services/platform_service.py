"""
Platform revenue aggregation.

Reports for the same (user, platform, month, year) are merged by adding the
incoming revenue to the stored total. The merge is a single
insert-or-update statement so concurrent reports never lose an increment.
"""
import logging
from datetime import date
from decimal import Decimal
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from creator_finance.models.platform import PlatformRevenue
from creator_finance.schemas.platform import PlatformShare

logger = logging.getLogger(__name__)

CONFLICT_COLUMNS = ["user_id", "platform_name", "month", "year"]


def _upsert_statement(dialect_name: str, values: dict):
    """Build the dialect-specific additive upsert for a platform revenue row."""
    if dialect_name == "mysql":
        from sqlalchemy.dialects.mysql import insert
        stmt = insert(PlatformRevenue).values(**values)
        return stmt.on_duplicate_key_update(
            revenue=PlatformRevenue.revenue + stmt.inserted.revenue,
            updated_at=func.now()
        )

    if dialect_name == "postgresql":
        from sqlalchemy.dialects.postgresql import insert
    elif dialect_name == "sqlite":
        from sqlalchemy.dialects.sqlite import insert
    else:
        raise NotImplementedError(f"Upsert is not supported on {dialect_name}")

    stmt = insert(PlatformRevenue).values(**values)
    return stmt.on_conflict_do_update(
        index_elements=CONFLICT_COLUMNS,
        set_={
            "revenue": PlatformRevenue.revenue + stmt.excluded.revenue,
            "updated_at": func.now(),
        }
    )


def report_revenue(
    db: Session,
    user_id: int,
    platform_name: str,
    revenue: Decimal,
    month: Optional[int] = None,
    year: Optional[int] = None,
    today: Optional[date] = None
) -> PlatformRevenue:
    """Add revenue to a platform's monthly total, creating the row on first report."""
    today = today or date.today()
    values = {
        "user_id": user_id,
        "platform_name": platform_name,
        "revenue": revenue,
        "month": month or today.month,
        "year": year or today.year,
    }

    db.execute(_upsert_statement(db.get_bind().dialect.name, values))
    db.commit()

    row = db.query(PlatformRevenue).filter(
        PlatformRevenue.user_id == user_id,
        PlatformRevenue.platform_name == values["platform_name"],
        PlatformRevenue.month == values["month"],
        PlatformRevenue.year == values["year"]
    ).populate_existing().one()
    logger.debug(
        f"User {user_id} reported {revenue} for {platform_name} "
        f"{values['month']}/{values['year']}, total {row.revenue}"
    )
    return row


def revenue_distribution(
    db: Session,
    user_id: int,
    month: Optional[int] = None,
    year: Optional[int] = None,
    today: Optional[date] = None
) -> List[PlatformShare]:
    """Revenue per platform for one month, largest first."""
    today = today or date.today()
    total = func.sum(PlatformRevenue.revenue)
    rows = db.query(
        PlatformRevenue.platform_name,
        total.label("value")
    ).filter(
        PlatformRevenue.user_id == user_id,
        PlatformRevenue.month == (month or today.month),
        PlatformRevenue.year == (year or today.year)
    ).group_by(PlatformRevenue.platform_name).order_by(total.desc(), PlatformRevenue.platform_name).all()

    return [PlatformShare(name=row.platform_name, value=float(row.value or 0)) for row in rows]
