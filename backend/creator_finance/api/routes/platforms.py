"""
Platform revenue routes.
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
from creator_finance.api.dependencies import get_current_identity, get_db
from creator_finance.core.security import TokenPayload
from creator_finance.schemas.platform import (
    PlatformRevenueCreate, PlatformRevenueResponse, PlatformEnvelope, PlatformShare
)
from creator_finance.services.platform_service import report_revenue, revenue_distribution

router = APIRouter(prefix="/platforms", tags=["platforms"])


@router.get("", response_model=List[PlatformShare])
def get_platform_distribution(
    month: Optional[int] = Query(default=None, ge=1, le=12),
    year: Optional[int] = Query(default=None, ge=1900, le=9999),
    identity: TokenPayload = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    """Get revenue per platform for a month (current month by default)."""
    return revenue_distribution(db, identity.user_id, month=month, year=year)


@router.post("", response_model=PlatformEnvelope, status_code=status.HTTP_201_CREATED)
def add_platform_revenue(
    platform_data: PlatformRevenueCreate,
    identity: TokenPayload = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    """Report platform revenue; repeated reports for the same month accumulate."""
    row = report_revenue(
        db,
        identity.user_id,
        platform_data.platform_name,
        platform_data.revenue,
        month=platform_data.month,
        year=platform_data.year
    )
    return PlatformEnvelope(
        message="Platform revenue added successfully",
        platform=PlatformRevenueResponse.model_validate(row)
    )
