"""
Dashboard aggregate routes.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from creator_finance.api.dependencies import get_current_identity, get_db
from creator_finance.core.security import TokenPayload
from creator_finance.schemas.dashboard import DashboardSummary, MonthlyTrendPoint
from creator_finance.services.credential_service import get_user
from creator_finance.services.ledger_service import dashboard_summary, monthly_trend

router = APIRouter(tags=["dashboard"])


@router.get("/dashboard", response_model=DashboardSummary)
def get_dashboard(
    identity: TokenPayload = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    """Get revenue, expense and growth figures for the current month."""
    user = get_user(db, identity.user_id)
    return dashboard_summary(db, user)


@router.get("/monthly-trend", response_model=List[MonthlyTrendPoint])
def get_monthly_trend(
    identity: TokenPayload = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    """Get income and expenses per month for the last six months."""
    return monthly_trend(db, identity.user_id)
