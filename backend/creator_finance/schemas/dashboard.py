"""
Pydantic schemas for dashboard aggregates.
"""
from pydantic import BaseModel, ConfigDict, Field


class DashboardSummary(BaseModel):
    """Headline figures for the current user."""
    model_config = ConfigDict(populate_by_name=True)

    name: str
    email: str
    total_revenue: float = Field(alias="totalRevenue")
    monthly_revenue: float = Field(alias="monthlyRevenue")
    expenses: float  # Current month only
    revenue_growth: float = Field(alias="revenueGrowth")
    subscribers: int = 0


class MonthlyTrendPoint(BaseModel):
    """Income and expense totals for one calendar month."""
    month: str
    year: int
    revenue: float
    expenses: float
