"""
Pydantic schemas for platform revenue.
"""
from pydantic import BaseModel, Field, field_serializer
from typing import Optional
from datetime import datetime
from decimal import Decimal


class PlatformRevenueCreate(BaseModel):
    """Schema for a platform revenue report."""
    platform_name: str = Field(min_length=1, max_length=100)
    revenue: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    month: Optional[int] = Field(default=None, ge=1, le=12)  # Defaults to current month
    year: Optional[int] = Field(default=None, ge=1900, le=9999)  # Defaults to current year


class PlatformRevenueResponse(BaseModel):
    """Schema for a stored platform revenue row."""
    id: int
    user_id: int
    platform_name: str
    revenue: Decimal
    month: int
    year: int
    created_at: datetime
    updated_at: datetime

    @field_serializer("revenue")
    def serialize_revenue(self, revenue: Decimal) -> str:
        return f"{revenue:.2f}"

    class Config:
        from_attributes = True


class PlatformEnvelope(BaseModel):
    """Schema for the report response."""
    message: str
    platform: PlatformRevenueResponse


class PlatformShare(BaseModel):
    """One slice of the revenue-by-platform breakdown."""
    name: str
    value: float
