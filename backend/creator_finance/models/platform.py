"""
Platform revenue model, one running total per platform per month.
"""
from sqlalchemy import Column, Numeric, ForeignKey, Integer, UniqueConstraint, CheckConstraint, Index
from sqlalchemy.orm import relationship
from creator_finance.db.base import BaseModel, case_sensitive_string


class PlatformRevenue(BaseModel):
    """Revenue reported by a user for a platform in a given month."""
    __tablename__ = "platforms"

    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    platform_name = Column(case_sensitive_string(100), nullable=False)
    revenue = Column(Numeric(10, 2), nullable=False, default=0)
    month = Column(Integer, nullable=False)
    year = Column(Integer, nullable=False)

    # Relationships
    user = relationship("User", back_populates="platforms")

    # Unique constraint: reports for the same platform and month are merged
    __table_args__ = (
        UniqueConstraint('user_id', 'platform_name', 'month', 'year', name='uq_platform_user_month'),
        CheckConstraint('month >= 1 AND month <= 12', name='ck_platform_month'),
        Index('idx_platforms_period', 'year', 'month'),
    )
