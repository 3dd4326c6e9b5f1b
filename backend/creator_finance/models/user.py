"""
User model for authentication and user management.
"""
from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from creator_finance.db.base import BaseModel, case_sensitive_string


class User(BaseModel):
    """Registered creator; email is unique exactly as stored."""
    __tablename__ = "users"

    name = Column(String(255), nullable=False)
    email = Column(case_sensitive_string(255), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)

    # Relationships
    transactions = relationship("Transaction", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)
    platforms = relationship("PlatformRevenue", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)
