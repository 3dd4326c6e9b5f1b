"""
Pydantic schemas for User entity and authentication.
"""
from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, Field, field_validator
from datetime import datetime


def _check_email(value: str) -> str:
    """Reject malformed addresses but keep the submitted string; emails match exactly as stored."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"value is not a valid email address: {e}")
    return value


class RegisterRequest(BaseModel):
    """Schema for user registration."""
    name: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=6)

    @field_validator("email")
    @classmethod
    def validate_email_address(cls, v: str) -> str:
        return _check_email(v)


class LoginRequest(BaseModel):
    """Schema for user login."""
    email: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def validate_email_address(cls, v: str) -> str:
        return _check_email(v)


class UserPublic(BaseModel):
    """Public user fields; never includes the password hash."""
    id: int
    name: str
    email: str

    class Config:
        from_attributes = True


class ProfileResponse(UserPublic):
    """Schema for the profile endpoint."""
    created_at: datetime


class AuthResponse(BaseModel):
    """Schema for register/login response."""
    message: str
    token: str
    user: UserPublic
