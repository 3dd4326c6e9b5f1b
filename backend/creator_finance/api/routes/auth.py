"""
Authentication routes for registration and login.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from creator_finance.api.dependencies import get_db, get_app_settings, get_token_service
from creator_finance.core.config import Settings
from creator_finance.core.security import TokenService
from creator_finance.schemas.user import RegisterRequest, LoginRequest, AuthResponse, UserPublic
from creator_finance.services.credential_service import register_user, authenticate_user

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: RegisterRequest,
    db: Session = Depends(get_db),
    token_service: TokenService = Depends(get_token_service),
    settings: Settings = Depends(get_app_settings)
):
    """Register a new user and log them in."""
    user = register_user(
        db,
        name=user_data.name,
        email=user_data.email,
        password=user_data.password,
        seed_sample_data=settings.SEED_SAMPLE_DATA
    )
    token = token_service.issue(user.id, user.email)

    return AuthResponse(
        message="User registered successfully",
        token=token,
        user=UserPublic.model_validate(user)
    )


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: LoginRequest,
    db: Session = Depends(get_db),
    token_service: TokenService = Depends(get_token_service)
):
    """Login and get JWT token."""
    user = authenticate_user(db, credentials.email, credentials.password)
    token = token_service.issue(user.id, user.email)

    return AuthResponse(
        message="Login successful",
        token=token,
        user=UserPublic.model_validate(user)
    )
