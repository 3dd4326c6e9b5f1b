"""
User profile routes.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from creator_finance.api.dependencies import get_current_identity, get_db
from creator_finance.core.security import TokenPayload
from creator_finance.schemas.user import ProfileResponse
from creator_finance.services.credential_service import get_user

router = APIRouter(tags=["users"])


@router.get("/profile", response_model=ProfileResponse)
def get_profile(
    identity: TokenPayload = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    """Get current user information."""
    return get_user(db, identity.user_id)
