"""
Request-scoped dependencies: database session and authenticated identity.
"""
from typing import Iterator, Optional
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session
from creator_finance.core.config import Settings
from creator_finance.core.security import TokenPayload, TokenService
from creator_finance.db.session import Database

bearer_scheme = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_db(request: Request) -> Iterator[Session]:
    """Dependency for getting database session."""
    database: Database = request.app.state.database
    with database.session() as db:
        yield db


def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    token_service: TokenService = Depends(get_token_service)
) -> TokenPayload:
    """
    Verify the bearer token and return the identity it carries.

    Missing token -> 401, invalid or expired token -> 403. Routes take the
    user id from here and never from the request body or path.
    """
    token = credentials.credentials if credentials else None
    return token_service.verify(token)
