"""
Credential store: registration, login and user lookup.
"""
import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from creator_finance.core.exceptions import DuplicateError, InvalidCredentialsError, NotFoundError
from creator_finance.core.security import get_password_hash, verify_password
from creator_finance.models.user import User
from creator_finance.services.seed_service import create_sample_data

logger = logging.getLogger(__name__)


def register_user(db: Session, name: str, email: str, password: str, seed_sample_data: bool = True) -> User:
    """
    Create a user with a salted password hash.

    Raises DuplicateError when the email is already registered. Sample data
    for the new account is best effort and never fails the registration.
    """
    existing_user = db.query(User).filter(User.email == email).first()
    if existing_user:
        raise DuplicateError("Email already registered")

    new_user = User(
        name=name,
        email=email,
        hashed_password=get_password_hash(password)
    )
    db.add(new_user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration of the same email
        db.rollback()
        raise DuplicateError("Email already registered")
    db.refresh(new_user)
    logger.info(f"Registered user {new_user.id}")

    if seed_sample_data:
        try:
            create_sample_data(db, new_user.id)
        except Exception as e:
            db.rollback()
            logger.error(f"Error creating sample data for user {new_user.id}: {e}", exc_info=True)

    return new_user


def authenticate_user(db: Session, email: str, password: str) -> User:
    """Return the user for valid credentials; the failure is identical for unknown email and wrong password."""
    user = db.query(User).filter(User.email == email).first()
    if not user or not verify_password(password, user.hashed_password):
        raise InvalidCredentialsError("Invalid email or password")
    return user


def get_user(db: Session, user_id: int) -> User:
    """Get user by ID."""
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError("User not found")
    return user
