"""
Security utilities for JWT authentication and password hashing.
"""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
import hashlib
import bcrypt
from jose import ExpiredSignatureError, JWTError, jwt
from creator_finance.core.config import Settings
from creator_finance.core.exceptions import ExpiredTokenError, InvalidTokenError, MissingTokenError


def _pre_hash_password(password: str) -> bytes:
    """
    Pre-hash password with SHA256 to support passwords longer than 72 bytes.
    Returns bytes (32 bytes) which is well under bcrypt's 72-byte limit.
    """
    return hashlib.sha256(password.encode('utf-8')).digest()


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    pre_hashed = _pre_hash_password(plain_password)
    return bcrypt.checkpw(pre_hashed, hashed_password.encode('utf-8'))


def get_password_hash(password: str) -> str:
    """
    Hash a password with a fresh bcrypt salt.
    Pre-hashes with SHA256 first to support passwords longer than 72 bytes.
    """
    pre_hashed = _pre_hash_password(password)
    salt = bcrypt.gensalt()
    hashed = bcrypt.hashpw(pre_hashed, salt)
    # Return as string for database storage
    return hashed.decode('utf-8')


@dataclass(frozen=True)
class TokenPayload:
    """Identity carried by a verified access token."""
    user_id: int
    email: str


class TokenService:
    """
    Issues and verifies signed, time-limited access tokens.

    Verification is stateless: the token is the only proof of identity and
    there is no server-side session or revocation list.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_days: int = 7):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_delta = timedelta(days=expire_days)

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret_key=settings.SECRET_KEY,
            algorithm=settings.ALGORITHM,
            expire_days=settings.ACCESS_TOKEN_EXPIRE_DAYS,
        )

    def issue(self, user_id: int, email: str, expires_delta: Optional[timedelta] = None) -> str:
        """Create a JWT access token for a user."""
        issued_at = datetime.now(timezone.utc)
        expire = issued_at + (expires_delta if expires_delta is not None else self.expire_delta)
        to_encode = {"id": user_id, "email": email, "iat": issued_at, "exp": expire}
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: Optional[str]) -> TokenPayload:
        """Decode and verify a JWT token."""
        if not token:
            raise MissingTokenError()
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except ExpiredSignatureError:
            raise ExpiredTokenError()
        except JWTError:
            raise InvalidTokenError()

        user_id = payload.get("id")
        email = payload.get("email")
        if not isinstance(user_id, int) or isinstance(user_id, bool) or not isinstance(email, str):
            raise InvalidTokenError()
        return TokenPayload(user_id=user_id, email=email)
