"""
Application error taxonomy.

Services raise these; the handlers registered in ``main.py`` turn them into
JSON responses of the form ``{"message": ...}``.
"""
from fastapi import status


class AppError(Exception):
    """Base class for errors that map onto an HTTP response."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class DuplicateError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Email already registered"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class InvalidCredentialsError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid email or password"


class AuthError(AppError):
    """Bearer token problems."""
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Invalid or expired token"


class MissingTokenError(AuthError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Access token required"


class InvalidTokenError(AuthError):
    pass


class ExpiredTokenError(AuthError):
    pass


class InternalError(AppError):
    pass
