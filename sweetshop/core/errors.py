"""Domain errors raised by services and the access policy.

Each error carries the HTTP status it maps to; ``sweetshop.main`` registers a
single exception handler that turns any ``ShopError`` into a JSON response.
"""

from fastapi import status


class ShopError(Exception):
    """Base class for expected, client-visible failures."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DuplicateUsername(ShopError):
    """Raised when registering a username that already exists."""

    status_code = status.HTTP_400_BAD_REQUEST


class InvalidCredentials(ShopError):
    """Raised on login with an unknown username or a wrong password (same message for both)."""

    status_code = status.HTTP_401_UNAUTHORIZED


class Unauthenticated(ShopError):
    """Raised when a protected operation is called without a valid identity."""

    status_code = status.HTTP_401_UNAUTHORIZED


class Forbidden(ShopError):
    """Raised when the caller is authenticated but lacks the required role."""

    status_code = status.HTTP_403_FORBIDDEN


class NotFound(ShopError):
    """Raised when an entity id does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class OutOfStock(ShopError):
    """Raised when purchasing an item whose quantity is zero."""

    status_code = status.HTTP_400_BAD_REQUEST


class ValidationError(ShopError):
    """Raised by services for input that fails a business rule (maps to 400)."""

    status_code = status.HTTP_400_BAD_REQUEST


class InvalidToken(Exception):
    """Raised by TokenService.validate for any malformed, forged or expired token.

    Never surfaced to clients: the auth gate treats it as "no identity".
    """
