"""Pydantic request/response schemas."""

from sweetshop.schemas.auth import (
    Identity,
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    UserResponse,
)
from sweetshop.schemas.health import HealthResponse
from sweetshop.schemas.sweet import (
    RestockRequest,
    SweetIn,
    SweetOut,
)

__all__ = [
    "HealthResponse",
    "Identity",
    "LoginRequest",
    "RegisterRequest",
    "RestockRequest",
    "SweetIn",
    "SweetOut",
    "TokenResponse",
    "UserResponse",
]
