"""Register and login routes. Both are open to anonymous callers."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from sweetshop.api.routing import PolicyRoute
from sweetshop.core.database import get_db
from sweetshop.core.security import authorities_for_role, get_token_service
from sweetshop.schemas.auth import (
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    UserResponse,
)
from sweetshop.services.users import authenticate_user, register_user

router = APIRouter(route_class=PolicyRoute)


@router.post(
    "/register",
    name="auth.register",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> UserResponse:
    """Create a USER account. The password is stored only as a bcrypt hash and never echoed."""
    user = register_user(db, body.username, body.password)
    return UserResponse.model_validate(user)


@router.post("/login", name="auth.login", response_model=TokenResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> TokenResponse:
    """
    Authenticate with username and password; returns a JWT valid for 24 hours.
    Include the token in the Authorization header as: Bearer <token>
    """
    user = authenticate_user(db, body.username, body.password)
    token = get_token_service().issue(user.username, authorities_for_role(user.role))
    return TokenResponse(token=token, token_type="bearer")
