"""User registration and credential checks."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from sweetshop.core.errors import DuplicateUsername, InvalidCredentials, ValidationError
from sweetshop.core.security import (
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
    hash_password,
    verify_password,
)
from sweetshop.models import Role, User

logger = logging.getLogger(__name__)


def validate_credentials(username: str, password: str) -> None:
    """Raise ValidationError if username or password is outside the allowed lengths."""
    if not (USERNAME_MIN_LEN <= len(username) <= USERNAME_MAX_LEN):
        raise ValidationError(
            f"Username must be {USERNAME_MIN_LEN}-{USERNAME_MAX_LEN} characters."
        )
    if not (PASSWORD_MIN_LEN <= len(password) <= PASSWORD_MAX_LEN):
        raise ValidationError(
            f"Password must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters."
        )


def get_user_by_username(db: Session, username: str) -> User | None:
    return db.scalars(select(User).where(User.username == username)).first()


def register_user(
    db: Session,
    username: str,
    password: str,
    role: Role = Role.USER,
) -> User:
    """
    Create a user with a bcrypt-hashed password.

    The existence check gives a fast, friendly error; the unique index on
    username catches concurrent registrations that slip past it.
    """
    username = username.strip()
    validate_credentials(username, password)

    if get_user_by_username(db, username) is not None:
        raise DuplicateUsername("Username already exists.")

    user = User(
        username=username,
        password_hash=hash_password(password),
        role=role.value,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise DuplicateUsername("Username already exists.") from e
    db.refresh(user)
    logger.info("User registered", extra={"username": user.username, "role": user.role})
    return user


def authenticate_user(db: Session, username: str, password: str) -> User:
    """Return the user for valid credentials; unknown user and wrong password fail identically."""
    user = get_user_by_username(db, username.strip())
    if user is None or not verify_password(password, user.password_hash):
        logger.info("Login failed", extra={"username": username})
        raise InvalidCredentials("Invalid username or password.")
    return user
