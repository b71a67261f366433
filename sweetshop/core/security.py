"""Password hashing and JWT issuance/validation for authentication."""

from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import Any

import bcrypt
import jwt

from sweetshop.core.config import JWT_SECRET_MIN_BYTES, settings
from sweetshop.core.errors import InvalidToken
from sweetshop.schemas.auth import AUTHORITY_PREFIX, Identity

# Min/max lengths for username and password validation.
USERNAME_MIN_LEN = 3
USERNAME_MAX_LEN = 50
PASSWORD_MIN_LEN = 6
PASSWORD_MAX_LEN = 128

AUTHORITIES_CLAIM = "authorities"


def hash_password(plain_password: str, rounds: int | None = None) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(pw_bytes, salt).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def authorities_for_role(role: str) -> list[str]:
    """Map a stored role (USER/ADMIN) to the authority strings carried in tokens."""
    return [f"{AUTHORITY_PREFIX}{role}"]


class TokenService:
    """
    Issues and validates signed, expiring bearer tokens.

    The signing key is set once in the constructor and never changes, so one
    instance is shared by all requests without locking.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expire_minutes: int = 24 * 60) -> None:
        if len(secret.encode("utf-8")) < JWT_SECRET_MIN_BYTES:
            raise ValueError(
                f"JWT secret must be at least {JWT_SECRET_MIN_BYTES} bytes (256 bits) for {algorithm}"
            )
        self._secret = secret
        self._algorithm = algorithm
        self._lifetime = timedelta(minutes=expire_minutes)

    @property
    def lifetime(self) -> timedelta:
        return self._lifetime

    def issue(
        self,
        username: str,
        authorities: list[str] | set[str] | frozenset[str],
        issued_at: datetime | None = None,
    ) -> str:
        """Create a token with sub=username, comma-joined authorities, iat and exp."""
        now = issued_at or datetime.now(UTC)
        payload: dict[str, Any] = {
            "sub": username,
            AUTHORITIES_CLAIM: ",".join(sorted(authorities)),
            "iat": now,
            "exp": now + self._lifetime,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def validate(self, token: str) -> Identity:
        """
        Verify signature and expiry and return the caller identity.
        Raises InvalidToken for every kind of failure.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp", "iat"]},
            )
        except jwt.PyJWTError as e:
            raise InvalidToken(str(e)) from e

        username = payload.get("sub")
        if not isinstance(username, str) or not username:
            raise InvalidToken("Token has no subject")
        raw_authorities = payload.get(AUTHORITIES_CLAIM) or ""
        if not isinstance(raw_authorities, str):
            raise InvalidToken("Token authorities claim must be a string")
        authorities = frozenset(a.strip() for a in raw_authorities.split(",") if a.strip())
        return Identity(username=username, authorities=authorities)


@lru_cache
def get_token_service() -> TokenService:
    """Process-wide TokenService built from settings."""
    return TokenService(
        secret=settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
        expire_minutes=settings.JWT_EXPIRE_MINUTES,
    )
