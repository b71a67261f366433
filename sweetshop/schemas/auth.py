"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Roles travel in tokens as authorities named ROLE_<role>.
AUTHORITY_PREFIX = "ROLE_"


class RegisterRequest(BaseModel):
    """New account credentials."""

    username: str = Field(..., min_length=3, max_length=50, description="Username")
    password: str = Field(..., min_length=6, max_length=128, description="Password")

    @field_validator("username", mode="before")
    @classmethod
    def strip_username(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: str = Field(..., min_length=1, max_length=255, description="Username")
    password: str = Field(..., min_length=1, max_length=128, description="Password")


class TokenResponse(BaseModel):
    """JWT returned after successful login."""

    token: str = Field(..., description="JWT bearer token")
    token_type: str = Field(default="bearer", description="Token type")


class UserResponse(BaseModel):
    """Registered user as returned to clients (never includes the password)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    role: str


class Identity(BaseModel):
    """Caller identity resolved from a bearer token for the duration of one request."""

    model_config = ConfigDict(frozen=True)

    username: str
    authorities: frozenset[str] = frozenset()

    def has_role(self, role: str) -> bool:
        return f"{AUTHORITY_PREFIX}{role}" in self.authorities
