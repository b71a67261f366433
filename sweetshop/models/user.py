"""ORM model for application users (auth and RBAC)."""

from enum import Enum

from sqlalchemy import Column, Integer, String

from sweetshop.models.base import Base


class Role(str, Enum):
    """Coarse authorization label stored on each user."""

    USER = "USER"
    ADMIN = "ADMIN"


class User(Base):
    """
    User account for JWT authentication and role-based access control.

    role: 'USER' or 'ADMIN'
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(50), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default=Role.USER.value)
