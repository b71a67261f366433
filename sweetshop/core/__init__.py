"""Core configuration, database sessions, token handling and access policy."""

from sweetshop.core.config import get_settings, settings
from sweetshop.core.database import SessionLocal, get_db
from sweetshop.core.security import TokenService, get_token_service

__all__ = ["SessionLocal", "TokenService", "get_db", "get_settings", "get_token_service", "settings"]
