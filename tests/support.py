"""Shared test setup: environment for settings, a throwaway SQLite database, and helpers.

Import this module before anything from sweetshop so settings pick up the test env.
"""

import os
import tempfile
from decimal import Decimal

_TMP_DIR = tempfile.mkdtemp(prefix="sweetshop-tests-")

os.environ.setdefault("APP_ENV", "dev")
os.environ.setdefault("DATABASE_URL", f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}")
os.environ.setdefault("JWT_SECRET", "test-secret-key-that-is-at-least-32-bytes-long")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from sweetshop.core.database import SessionLocal, engine  # noqa: E402
from sweetshop.models import Base, Sweet  # noqa: E402


def reset_database() -> None:
    """Drop and recreate every table so each test starts empty."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


def add_sweet(
    name: str = "Fudge",
    category: str = "Chocolate",
    price: str = "5.00",
    quantity: int = 20,
) -> int:
    """Insert one item directly and return its id."""
    db = SessionLocal()
    try:
        sweet = Sweet(name=name, category=category, price=Decimal(price), quantity=quantity)
        db.add(sweet)
        db.commit()
        return sweet.id
    finally:
        db.close()


def quantity_of(sweet_id: int) -> int:
    db = SessionLocal()
    try:
        sweet = db.get(Sweet, sweet_id)
        assert sweet is not None
        return sweet.quantity
    finally:
        db.close()
