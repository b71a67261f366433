"""Inventory operations: CRUD, predicate search, and atomic stock arithmetic."""

import logging
from decimal import Decimal

from sqlalchemy import ColumnElement, select, update
from sqlalchemy.orm import Session

from sweetshop.core.errors import NotFound, OutOfStock, ValidationError
from sweetshop.models import Sweet
from sweetshop.schemas.sweet import MAX_QUANTITY, SweetIn

logger = logging.getLogger(__name__)


def _not_found(sweet_id: int) -> NotFound:
    return NotFound(f"Sweet not found with id: {sweet_id}")


def build_search_filters(
    name: str | None = None,
    category: str | None = None,
    min_price: Decimal | None = None,
    max_price: Decimal | None = None,
) -> list[ColumnElement[bool]]:
    """
    Translate optional search filters into SQL predicates.

    name is a case-insensitive substring match (LIKE wildcards in the input are
    escaped); category is exact, so an empty string matches only uncategorised
    items; price bounds are inclusive.
    """
    filters: list[ColumnElement[bool]] = []
    if name:
        filters.append(Sweet.name.icontains(name, autoescape=True))
    if category is not None:
        filters.append(Sweet.category == category)
    if min_price is not None:
        filters.append(Sweet.price >= min_price)
    if max_price is not None:
        filters.append(Sweet.price <= max_price)
    return filters


def list_sweets(db: Session) -> list[Sweet]:
    return list(db.scalars(select(Sweet).order_by(Sweet.id)))


def search_sweets(
    db: Session,
    name: str | None = None,
    category: str | None = None,
    min_price: Decimal | None = None,
    max_price: Decimal | None = None,
) -> list[Sweet]:
    """Return items matching every supplied filter; no filters returns everything."""
    filters = build_search_filters(name, category, min_price, max_price)
    return list(db.scalars(select(Sweet).where(*filters).order_by(Sweet.id)))


def get_sweet(db: Session, sweet_id: int) -> Sweet:
    sweet = db.get(Sweet, sweet_id)
    if sweet is None:
        raise _not_found(sweet_id)
    return sweet


def create_sweet(db: Session, data: SweetIn) -> Sweet:
    sweet = Sweet(
        name=data.name,
        category=data.category,
        price=data.price,
        quantity=data.quantity,
    )
    db.add(sweet)
    db.commit()
    db.refresh(sweet)
    logger.info("Sweet created", extra={"sweet_id": sweet.id, "sweet_name": sweet.name})
    return sweet


def update_sweet(db: Session, sweet_id: int, data: SweetIn) -> Sweet:
    """Overwrite name, category, price and quantity of an existing item."""
    sweet = get_sweet(db, sweet_id)
    sweet.name = data.name
    sweet.category = data.category
    sweet.price = data.price
    sweet.quantity = data.quantity
    db.commit()
    db.refresh(sweet)
    logger.info("Sweet updated", extra={"sweet_id": sweet.id})
    return sweet


def delete_sweet(db: Session, sweet_id: int) -> None:
    sweet = get_sweet(db, sweet_id)
    db.delete(sweet)
    db.commit()
    logger.info("Sweet deleted", extra={"sweet_id": sweet_id})


def purchase_sweet(db: Session, sweet_id: int) -> Sweet:
    """
    Decrement quantity by one in a single conditional UPDATE.

    Concurrent purchases cannot oversell: the database applies
    "quantity > 0" and the decrement as one step per row.
    """
    result = db.execute(
        update(Sweet)
        .where(Sweet.id == sweet_id, Sweet.quantity > 0)
        .values(quantity=Sweet.quantity - 1)
        .execution_options(synchronize_session=False)
    )
    db.commit()
    if result.rowcount == 0:
        # Nothing updated: either the row is missing or it has no stock left.
        get_sweet(db, sweet_id)
        raise OutOfStock(f"Sweet with id {sweet_id} is out of stock")
    sweet = db.get(Sweet, sweet_id, populate_existing=True)
    if sweet is None:
        raise _not_found(sweet_id)
    logger.info(
        "Sweet purchased",
        extra={"sweet_id": sweet_id, "quantity": sweet.quantity},
    )
    return sweet


def restock_sweet(db: Session, sweet_id: int, amount: int = 1) -> Sweet:
    """
    Increment quantity by amount in a single conditional UPDATE.

    amount must be between 1 and MAX_QUANTITY, and the new quantity must still
    fit the column; otherwise nothing is written and ValidationError is raised.
    """
    if amount < 1:
        raise ValidationError("Restock amount must be at least 1")
    if amount > MAX_QUANTITY:
        raise ValidationError(f"Restock amount must be at most {MAX_QUANTITY}")
    result = db.execute(
        update(Sweet)
        .where(Sweet.id == sweet_id, Sweet.quantity <= MAX_QUANTITY - amount)
        .values(quantity=Sweet.quantity + amount)
        .execution_options(synchronize_session=False)
    )
    db.commit()
    if result.rowcount == 0:
        get_sweet(db, sweet_id)
        raise ValidationError(f"Restock would exceed the maximum stock of {MAX_QUANTITY}")
    sweet = db.get(Sweet, sweet_id, populate_existing=True)
    if sweet is None:
        raise _not_found(sweet_id)
    logger.info(
        "Sweet restocked",
        extra={"sweet_id": sweet_id, "amount": amount, "quantity": sweet.quantity},
    )
    return sweet
