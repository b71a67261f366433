"""Inventory routes: browse and search for any signed-in user, mutations for admins."""

from decimal import Decimal
from typing import Annotated

from fastapi import APIRouter, Body, Depends, Path, Query, Response, status
from sqlalchemy.orm import Session

from sweetshop.api.routing import PolicyRoute
from sweetshop.core.database import get_db
from sweetshop.schemas.sweet import (
    CATEGORY_MAX_LENGTH,
    MAX_ID,
    NAME_MAX_LENGTH,
    RestockRequest,
    SweetIn,
    SweetOut,
)
from sweetshop.services import inventory

router = APIRouter(route_class=PolicyRoute)

SweetId = Annotated[int, Path(ge=1, le=MAX_ID, description="Item id")]


@router.get("", name="sweets.list", response_model=list[SweetOut])
def list_sweets(db: Annotated[Session, Depends(get_db)]) -> list[SweetOut]:
    """Return every item in stock order (by id)."""
    return [SweetOut.model_validate(s) for s in inventory.list_sweets(db)]


@router.get("/search", name="sweets.search", response_model=list[SweetOut])
def search_sweets(
    db: Annotated[Session, Depends(get_db)],
    name: Annotated[str | None, Query(max_length=NAME_MAX_LENGTH)] = None,
    category: Annotated[str | None, Query(max_length=CATEGORY_MAX_LENGTH)] = None,
    min_price: Annotated[Decimal | None, Query(alias="minPrice", ge=0)] = None,
    max_price: Annotated[Decimal | None, Query(alias="maxPrice", ge=0)] = None,
) -> list[SweetOut]:
    """
    Search by any combination of name (substring, case-insensitive), category
    (exact), minPrice and maxPrice (inclusive). No filters returns all items.
    An inverted price range is not an error; it matches nothing.
    """
    sweets = inventory.search_sweets(
        db,
        name=name,
        category=category,
        min_price=min_price,
        max_price=max_price,
    )
    return [SweetOut.model_validate(s) for s in sweets]


@router.post(
    "",
    name="sweets.create",
    response_model=SweetOut,
    status_code=status.HTTP_201_CREATED,
)
def create_sweet(
    body: SweetIn,
    db: Annotated[Session, Depends(get_db)],
) -> SweetOut:
    return SweetOut.model_validate(inventory.create_sweet(db, body))


@router.put("/{sweet_id}", name="sweets.update", response_model=SweetOut)
def update_sweet(
    sweet_id: SweetId,
    body: SweetIn,
    db: Annotated[Session, Depends(get_db)],
) -> SweetOut:
    """Replace name, category, price and quantity of an existing item."""
    return SweetOut.model_validate(inventory.update_sweet(db, sweet_id, body))


@router.delete("/{sweet_id}", name="sweets.delete", status_code=status.HTTP_204_NO_CONTENT)
def delete_sweet(
    sweet_id: SweetId,
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    inventory.delete_sweet(db, sweet_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{sweet_id}/purchase", name="sweets.purchase", response_model=SweetOut)
def purchase_sweet(
    sweet_id: SweetId,
    db: Annotated[Session, Depends(get_db)],
) -> SweetOut:
    """Buy one unit. Returns 400 when the item is out of stock."""
    return SweetOut.model_validate(inventory.purchase_sweet(db, sweet_id))


@router.post("/{sweet_id}/restock", name="sweets.restock", response_model=SweetOut)
def restock_sweet(
    sweet_id: SweetId,
    db: Annotated[Session, Depends(get_db)],
    body: Annotated[RestockRequest | None, Body()] = None,
) -> SweetOut:
    """Add stock; the body {"amount": n} is optional and defaults to one unit."""
    amount = body.amount if body is not None else 1
    return SweetOut.model_validate(inventory.restock_sweet(db, sweet_id, amount))
