"""Pydantic schemas for inventory items and stock operations."""

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

NAME_MAX_LENGTH = 255
CATEGORY_MAX_LENGTH = 255

# Ids and stock counts are 32-bit INTEGER columns.
MAX_ID = 2**31 - 1
MAX_QUANTITY = 2**31 - 1

# Prices are exact decimals internally but plain JSON numbers on the wire.
Price = Annotated[
    Decimal,
    Field(ge=0, max_digits=10, decimal_places=2),
    PlainSerializer(float, return_type=float, when_used="json"),
]


class SweetIn(BaseModel):
    """Fields supplied when creating or fully replacing an item."""

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH, description="Display name")
    category: str = Field(default="", max_length=CATEGORY_MAX_LENGTH, description="Category, matched exactly in search")
    price: Price = Field(..., description="Unit price, non-negative")
    quantity: int = Field(default=0, ge=0, le=MAX_QUANTITY, description="Units in stock")


class SweetOut(BaseModel):
    """Item as returned to clients."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    category: str
    price: Price
    quantity: int


class RestockRequest(BaseModel):
    """Optional body for restock; amount defaults to 1."""

    amount: int = Field(default=1, ge=1, le=MAX_QUANTITY, description="Units to add")
