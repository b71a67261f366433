"""ORM model for inventory items."""

from sqlalchemy import CheckConstraint, Column, Integer, Numeric, String

from sweetshop.models.base import Base


class Sweet(Base):
    """
    One stocked confectionery item.

    quantity never goes below zero; purchase and restock change it with
    conditional UPDATE statements rather than by assigning the attribute.
    """

    __tablename__ = "sweets"
    __table_args__ = (
        CheckConstraint("quantity >= 0", name="quantity_non_negative"),
        CheckConstraint("price >= 0", name="price_non_negative"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, index=True)
    category = Column(String(255), nullable=False, default="", index=True)
    price = Column(Numeric(10, 2), nullable=False)
    quantity = Column(Integer, nullable=False, default=0)
