from typing import Optional
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from pydantic import field_validator
from sqlalchemy import Numeric, String, Text, UniqueConstraint, func, text
from sqlalchemy.dialects import mysql
from sqlmodel import Field, SQLModel

# Column names double as the JSON field names clients already send and read,
# so they keep their original spelling.

# Owner lookups compare emails exactly, MySQL's default collation would not
OwnerEmail = String(255).with_variant(mysql.VARCHAR(255, collation="utf8mb4_bin"), "mysql")

CENTS = Decimal("0.01")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CollectionItemBase(SQLModel):
    addedID: int
    title: str = Field(max_length=255)
    userEmail: str = Field(max_length=255, sa_type=OwnerEmail)
    price: Decimal = Field(sa_type=Numeric(10, 2))
    image_url: str = Field(sa_type=Text)
    userName: str = Field(max_length=255)
    size: str = Field(max_length=255)


class CollectionItemCreate(CollectionItemBase):
    @field_validator("price")
    @classmethod
    def round_price(cls, value: Decimal) -> Decimal:
        # Same rounding a DECIMAL(10,2) column applies on insert
        return value.quantize(CENTS, rounding=ROUND_HALF_UP)


class CollectionItem(CollectionItemBase):
    id: Optional[int] = Field(default=None, primary_key=True)

    # Timestamps
    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column_kwargs={"server_default": text("CURRENT_TIMESTAMP")},
    )
    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column_kwargs={"server_default": text("CURRENT_TIMESTAMP"), "onupdate": func.now()},
    )


class CartItem(CollectionItem, table=True):
    __tablename__ = "added_Items"
    __table_args__ = (
        UniqueConstraint("addedID", "userEmail", name="uq_added_items_added_user"),
    )


class WishlistItem(CollectionItem, table=True):
    __tablename__ = "WishList"
    __table_args__ = (
        UniqueConstraint("addedID", "userEmail", name="uq_wishlist_added_user"),
    )
