# decor_api/models/product.py
import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, Column
from sqlmodel import SQLModel, Field


class Product(SQLModel, table=True):
    """
    Catalog entry owned by a single shop.

    Products are never updated in place: they are created by the owning
    admin, read publicly, and deleted by the owning admin.

    `image` duplicates `images[0]` for consumers that only show one picture.
    """

    __tablename__ = "products"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    shop_id: str = Field(
        foreign_key="shops.id",
        index=True,
        description="FK to shops.id (owning tenant, immutable)",
    )

    category: str = Field(
        max_length=50,
        index=True,
    )

    name: str = Field(
        max_length=255,
        description="Display name; defaults to the category",
    )

    description: str = Field(
        default="",
    )

    image: str | None = Field(
        default=None,
        description="Primary image path (first of `images`)",
    )

    images: list[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
        description="All image paths, in upload order",
    )

    ar_model: str | None = Field(
        default=None,
        description="Reference to a 3D model for the AR viewer",
    )

    price: float | None = Field(
        default=None,
        ge=0,
        description="Unit price; None when the shop does not list one",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        index=True,
        description="Creation timestamp (UTC)",
    )
