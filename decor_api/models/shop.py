# decor_api/models/shop.py
from sqlmodel import SQLModel, Field


class Shop(SQLModel, table=True):
    """
    A tenant. Every admin and product belongs to exactly one shop.

    Rows are provisioned out-of-band (see `decor_api.seed`); the API
    only reads them.
    """

    __tablename__ = "shops"

    id: str = Field(
        primary_key=True,
        max_length=64,
        description="Tenant key, e.g. 'demo-shop'",
    )

    name: str = Field(
        max_length=100,
        description="Display name shown on the storefront",
    )

    logo: str | None = Field(
        default=None,
        description="Logo URL or public path",
    )

    tagline: str | None = Field(
        default=None,
        max_length=255,
    )

    whatsapp: str | None = Field(
        default=None,
        max_length=32,
        description="Contact number used by the storefront's chat button",
    )
