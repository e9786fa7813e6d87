# decor_api/schemas/shop.py
from pydantic import ConfigDict
from sqlmodel import SQLModel


class ShopRead(SQLModel):
    """Public shop metadata for the storefront header."""

    model_config = ConfigDict(extra="forbid")

    id: str
    name: str
    logo: str | None = None
    tagline: str | None = None
    whatsapp: str | None = None
