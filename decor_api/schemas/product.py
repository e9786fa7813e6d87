# decor_api/schemas/product.py
import uuid
from datetime import datetime

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field


class ProductCreate(SQLModel):
    """
    Validated input for creating a product.

    Built by the router from multipart form fields; images are passed
    separately as uploaded files.

    - name defaults to category when omitted
    - description defaults to ""
    - price is optional and never negative
    """

    model_config = ConfigDict(extra="forbid")

    category: str = Field(max_length=50)
    name: str | None = Field(default=None, max_length=255)
    description: str | None = None
    ar_model: str | None = None
    price: float | None = Field(default=None, ge=0)

    @field_validator("category")
    @classmethod
    def validate_category(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("category cannot be empty")
        return v

    @field_validator("name", "description", "ar_model")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        # HTML forms send empty inputs as ""
        if v is None:
            return None
        return v if v.strip() else None

    @field_validator("price", mode="before")
    @classmethod
    def blank_price_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ProductRead(SQLModel):
    """
    Product representation for clients.
    """

    id: uuid.UUID
    shop_id: str
    category: str
    name: str
    description: str
    image: str | None = None
    images: list[str] = []
    ar_model: str | None = None
    price: float | None = None
    created_at: datetime


class MessageRead(SQLModel):
    """Plain acknowledgement payload."""

    message: str


class ProductCreated(MessageRead):
    """Acknowledgement for a created product."""

    id: uuid.UUID
