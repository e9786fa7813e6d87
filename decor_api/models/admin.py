# decor_api/models/admin.py
import uuid
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class Admin(SQLModel, table=True):
    """
    Shop administrator credentials.

    Each admin manages exactly one shop. Passwords are stored as bcrypt
    hashes only; the plain password never reaches the database.
    """

    __tablename__ = "admins"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    email: str = Field(
        unique=True,
        index=True,
        description="Login email (exact match)",
    )

    password_hash: str = Field(
        description="bcrypt hash of the admin password",
    )

    shop_id: str = Field(
        foreign_key="shops.id",
        index=True,
        description="FK to shops.id (owning tenant)",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )
