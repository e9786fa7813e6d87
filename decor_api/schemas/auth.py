# decor_api/schemas/auth.py
from pydantic import ConfigDict, EmailStr, field_validator
from sqlmodel import SQLModel, Field


class LoginRequest(SQLModel):
    """
    Admin login payload.

    `email` is a plain string on purpose: a malformed email is just
    another failed login (401), not a 422.
    """

    model_config = ConfigDict(extra="forbid")

    email: str
    password: str


class TokenRead(SQLModel):
    """Response of a successful login."""

    token: str
    token_type: str = "bearer"
    shop_id: str


class TenantIdentity(SQLModel):
    """Caller identity resolved from a bearer token."""

    shop_id: str


class AdminCreate(SQLModel):
    """
    Provisioning payload for a new admin (seed script only).
    """

    model_config = ConfigDict(extra="forbid")

    email: EmailStr
    password: str = Field(min_length=6, max_length=72)
    shop_id: str

    @field_validator("shop_id")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("shop_id cannot be empty")
        return v
