# decor_api/core/security.py
from datetime import datetime, timedelta, timezone
from typing import Any

import bcrypt
from jose import jwt, JWTError

from decor_api.core.config import get_settings
from decor_api.core.errors import InvalidToken

settings = get_settings()


# ----- Passwords -----


def hash_password(password: str) -> str:
    """Return a bcrypt hash (utf-8 str) for storage in admins.password_hash."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """
    Constant-time comparison of a plain password against a stored hash.

    A malformed stored hash counts as a mismatch.
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


# Compared against when the email is unknown so both login failures
# cost one bcrypt check.
DUMMY_PASSWORD_HASH = hash_password("not-a-real-password")


# ----- Tokens -----


def create_access_token(shop_id: str, now: datetime | None = None) -> str:
    """
    Issue a signed token for a shop admin.

    Claims:
      - shop_id: tenant the holder may mutate
      - iat / exp: issued-at and expiry (ACCESS_TOKEN_EXPIRE_DAYS later)
    """
    issued_at = now or datetime.now(timezone.utc)
    claims = {
        "shop_id": shop_id,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS),
    }
    return jwt.encode(claims, settings.JWT_SECRET, algorithm=settings.JWT_ALG)


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and verify an admin token.

    Verification:
      - signature (JWT_ALG using JWT_SECRET)
      - expiration time (exp)

    Raises:
        InvalidToken: if the token is tampered, malformed or expired.
    """
    try:
        return jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALG],
        )
    except JWTError:
        raise InvalidToken()
