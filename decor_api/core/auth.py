# decor_api/core/auth.py
from fastapi import Depends
from fastapi.security import APIKeyHeader

from decor_api.core.errors import InvalidToken, Unauthenticated
from decor_api.core.security import decode_access_token
from decor_api.schemas.auth import TenantIdentity

# Raw Authorization header:
# - auto_error=False => a missing header reaches `authenticate`, which
#   reports it as Unauthenticated with our own error payload.
authorization_header = APIKeyHeader(
    name="Authorization",
    auto_error=False,
    description="Bearer <token> returned by /auth/login",
)


def authenticate(raw_header: str | None) -> TenantIdentity:
    """
    Resolve the caller's tenant from an Authorization header value.

    Flow:
      1. Missing/blank header => Unauthenticated.
      2. Header must read "Bearer <token>" => else Unauthenticated.
      3. Verify signature + expiry => else InvalidToken.
      4. Return the embedded shop_id.
    """
    if not raw_header or not raw_header.strip():
        raise Unauthenticated()

    scheme, _, token = raw_header.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        raise Unauthenticated("Authorization header must be 'Bearer <token>'")

    payload = decode_access_token(token)
    shop_id = payload.get("shop_id")
    if not isinstance(shop_id, str) or not shop_id:
        raise InvalidToken("Token missing shop_id")

    return TenantIdentity(shop_id=shop_id)


def require_tenant(
    authorization: str | None = Depends(authorization_header),
) -> TenantIdentity:
    """
    Enforce authentication on mutating routes.

    Returns:
        The TenantIdentity of the authenticated shop admin.

    Raises:
        Unauthenticated / InvalidToken (both rendered as 401).
    """
    return authenticate(authorization)
