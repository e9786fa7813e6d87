# decor_api/routers/auth.py
from fastapi import APIRouter, Depends
from sqlmodel import Session

from decor_api.database import get_session
from decor_api.repositories.admin_repo import AdminRepository
from decor_api.schemas.auth import LoginRequest, TokenRead
from decor_api.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["Auth"])

repo = AdminRepository()
service = AuthService(repo)


@router.post("/login", response_model=TokenRead)
def login(
    payload: LoginRequest,
    session: Session = Depends(get_session),
):
    """
    Exchange admin email/password for a bearer token.

    - Token is valid for ACCESS_TOKEN_EXPIRE_DAYS and scoped to the admin's shop.
    - Any mismatch returns 401 InvalidCredentials.
    """
    return service.login(session, payload.email, payload.password)
