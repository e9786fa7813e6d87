# decor_api/services/auth_service.py
import logging

from sqlmodel import Session

from decor_api.core.errors import InvalidCredentials
from decor_api.core.security import (
    DUMMY_PASSWORD_HASH,
    create_access_token,
    verify_password,
)
from decor_api.repositories.admin_repo import AdminRepository
from decor_api.schemas.auth import TokenRead

logger = logging.getLogger(__name__)


class AuthService:
    """
    Admin login.

    Unknown email and wrong password raise the same InvalidCredentials
    and cost the same bcrypt check, so callers cannot tell them apart.
    """

    def __init__(self, repo: AdminRepository):
        self.repo = repo

    def login(self, session: Session, email: str, password: str) -> TokenRead:
        admin = self.repo.get_by_email(session, email)

        if admin is None:
            verify_password(password, DUMMY_PASSWORD_HASH)
            raise InvalidCredentials()

        if not verify_password(password, admin.password_hash):
            raise InvalidCredentials()

        logger.info("Admin login for shop %s", admin.shop_id)
        return TokenRead(
            token=create_access_token(admin.shop_id),
            shop_id=admin.shop_id,
        )
