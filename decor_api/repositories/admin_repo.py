# decor_api/repositories/admin_repo.py
from sqlmodel import Session, select

from decor_api.models.admin import Admin


class AdminRepository:
    """
    Data access layer for Admin.

    Responsibilities:
      - Pure DB operations (lookups + provisioning insert)
      - No FastAPI, no HTTP, no business logic
    """

    def get_by_email(self, session: Session, email: str) -> Admin | None:
        """Return an Admin by exact email, or None if not found."""
        stmt = select(Admin).where(Admin.email == email)
        return session.exec(stmt).first()

    def create(self, session: Session, admin: Admin) -> Admin:
        """Insert a new Admin and return the persisted row."""
        session.add(admin)
        session.commit()
        session.refresh(admin)
        return admin
