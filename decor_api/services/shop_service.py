# decor_api/services/shop_service.py
from sqlmodel import Session

from decor_api.core.errors import NotFound
from decor_api.models.shop import Shop
from decor_api.repositories.shop_repo import ShopRepository


class ShopService:
    """Read-only shop directory."""

    def __init__(self, repo: ShopRepository):
        self.repo = repo

    def get_shop(self, session: Session, shop_id: str) -> Shop:
        """
        Raises:
            NotFound: if no shop has this id.
        """
        shop = self.repo.get_by_id(session, shop_id)
        if not shop:
            raise NotFound("Shop not found")
        return shop
