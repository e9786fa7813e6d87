# decor_api/repositories/shop_repo.py
from sqlmodel import Session

from decor_api.models.shop import Shop


class ShopRepository:
    """
    Data access layer for Shop.

    - Pure DB operations.
    - No FastAPI, no business logic.
    """

    def get_by_id(self, session: Session, shop_id: str) -> Shop | None:
        return session.get(Shop, shop_id)

    def create(self, session: Session, shop: Shop) -> Shop:
        session.add(shop)
        session.commit()
        session.refresh(shop)
        return shop
