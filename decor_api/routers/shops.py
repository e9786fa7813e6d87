# decor_api/routers/shops.py
from fastapi import APIRouter, Depends
from sqlmodel import Session

from decor_api.database import get_session
from decor_api.repositories.shop_repo import ShopRepository
from decor_api.schemas.shop import ShopRead
from decor_api.services.shop_service import ShopService

router = APIRouter(prefix="/shops", tags=["Shops"])

repo = ShopRepository()
service = ShopService(repo)


@router.get("/{shop_id}", response_model=ShopRead)
def get_shop(
    shop_id: str,
    session: Session = Depends(get_session),
):
    """
    Shop header data for the storefront (public).
    """
    return service.get_shop(session, shop_id)
