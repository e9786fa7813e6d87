# decor_api/repositories/product_repo.py
import uuid

from sqlmodel import Session, select

from decor_api.models.product import Product


class ProductRepository:
    """
    Data access layer for Product.

    - Pure DB operations (CRUD + queries).
    - No FastAPI, no business logic.
    """

    def get_by_id(self, session: Session, product_id: uuid.UUID) -> Product | None:
        return session.get(Product, product_id)

    def get_owned(
        self,
        session: Session,
        product_id: uuid.UUID,
        shop_id: str,
    ) -> Product | None:
        stmt = select(Product).where(
            Product.id == product_id,
            Product.shop_id == shop_id,
        )
        return session.exec(stmt).first()

    def list_for_shop(self, session: Session, shop_id: str) -> list[Product]:
        stmt = (
            select(Product)
            .where(Product.shop_id == shop_id)
            .order_by(Product.created_at.desc())
        )
        return session.exec(stmt).all()

    def create(self, session: Session, product: Product) -> Product:
        session.add(product)
        session.commit()
        session.refresh(product)
        return product

    def delete(self, session: Session, product: Product) -> None:
        session.delete(product)
        session.commit()
