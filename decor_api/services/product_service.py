# decor_api/services/product_service.py
import logging
import uuid
from typing import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from decor_api.core.errors import NotFound, PersistenceFailed
from decor_api.models.product import Product
from decor_api.repositories.product_repo import ProductRepository
from decor_api.schemas.auth import TenantIdentity
from decor_api.schemas.product import ProductCreate
from decor_api.services.media_service import MediaService

logger = logging.getLogger(__name__)


class ProductService:
    """
    Business logic for Product.

    Responsibilities:
      - tenant scoping: products are created under, and deleted only by,
        the caller's shop
      - field defaults (name <- category, description <- "")
      - image upload orchestration with MediaService
      - authentication is enforced at the router via require_tenant
    """

    def __init__(self, repo: ProductRepository, media: MediaService):
        self.repo = repo
        self.media = media

    # ----- Public reads -----

    def list_products(self, session: Session, shop_id: str | None) -> list[Product]:
        """
        Products of one shop, newest first.

        No shop_id means nothing to list: returns [] rather than failing.
        """
        if not shop_id:
            return []
        return self.repo.list_for_shop(session, shop_id)

    @staticmethod
    def _parse_id(product_id: str | uuid.UUID) -> uuid.UUID | None:
        """Ids that are not UUIDs cannot match any product."""
        if isinstance(product_id, uuid.UUID):
            return product_id
        try:
            return uuid.UUID(product_id)
        except (TypeError, ValueError):
            return None

    def get_product(self, session: Session, product_id: str | uuid.UUID) -> Product:
        """
        Public lookup by id; not filtered by tenant.

        Raises:
            NotFound: if no product has this id (or the id is not a UUID).
        """
        parsed = self._parse_id(product_id)
        product = self.repo.get_by_id(session, parsed) if parsed is not None else None
        if not product:
            raise NotFound("Product not found")
        return product

    # ----- Tenant mutations -----

    def create_product(
        self,
        session: Session,
        tenant: TenantIdentity,
        payload: ProductCreate,
        files: Sequence[tuple[str | None, bytes]] = (),
    ) -> Product:
        """
        Store uploaded images, then insert the product for `tenant`.

        - images keep upload order; the first one is also the primary image
        - if the insert fails, the files stored for it are removed

        Raises:
            TooManyFiles / FileTooLarge: from upload validation.
            StorageWriteFailed: an image could not be written.
            PersistenceFailed: the insert failed.
        """
        images = self.media.ingest(files)

        product = Product(
            shop_id=tenant.shop_id,
            category=payload.category,
            name=payload.name or payload.category,
            description=payload.description or "",
            image=images[0] if images else None,
            images=images,
            ar_model=payload.ar_model,
            price=payload.price,
        )

        try:
            created = self.repo.create(session, product)
        except SQLAlchemyError:
            session.rollback()
            logger.exception("Failed to insert product for shop %s", tenant.shop_id)
            self.media.discard(images)
            raise PersistenceFailed()

        logger.info(
            "Created product %s for shop %s (%d images)",
            created.id,
            tenant.shop_id,
            len(images),
        )
        return created

    def delete_product(
        self,
        session: Session,
        tenant: TenantIdentity,
        product_id: str | uuid.UUID,
    ) -> bool:
        """
        Delete a product owned by `tenant`, and its stored images.

        Returns:
            True if a product was deleted. False when the id is unknown or
            the product belongs to another shop; both are reported the same
            way to callers.
        """
        parsed = self._parse_id(product_id)
        product = None
        if parsed is not None:
            product = self.repo.get_owned(session, parsed, tenant.shop_id)
        if product is None:
            logger.info(
                "Delete of product %s by shop %s matched nothing",
                product_id,
                tenant.shop_id,
            )
            return False

        images = list(product.images or [])
        try:
            self.repo.delete(session, product)
        except SQLAlchemyError:
            session.rollback()
            logger.exception("Failed to delete product %s", product_id)
            raise PersistenceFailed()

        self.media.discard(images)
        logger.info("Deleted product %s for shop %s", product_id, tenant.shop_id)
        return True
