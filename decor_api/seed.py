# decor_api/seed.py
"""
Demo provisioning: one shop, its admin and a starter catalog.

Shops and admins are never created through the API. Run this once
against a fresh database:

    JWT_SECRET=... SEED_ADMIN_PASSWORD=... python -m decor_api.seed

Existing rows are left untouched (products are matched by name within
the shop), so running it twice is harmless.
"""

import logging

from sqlmodel import Session

from decor_api.core.config import get_settings
from decor_api.core.security import hash_password
from decor_api.database import create_db_and_tables, engine
from decor_api.models.admin import Admin
from decor_api.models.product import Product
from decor_api.models.shop import Shop
from decor_api.repositories.admin_repo import AdminRepository
from decor_api.repositories.product_repo import ProductRepository
from decor_api.repositories.shop_repo import ShopRepository
from decor_api.schemas.auth import AdminCreate

logger = logging.getLogger(__name__)

DEMO_SHOP = {
    "id": "demo-shop",
    "name": "Demo Decor Store",
    "logo": "https://via.placeholder.com/120",
    "tagline": "Chairs, sofas and lamps you can place in your room",
    "whatsapp": "919999999999",
}

# category id -> storefront label
DEMO_CATEGORIES = {
    "chair": "Chairs",
    "sofa": "Sofas",
    "lamp": "Lamps",
}

DEMO_PRODUCTS = [
    {"category": "chair", "name": "Wooden Chair", "price": 3500},
    {"category": "sofa", "name": "Luxury Sofa", "price": 25000},
    {"category": "lamp", "name": "Modern Lamp", "price": 2200},
]

DEMO_IMAGE = "https://via.placeholder.com/300"


def seed_shop(session: Session, data: dict) -> Shop:
    repo = ShopRepository()
    shop = repo.get_by_id(session, data["id"])
    if shop is not None:
        logger.info("Shop %s already exists", shop.id)
        return shop
    shop = repo.create(session, Shop(**data))
    logger.info("Created shop %s", shop.id)
    return shop


def seed_admin(session: Session, payload: AdminCreate) -> Admin:
    repo = AdminRepository()
    admin = repo.get_by_email(session, payload.email)
    if admin is not None:
        logger.info("Admin %s already exists", admin.email)
        return admin
    admin = repo.create(
        session,
        Admin(
            email=payload.email,
            password_hash=hash_password(payload.password),
            shop_id=payload.shop_id,
        ),
    )
    logger.info("Created admin %s for shop %s", admin.email, admin.shop_id)
    return admin


def seed_products(session: Session, shop_id: str, items: list[dict]) -> list[Product]:
    """
    Insert demo products that the shop does not have yet.

    Returns only the newly created products.
    """
    repo = ProductRepository()
    existing = {p.name for p in repo.list_for_shop(session, shop_id)}

    created: list[Product] = []
    for item in items:
        if item["name"] in existing:
            continue
        label = DEMO_CATEGORIES.get(item["category"], item["category"])
        product = repo.create(
            session,
            Product(
                shop_id=shop_id,
                description=f"From our {label} collection",
                image=DEMO_IMAGE,
                images=[DEMO_IMAGE],
                **item,
            ),
        )
        created.append(product)

    logger.info("Created %d demo products for shop %s", len(created), shop_id)
    return created


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    settings = get_settings()

    if not settings.SEED_ADMIN_PASSWORD:
        raise SystemExit("Set SEED_ADMIN_PASSWORD to provision the demo admin.")

    payload = AdminCreate(
        email=settings.SEED_ADMIN_EMAIL,
        password=settings.SEED_ADMIN_PASSWORD,
        shop_id=DEMO_SHOP["id"],
    )

    create_db_and_tables()
    with Session(engine) as session:
        seed_shop(session, DEMO_SHOP)
        seed_admin(session, payload)
        seed_products(session, DEMO_SHOP["id"], DEMO_PRODUCTS)


if __name__ == "__main__":
    main()
