import uuid
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError
from sqlalchemy.exc import OperationalError

from decor_api.core.errors import NotFound, PersistenceFailed, TooManyFiles
from decor_api.models.product import Product
from decor_api.schemas.auth import TenantIdentity
from decor_api.schemas.product import ProductCreate

SHOP_1 = TenantIdentity(shop_id="shop-1")
SHOP_2 = TenantIdentity(shop_id="shop-2")


def test_create_applies_defaults(session, shops, product_service):
    product = product_service.create_product(session, SHOP_1, ProductCreate(category="chair"))

    stored = product_service.get_product(session, product.id)
    assert stored.shop_id == "shop-1"
    assert stored.category == "chair"
    assert stored.name == "chair"
    assert stored.description == ""
    assert stored.image is None
    assert stored.images == []
    assert stored.ar_model is None


def test_create_keeps_explicit_fields(session, shops, product_service):
    payload = ProductCreate(
        category="sofa",
        name="Luxury Sofa",
        description="Three seats",
        ar_model="https://modelviewer.dev/shared-assets/models/Astronaut.glb",
    )

    product = product_service.create_product(session, SHOP_1, payload)

    assert product.name == "Luxury Sofa"
    assert product.description == "Three seats"
    assert product.ar_model.endswith("Astronaut.glb")


def test_create_first_image_is_primary(session, shops, product_service, upload_dir):
    product = product_service.create_product(
        session,
        SHOP_1,
        ProductCreate(category="lamp"),
        [("front.png", b"1"), ("side.png", b"2")],
    )

    assert len(product.images) == 2
    assert product.image == product.images[0]
    assert product.images[0].endswith("-front.png")
    assert product.images[1].endswith("-side.png")


def test_create_is_not_idempotent(session, shops, product_service):
    first = product_service.create_product(session, SHOP_1, ProductCreate(category="chair"))
    second = product_service.create_product(session, SHOP_1, ProductCreate(category="chair"))

    assert first.id != second.id
    assert len(product_service.list_products(session, "shop-1")) == 2


def test_create_rejects_too_many_images_before_insert(session, shops, product_service):
    files = [(f"{i}.png", b"x") for i in range(7)]

    with pytest.raises(TooManyFiles):
        product_service.create_product(session, SHOP_1, ProductCreate(category="chair"), files)
    assert product_service.list_products(session, "shop-1") == []


def test_create_insert_failure_removes_uploaded_files(
    session, shops, product_service, upload_dir, monkeypatch
):
    def failing_create(session, product):
        raise OperationalError("INSERT", {}, Exception("db down"))

    monkeypatch.setattr(product_service.repo, "create", failing_create)

    with pytest.raises(PersistenceFailed):
        product_service.create_product(
            session, SHOP_1, ProductCreate(category="chair"), [("a.png", b"1")]
        )
    assert list(upload_dir.iterdir()) == []


def test_get_product_missing(session, product_service):
    with pytest.raises(NotFound):
        product_service.get_product(session, uuid.uuid4())


def test_get_product_is_not_tenant_filtered(session, shops, product_service):
    product = product_service.create_product(session, SHOP_2, ProductCreate(category="lamp"))

    assert product_service.get_product(session, product.id).shop_id == "shop-2"


def test_list_without_shop_id_is_empty(session, shops, product_service):
    product_service.create_product(session, SHOP_1, ProductCreate(category="chair"))

    assert product_service.list_products(session, None) == []
    assert product_service.list_products(session, "") == []


def test_list_only_includes_own_shop(session, shops, product_service):
    product_service.create_product(session, SHOP_1, ProductCreate(category="chair"))
    product_service.create_product(session, SHOP_2, ProductCreate(category="sofa"))
    product_service.create_product(session, SHOP_2, ProductCreate(category="lamp"))

    shop_1 = product_service.list_products(session, "shop-1")
    shop_2 = product_service.list_products(session, "shop-2")

    assert [p.category for p in shop_1] == ["chair"]
    assert {p.shop_id for p in shop_2} == {"shop-2"}
    assert len(shop_2) == 2
    assert product_service.list_products(session, "shop-3") == []


def test_list_is_newest_first(session, shops, product_service):
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)
    for offset, category in [(0, "old"), (2, "newest"), (1, "middle")]:
        session.add(
            Product(
                shop_id="shop-1",
                category=category,
                name=category,
                created_at=base + timedelta(hours=offset),
            )
        )
    session.commit()

    products = product_service.list_products(session, "shop-1")

    assert [p.category for p in products] == ["newest", "middle", "old"]


def test_delete_own_product(session, shops, product_service):
    product = product_service.create_product(session, SHOP_1, ProductCreate(category="chair"))

    assert product_service.delete_product(session, SHOP_1, product.id) is True
    with pytest.raises(NotFound):
        product_service.get_product(session, product.id)


def test_delete_other_shops_product_is_noop(session, shops, product_service):
    product = product_service.create_product(session, SHOP_2, ProductCreate(category="sofa"))

    assert product_service.delete_product(session, SHOP_1, product.id) is False
    assert product_service.get_product(session, product.id).shop_id == "shop-2"


def test_delete_unknown_product_is_noop(session, shops, product_service):
    assert product_service.delete_product(session, SHOP_1, uuid.uuid4()) is False


def test_delete_removes_stored_images(session, shops, product_service, upload_dir):
    product = product_service.create_product(
        session,
        SHOP_1,
        ProductCreate(category="chair"),
        [("a.png", b"1"), ("b.png", b"2")],
    )
    assert len(list(upload_dir.iterdir())) == 2

    product_service.delete_product(session, SHOP_1, product.id)

    assert list(upload_dir.iterdir()) == []


@pytest.mark.parametrize("product_id", ["chair1", "", "1234"])
def test_get_product_non_uuid_id_is_not_found(session, shops, product_service, product_id):
    with pytest.raises(NotFound):
        product_service.get_product(session, product_id)


def test_delete_non_uuid_id_is_noop(session, shops, product_service):
    product_service.create_product(session, SHOP_1, ProductCreate(category="chair"))

    assert product_service.delete_product(session, SHOP_1, "chair1") is False
    assert len(product_service.list_products(session, "shop-1")) == 1


def test_string_uuid_id_is_accepted(session, shops, product_service):
    product = product_service.create_product(session, SHOP_1, ProductCreate(category="chair"))

    assert product_service.get_product(session, str(product.id)).id == product.id
    assert product_service.delete_product(session, SHOP_1, str(product.id)) is True


def test_create_stores_price(session, shops, product_service):
    product = product_service.create_product(
        session, SHOP_1, ProductCreate(category="sofa", price="25000")
    )

    assert product_service.get_product(session, product.id).price == 25000


def test_price_defaults_to_none_and_rejects_negative(session, shops, product_service):
    product = product_service.create_product(session, SHOP_1, ProductCreate(category="sofa"))
    assert product.price is None

    with pytest.raises(ValidationError):
        ProductCreate(category="sofa", price=-5)
