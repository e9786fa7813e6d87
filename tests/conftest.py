import os
import tempfile

# Settings are read at import time; configure them before importing the app.
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="decor-uploads-")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from decor_api.core.security import create_access_token, hash_password
from decor_api.database import get_session
from decor_api.main import app
from decor_api.models.admin import Admin
from decor_api.models.shop import Shop
from decor_api.repositories.product_repo import ProductRepository
from decor_api.routers import products as products_router
from decor_api.services.media_service import MediaService
from decor_api.services.product_service import ProductService


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    path = tmp_path / "uploads"
    monkeypatch.setattr(products_router.media, "upload_dir", path)
    return path


@pytest.fixture
def media(upload_dir):
    return MediaService(upload_dir, max_files=6, max_bytes=1024)


@pytest.fixture
def product_service(media):
    return ProductService(ProductRepository(), media)


@pytest.fixture
def shops(session):
    """Two tenants, each with one admin (password 'secret')."""
    session.add(Shop(id="shop-1", name="Shop One", logo="/logo1.png", tagline="First"))
    session.add(Shop(id="shop-2", name="Shop Two"))
    session.commit()
    session.add(Admin(email="a@x.com", password_hash=hash_password("secret"), shop_id="shop-1"))
    session.add(Admin(email="b@x.com", password_hash=hash_password("secret"), shop_id="shop-2"))
    session.commit()
    return ["shop-1", "shop-2"]


@pytest.fixture
def client(engine, upload_dir):
    def override_get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_header():
    def build(shop_id: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(shop_id)}"}

    return build
