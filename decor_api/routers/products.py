# decor_api/routers/products.py
from fastapi import (
    APIRouter,
    Depends,
    File,
    Form,
    UploadFile,
    status,
)
from pydantic import ValidationError
from sqlmodel import Session

from decor_api.core.auth import require_tenant
from decor_api.core.config import get_settings
from decor_api.core.errors import MissingCategory, TooManyFiles, ValidationFailed
from decor_api.database import get_session
from decor_api.repositories.product_repo import ProductRepository
from decor_api.schemas.auth import TenantIdentity
from decor_api.schemas.product import (
    MessageRead,
    ProductCreate,
    ProductCreated,
    ProductRead,
)
from decor_api.services.media_service import MediaService
from decor_api.services.product_service import ProductService

settings = get_settings()

router = APIRouter(prefix="/products", tags=["Products"])

repo = ProductRepository()
media = MediaService(
    settings.UPLOAD_DIR,
    max_files=settings.MAX_UPLOAD_FILES,
    max_bytes=settings.MAX_UPLOAD_BYTES,
)
service = ProductService(repo, media)


def parse_product_form(
    category: str | None,
    name: str | None = None,
    description: str | None = None,
    ar_model: str | None = None,
    price: str | None = None,
) -> ProductCreate:
    """
    Turn raw form fields into a ProductCreate.

    Raises:
        MissingCategory: category absent or blank.
        ValidationFailed: any other field is invalid.
    """
    if category is None or not category.strip():
        raise MissingCategory()

    try:
        return ProductCreate(
            category=category,
            name=name,
            description=description,
            ar_model=ar_model,
            price=price,
        )
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ()))
        raise ValidationFailed(f"{field}: {first.get('msg', 'invalid value')}")


# -------- Public endpoints --------


@router.get("", response_model=list[ProductRead])
def list_products(
    shop_id: str | None = None,
    session: Session = Depends(get_session),
):
    """
    List a shop's products, newest first.

    - Public endpoint.
    - Without `shop_id` the list is empty.
    """
    return service.list_products(session, shop_id)


@router.get("/{product_id}", response_model=ProductRead)
def get_product(
    product_id: str,
    session: Session = Depends(get_session),
):
    """
    Get a single product by id.

    - Public endpoint, any shop.
    - Ids that match no product (UUID or not) are 404.
    """
    return service.get_product(session, product_id)


# -------- Shop admin endpoints --------


@router.post(
    "",
    response_model=ProductCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Create a product with up to 6 images",
)
def create_product(
    tenant: TenantIdentity = Depends(require_tenant),
    category: str | None = Form(default=None),
    name: str | None = Form(default=None),
    description: str | None = Form(default=None),
    ar_model: str | None = Form(default=None),
    price: str | None = Form(default=None),
    images: list[UploadFile] | None = File(default=None),
    session: Session = Depends(get_session),
):
    """
    Create a product for the caller's shop (multipart/form-data).

    - `category` is required; `name` defaults to it.
    - The first uploaded image becomes the primary image.
    """
    payload = parse_product_form(category, name, description, ar_model, price)

    images = images or []
    if len(images) > media.max_files:
        raise TooManyFiles(f"At most {media.max_files} images per product")

    # One byte past the limit is enough for MediaService to reject the file
    files: list[tuple[str | None, bytes]] = []
    for f in images:
        files.append((f.filename, f.file.read(media.max_bytes + 1)))

    product = service.create_product(session, tenant, payload, files)
    return ProductCreated(message="Product created", id=product.id)


@router.delete(
    "/{product_id}",
    response_model=MessageRead,
    status_code=status.HTTP_200_OK,
)
def delete_product(
    product_id: str,
    tenant: TenantIdentity = Depends(require_tenant),
    session: Session = Depends(get_session),
):
    """
    Delete one of the caller's products.

    Unknown ids and other shops' products are left alone and still
    acknowledged, so repeated deletes are safe.
    """
    service.delete_product(session, tenant, product_id)
    return MessageRead(message="Product deleted")
