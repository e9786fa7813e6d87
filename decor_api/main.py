# decor_api/main.py
from contextlib import asynccontextmanager
from pathlib import Path
import logging

from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError

from decor_api.core.config import get_settings
from decor_api.core.errors import CatalogError, InvalidCredentials, ValidationFailed
from decor_api.database import create_db_and_tables

# Import models so SQLModel metadata is populated before create_all()
from decor_api.models import shop as _shop_models  # noqa: F401
from decor_api.models import admin as _admin_models  # noqa: F401
from decor_api.models import product as _product_models  # noqa: F401


# Routers
from decor_api.routers.shops import router as shops_router
from decor_api.routers.auth import login as login_endpoint, router as auth_router
from decor_api.routers.products import router as products_router

settings = get_settings()

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("uvicorn")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup:
      - Verify DB connectivity and create tables.

    Shutdown:
      - No special cleanup needed for sync engine.
    """
    logger.info("Startup: connecting to database...")
    try:
        create_db_and_tables()
        logger.info("Startup: DB connection OK, tables verified.")
    except Exception as e:
        logger.error(f"Startup: DB connection FAILED: {e}")
        raise
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    lifespan=lifespan,
)


def render_error(exc: CatalogError) -> JSONResponse:
    """
    Render domain errors as {"error": ..., "detail": ...}.

    Server-side failures were already logged where they happened;
    callers only get the generic message.
    """
    headers = None
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.error, "detail": exc.detail},
        headers=headers,
    )


@app.exception_handler(CatalogError)
async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    return render_error(exc)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """
    Requests FastAPI could not parse.

    - login: any malformed body is just a failed login (401)
    - elsewhere: 400 ValidationError naming the first bad field,
      without echoing the submitted value
    """
    if request.scope.get("endpoint") is login_endpoint:
        return render_error(InvalidCredentials())

    errors = exc.errors()
    first = errors[0] if errors else {}
    loc = [
        str(part)
        for part in first.get("loc", ())
        if part not in ("body", "query", "path", "header")
    ]
    field = ".".join(loc) or "request"
    return render_error(ValidationFailed(f"{field}: {first.get('msg', 'invalid value')}"))


# --- CORS configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API prefix, e.g. /api
app.include_router(shops_router, prefix=settings.API_PREFIX)
app.include_router(auth_router, prefix=settings.API_PREFIX)
app.include_router(products_router, prefix=settings.API_PREFIX)

# Uploaded product images, served as-is
Path(settings.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)
app.mount(
    settings.UPLOADS_URL_PREFIX,
    StaticFiles(directory=settings.UPLOAD_DIR),
    name="uploads",
)


@app.get("/")
def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "decor-catalog"}
