# decor_api/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Required env vars (.env):
      - JWT_SECRET (process-wide signing secret for admin tokens)

    Optional:
      - DATABASE_URL (defaults to a local SQLite file)
      - UPLOAD_DIR (where product images are written)
      - SEED_ADMIN_EMAIL / SEED_ADMIN_PASSWORD (demo provisioning only)
    """

    PROJECT_NAME: str = "Decor SaaS Catalog API"
    API_PREFIX: str = "/api"

    DATABASE_URL: str = "sqlite:///./decor.db"

    # Token signing (read-only after startup)
    JWT_SECRET: str
    JWT_ALG: str = "HS256"
    ACCESS_TOKEN_EXPIRE_DAYS: int = 7

    # Media uploads
    UPLOAD_DIR: str = "uploads"
    UPLOADS_URL_PREFIX: str = "/uploads"
    MAX_UPLOAD_FILES: int = 6
    MAX_UPLOAD_BYTES: int = 10 * 1024 * 1024

    CORS_ORIGINS: list[str] = ["*"]

    # Demo provisioning
    SEED_ADMIN_EMAIL: str = "admin@demo-shop.com"
    SEED_ADMIN_PASSWORD: str | None = None

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
