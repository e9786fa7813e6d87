# decor_api/database.py
from sqlmodel import SQLModel, create_engine, Session

from decor_api.core.config import get_settings

settings = get_settings()

# ---------------------------------------------------------
# Database connection
#
# - SQLite (default): check_same_thread=False so FastAPI's
#   threadpool can reuse the connection across requests
# - Postgres: sslmode=require, pool_size=1, max_overflow=0,
#   pool_pre_ping=True to stay under hosted poolers' client limits
# ---------------------------------------------------------

db_url = settings.DATABASE_URL

if db_url.startswith("sqlite"):
    engine = create_engine(
        db_url,
        echo=False,
        connect_args={"check_same_thread": False},
    )
else:
    # Append sslmode=require if it is not already present
    if db_url.startswith("postgresql") and "sslmode=" not in db_url:
        if "?" in db_url:
            db_url = db_url + "&sslmode=require"
        else:
            db_url = db_url + "?sslmode=require"

    engine = create_engine(
        db_url,
        echo=False,        # set to True if you want to debug SQL queries
        pool_pre_ping=True,
        pool_size=1,
        max_overflow=0,
    )


def create_db_and_tables() -> None:
    """
    Create all tables defined in SQLModel metadata if they do not exist.

    This is called once on application startup.
    """
    SQLModel.metadata.create_all(engine)


def get_session():
    """
    FastAPI dependency that yields a SQLModel Session.

    Usage:

        from fastapi import Depends

        @router.get("/example")
        def example_endpoint(session: Session = Depends(get_session)):
            ...
    """
    with Session(engine) as session:
        yield session
