from typing import Any

from sqlalchemy import create_engine, text
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from app.core.config import settings


def _engine_options(url: str) -> dict[str, Any]:
    # Report fan-out runs queries from worker threads
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


engine = create_engine(settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL))
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


class Base(DeclarativeBase):
    pass


def ping_database() -> None:
    """Run ``SELECT 1`` against the configured database; raises on failure."""
    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))
