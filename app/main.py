import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from sqlalchemy.exc import SQLAlchemyError

from app.analytics.routes import daily_report, game_stats
from app.core.config import settings
from app.core.exceptions import register_exception_handlers
from app.core.log_config import RequestLoggingMiddleware, setup_logging
from app.db.session import engine, ping_database

setup_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info("connecting_to_database")
    try:
        await asyncio.to_thread(ping_database)
    except SQLAlchemyError as e:
        # Nothing can be reported without the event store
        logger.critical("database_connection_failed", error=str(e))
        raise
    logger.info("database_connected")

    yield

    logger.info("disposing_database_engine")
    engine.dispose()


app = FastAPI(
    title=settings.PROJECT_NAME,
    debug=settings.DEBUG,
    lifespan=lifespan,
    description="Installs, active users, matches and per-mode statistics for game analytics",
    version="1.0.0",
)

register_exception_handlers(app, debug=settings.DEBUG)
app.add_middleware(RequestLoggingMiddleware)

app.include_router(daily_report.router, prefix=settings.API_PREFIX)
app.include_router(game_stats.router, prefix=settings.API_PREFIX)


@app.get("/")
async def root() -> dict[str, str]:
    return {"message": settings.PROJECT_NAME, "version": "1.0.0", "status": "running"}


@app.get("/health")
async def health_check() -> dict[str, str]:
    try:
        await asyncio.to_thread(ping_database)
        db_status = "healthy"
    except SQLAlchemyError:
        db_status = "unhealthy"

    overall = "healthy" if db_status == "healthy" else "degraded"
    return {"status": overall, "database": db_status}
