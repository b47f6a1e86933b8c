import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.concurrency import run_in_threadpool

from smarteam.core.logging_config import configure_logging
from smarteam.core.settings import settings
from smarteam.db.session import SessionLocal, engine, init_storage
from smarteam.services.seed import seed_admin


logger = logging.getLogger(__name__)


def _seed_default_admin() -> None:
    db = SessionLocal()
    try:
        seed_admin(db, settings)
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Connect storage (fatal on failure), then seed the admin (non-fatal)."""
    configure_logging(settings.log_level)
    await run_in_threadpool(init_storage, engine)
    await run_in_threadpool(_seed_default_admin)
    logger.info("%s ready", settings.app_name)
    yield
    engine.dispose()
