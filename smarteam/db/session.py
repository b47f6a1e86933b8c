import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from smarteam.core.settings import settings


logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


engine = create_engine(
    settings.database_url,
    connect_args={"check_same_thread": False} if settings.database_url.startswith("sqlite") else {},
)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_storage(bind: Engine = engine) -> None:
    """Check the database is reachable and create missing tables.

    Errors propagate: the service cannot run without its store.
    """
    # Register mapped classes on Base.metadata before create_all
    import smarteam.models.user  # noqa: F401

    with bind.connect() as conn:
        conn.execute(text("SELECT 1"))
    Base.metadata.create_all(bind=bind)
    logger.info("Database connected")
