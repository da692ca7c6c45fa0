"""Database engine, session factory and schema bootstrap."""

from contextlib import contextmanager
from typing import Generator, Optional

import structlog
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from legalcase.config import get_settings

logger = structlog.get_logger(__name__)

Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: Optional[str] = None, echo: Optional[bool] = None) -> Engine:
    """Create the engine for ``database_url`` (defaults to settings)."""
    settings = get_settings()
    url = database_url or settings.DATABASE_URL
    engine = create_engine(
        url,
        echo=settings.DATABASE_ECHO if echo is None else echo,
        future=True,
    )
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def create_tables(engine: Engine) -> None:
    """Create every table that does not exist yet."""
    # Import all models so SQLAlchemy knows about them
    from legalcase.domain.models import user, client, case, case_client, hearing, document  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created/verified", url=str(engine.url))


@contextmanager
def session_scope(factory: sessionmaker) -> Generator[Session, None, None]:
    """Yield a session that is always closed afterwards."""
    db = factory()
    try:
        yield db
    finally:
        db.close()
