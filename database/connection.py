"""Database connection handling for the price tables."""

import logging
from contextlib import contextmanager
from typing import Optional
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session

from config import get_database_url, ensure_directories
from .models import Base

logger = logging.getLogger(__name__)

# Global engine and session factory
_engine = None
_SessionFactory = None


def _set_sqlite_pragma(dbapi_conn, connection_record):
    """Enable WAL mode and other pragmas for shared price files."""
    cursor = dbapi_conn.cursor()
    # WAL mode allows concurrent reads while writing
    cursor.execute("PRAGMA journal_mode=WAL")
    # Another editor may be updating the price list (30 seconds)
    cursor.execute("PRAGMA busy_timeout=30000")
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def configure_engine(database_url: Optional[str] = None):
    """(Re)create the engine, optionally against a different database URL."""
    global _engine, _SessionFactory
    if _engine is not None:
        _engine.dispose()
    if database_url is None:
        ensure_directories()
        database_url = get_database_url()
    _engine = create_engine(
        database_url,
        echo=False,  # Set to True for SQL debugging
        pool_pre_ping=True,  # Check connection validity
    )
    if database_url.startswith("sqlite"):
        event.listen(_engine, "connect", _set_sqlite_pragma)
    _SessionFactory = sessionmaker(bind=_engine)
    logger.debug("Database engine configured for %s", database_url)
    return _engine


def get_engine():
    """Get or create the database engine."""
    if _engine is None:
        configure_engine()
    return _engine


def get_session_factory():
    """Get or create the session factory."""
    if _SessionFactory is None:
        configure_engine()
    return _SessionFactory


def init_db(database_url: Optional[str] = None):
    """Initialize the database, creating all tables.

    Passing a URL points the module at that database first (used by tests).
    """
    engine = configure_engine(database_url) if database_url else get_engine()
    Base.metadata.create_all(engine)


def get_session() -> Session:
    """Get a new database session."""
    factory = get_session_factory()
    return factory()


@contextmanager
def session_scope():
    """Provide a transactional scope around a series of operations.

    Usage:
        with session_scope() as session:
            session.add(some_object)
            # Commits automatically on success, rolls back on exception
    """
    session = get_session()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
