"""
Database engine and session handling.

The engine is built once from DATABASE_URL. When the URL is missing the app
still starts; every store call then fails with StoreUnavailable, which the
routes render as a 500 instead of crashing the request.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from satrecruit.core.config import get_settings
from satrecruit.core.exceptions import StoreUnavailable

logger = logging.getLogger(__name__)

settings = get_settings()


class Base(DeclarativeBase):
    pass


def _build_engine(url: Optional[str]) -> Optional[Engine]:
    if not url:
        logger.error("DATABASE_URL is not set; data store is disabled")
        return None

    if url.startswith("sqlite"):
        # SQLite file databases are shared across request threads
        return create_engine(
            url,
            echo=settings.db_echo,
            connect_args={"check_same_thread": False},
        )

    # pool_size=5: maintain 5 connections ready
    # max_overflow=10: allow 10 extra connections under load
    return create_engine(
        url,
        pool_size=5,
        max_overflow=10,
        pool_pre_ping=True,
        echo=settings.db_echo,
    )


engine = _build_engine(settings.database_url)

# Session factory
SessionLocal = (
    sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)
    if engine is not None
    else None
)


@contextmanager
def get_db_session() -> Iterator[Session]:
    """
    Context manager for database sessions.
    Commits on success, rolls back on error. Driver errors surface as
    StoreUnavailable; application errors raised inside the block pass through.

    Usage:
        with get_db_session() as db:
            db.execute(select(Department))
    """
    if SessionLocal is None:
        raise StoreUnavailable("Database is not configured")

    session = SessionLocal()
    try:
        yield session
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Database operation failed")
        raise StoreUnavailable() from exc
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db() -> None:
    """Create all tables if they do not exist yet."""
    if engine is None:
        raise StoreUnavailable("Database is not configured")

    # Import models so they register on Base.metadata
    from satrecruit.db import models  # noqa: F401

    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as exc:
        logger.exception("Could not create database tables")
        raise StoreUnavailable() from exc


def test_db_connection() -> bool:
    """
    Test if the database is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        with get_db_session() as db:
            row = db.execute(text("SELECT 1")).fetchone()
            return row[0] == 1
    except StoreUnavailable as e:
        logger.warning("Database connection failed: %s", e)
        return False
