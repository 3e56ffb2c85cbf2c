"""Database connection and session management.

This module handles the connection to the hosted relational database using
SQLAlchemy. The engine is created lazily so the application can start (and
serve sample data) when no database is configured.
"""

import logging
from typing import Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from mvc_portfolio import config
from mvc_portfolio.models.base import Base
# Import models to ensure they are registered with Base.metadata
from mvc_portfolio import models  # noqa: F401

logger = logging.getLogger(__name__)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False)

_engine: Optional[Engine] = None


def is_database_configured() -> bool:
    """Return True when DATABASE_URL points at a real database."""
    url = (config.DATABASE_URL or "").strip()
    return bool(url) and url != config.DATABASE_PLACEHOLDER_URL


def make_database_url(url: str) -> str:
    """Normalize a database URL for SQLAlchemy.

    Hosted Postgres providers hand out ``postgres://`` or bare
    ``postgresql://`` URLs; SQLAlchemy needs an explicit psycopg driver and
    hosted connections require SSL.

    Args:
        url: Raw connection string from the environment.

    Returns:
        SQLAlchemy-compatible URL.
    """
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql+psycopg://", 1)
    elif url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+psycopg://", 1)

    is_local = "localhost" in url or "127.0.0.1" in url
    if url.startswith("postgresql+psycopg://") and not is_local and "sslmode=" not in url:
        sep = "&" if "?" in url else "?"
        url = f"{url}{sep}sslmode=require"
    return url


def get_engine() -> Engine:
    """Get the SQLAlchemy engine singleton, creating it on first use.

    Raises:
        RuntimeError: If the database is not configured.
    """
    global _engine
    if _engine is None:
        if not is_database_configured():
            raise RuntimeError("DATABASE_URL is not configured")
        url = make_database_url(config.DATABASE_URL.strip())
        if url.startswith("sqlite"):
            _engine = create_engine(
                url,
                echo=config.DATABASE_ECHO,
                connect_args={"check_same_thread": False},
            )
        else:
            _engine = create_engine(url, echo=config.DATABASE_ECHO, pool_pre_ping=True)
        SessionLocal.configure(bind=_engine)
        logger.info("Database engine created for %s", _engine.url.render_as_string(hide_password=True))
    return _engine


def init_db() -> None:
    """Create tables that do not exist yet."""
    Base.metadata.create_all(bind=get_engine())


def get_db() -> Iterator[Optional[Session]]:
    """Dependency for getting a database session.

    Yields None when the database is not configured; the manager
    dependencies then fall back to sample data.
    """
    if not is_database_configured():
        yield None
        return

    get_engine()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
