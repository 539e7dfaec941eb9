"""Database session management.

Provides session factory for SQLite database access with proper
thread-safety for FastAPI concurrency.
"""

from __future__ import annotations

import os
from pathlib import Path

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from collegeapps.db.schema import Base

# Default database path, overridable through the environment
DEFAULT_DB_PATH = Path("data/collegeapps.db")
DB_PATH_ENV = "COLLEGEAPPS_DB_PATH"

# Module-level engine cache for connection pooling
_engine_cache: dict[str, Engine] = {}

# Module-level session factory cache
_session_factory_cache: dict[str, sessionmaker] = {}


def resolve_db_path(db_path: Path | None = None) -> Path:
    """Resolve the database path from argument, environment, or default."""
    if db_path is not None:
        return Path(db_path)
    return Path(os.environ.get(DB_PATH_ENV, str(DEFAULT_DB_PATH)))


def get_engine(db_path: Path | None = None) -> Engine:
    """Get SQLAlchemy engine for the database.

    Engines are cached by resolved db_path to enable connection pooling.
    Subsequent calls with the same path return the cached engine.

    Uses StaticPool and check_same_thread=False for SQLite thread-safety
    under FastAPI concurrency.

    Args:
        db_path: Path to SQLite database file. Defaults to
            $COLLEGEAPPS_DB_PATH or data/collegeapps.db.

    Returns:
        SQLAlchemy engine instance (cached).
    """
    db_path = resolve_db_path(db_path)
    cache_key = str(db_path.resolve())

    if cache_key in _engine_cache:
        return _engine_cache[cache_key]

    # Create parent directories only when creating a new engine
    db_path.parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(
        f"sqlite:///{db_path}",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    _engine_cache[cache_key] = engine

    return engine


def _get_session_factory(db_path: Path | None = None) -> sessionmaker:
    """Get cached session factory for the database."""
    db_path = resolve_db_path(db_path)
    cache_key = str(db_path.resolve())

    if cache_key in _session_factory_cache:
        return _session_factory_cache[cache_key]

    engine = get_engine(db_path)
    factory = sessionmaker(bind=engine)
    _session_factory_cache[cache_key] = factory

    return factory


def get_session(db_path: Path | None = None) -> Session:
    """Get a database session.

    Note: Caller is responsible for closing the session; the API
    closes it in the get_db_session dependency.

    Args:
        db_path: Path to SQLite database file.

    Returns:
        SQLAlchemy Session instance.
    """
    factory = _get_session_factory(db_path)
    return factory()


def init_db(db_path: Path | None = None) -> None:
    """Initialize database schema.

    Call this once during application startup to create tables.

    Args:
        db_path: Path to SQLite database file.
    """
    engine = get_engine(db_path)
    Base.metadata.create_all(engine)
