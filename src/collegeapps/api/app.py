"""FastAPI application factory.

API layer:
- Validates inputs, builds the store for each request
- Translates core results into HTTP responses
- Forbidden: grouping/ranking logic, direct SQL
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Generator

from fastapi import Depends, FastAPI, Request

from collegeapps import __version__
from collegeapps.aggregation.backup import resolve_backup_path
from collegeapps.db.repo import DbSession
from collegeapps.db.session import get_session, init_db, resolve_db_path
from collegeapps.store.base import ApplicationStore
from collegeapps.store.sql import SqlApplicationStore

logger = logging.getLogger(__name__)


def get_db_session(request: Request) -> Generator[DbSession, None, None]:
    """Dependency to get database session.

    Yields:
        Database session that is automatically closed after request.
    """
    session = get_session(request.app.state.db_path)
    try:
        yield session
    finally:
        session.close()


def get_store(session: DbSession = Depends(get_db_session)) -> ApplicationStore:
    """Dependency to get the application store bound to this request's session."""
    return SqlApplicationStore(session)


def get_backup_path(request: Request) -> Path:
    """Dependency to get the configured backup file path."""
    return request.app.state.backup_path


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create tables on startup."""
    init_db(app.state.db_path)
    logger.info("Database ready at %s", app.state.db_path)
    yield


def create_app(db_path: Path | None = None, backup_path: Path | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        db_path: Optional path to database file.
        backup_path: Optional path for the JSON backup file.

    Returns:
        Configured FastAPI application.
    """
    app = FastAPI(
        title="College Applications API",
        description="Submit college applications and rank them by applicant or college",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.db_path = resolve_db_path(db_path)
    app.state.backup_path = resolve_backup_path(backup_path)

    # Include routes
    from collegeapps.api.routes import applicants, applications, backup, colleges

    app.include_router(applications.router)
    app.include_router(applicants.router)
    app.include_router(colleges.router)
    app.include_router(backup.router)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


# Default app instance
app = create_app()
