"""Repository pattern for database operations.

Encapsulates all SQLAlchemy queries, keeping domain logic pure.
Returns domain models (not SQLAlchemy entities) to external callers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

from collegeapps.db.schema import Application
from collegeapps.models.domain import ApplicationRecord

if TYPE_CHECKING:
    from sqlalchemy.orm import Session as DbSession
else:
    DbSession = Session

# Re-export for external use
__all__ = ["DbSession"]


# ============================================================================
# Converters: SQLAlchemy -> Domain
# ============================================================================


def _score_from_column(score: float) -> int | float:
    """Scores are stored as floats; whole numbers come back as int."""
    return int(score) if float(score).is_integer() else score


def _application_to_record(application: Application) -> ApplicationRecord:
    """Convert SQLAlchemy Application to domain record."""
    return ApplicationRecord(
        name=application.name,
        college=application.college,
        score=_score_from_column(application.score),
    )


# ============================================================================
# Application Repository
# ============================================================================


def get_all_applications(session: DbSession) -> list[ApplicationRecord]:
    """Get every application in insertion order."""
    applications = session.query(Application).order_by(Application.application_id).all()
    return [_application_to_record(a) for a in applications]


def get_applications_by_name(session: DbSession, name: str) -> list[ApplicationRecord]:
    """Get all applications submitted under an applicant name."""
    applications = (
        session.query(Application)
        .filter(Application.name == name)
        .order_by(Application.application_id)
        .all()
    )
    return [_application_to_record(a) for a in applications]


def get_applications_by_college(session: DbSession, college: str) -> list[ApplicationRecord]:
    """Get all applications submitted to a college."""
    applications = (
        session.query(Application)
        .filter(Application.college == college)
        .order_by(Application.application_id)
        .all()
    )
    return [_application_to_record(a) for a in applications]


def create_application(session: DbSession, record: ApplicationRecord) -> ApplicationRecord:
    """Create a new application row.

    Args:
        session: Database session.
        record: Validated application record.

    Returns:
        The record that was added.
    """
    application = Application(
        name=record.name,
        college=record.college,
        score=record.score,
    )
    session.add(application)
    session.flush()
    return record


# ============================================================================
# Session Helpers
# ============================================================================


def commit(session: DbSession) -> None:
    """Commit the current transaction."""
    session.commit()


def rollback(session: DbSession) -> None:
    """Roll back the current transaction."""
    session.rollback()
