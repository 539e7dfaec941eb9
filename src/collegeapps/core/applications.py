"""Application submission and lookup.

Handles the guard-then-insert write path and the store queries behind
each read view. Store errors are not caught here; they propagate to the
caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from collegeapps.aggregation.formatter import (
    AggregationMode,
    AllByApplicant,
    AllByCollege,
    SingleApplicant,
    SingleCollege,
    aggregate,
)
from collegeapps.core.guard import is_new_application
from collegeapps.models.domain import ApplicationRecord
from collegeapps.store.base import ApplicationStore

logger = logging.getLogger(__name__)

SUBMITTED_MESSAGE = "Application submitted successfully"
DUPLICATE_MESSAGE = "Application already submitted for this college/name pair"


@dataclass
class SubmissionResult:
    """Result of an application submission."""

    accepted: bool
    message: str
    record: ApplicationRecord | None = None


def submit_application(store: ApplicationStore, record: ApplicationRecord) -> SubmissionResult:
    """Submit an application unless the applicant already applied to that college.

    Args:
        store: Application store.
        record: Validated application.

    Returns:
        SubmissionResult; accepted is False for a duplicate pair.
    """
    if not is_new_application(store, record.name, record.college):
        logger.info("Rejected duplicate application: name=%r college=%r", record.name, record.college)
        return SubmissionResult(accepted=False, message=DUPLICATE_MESSAGE)

    created = store.insert_one(record)
    logger.info("Stored application: name=%r college=%r", record.name, record.college)
    return SubmissionResult(accepted=True, message=SUBMITTED_MESSAGE, record=created)


def _load_records(store: ApplicationStore, mode: AggregationMode) -> list[ApplicationRecord]:
    """Fetch only the records a mode needs."""
    if isinstance(mode, SingleApplicant):
        return store.find_by("name", mode.name)
    if isinstance(mode, SingleCollege):
        return store.find_by("college", mode.college)
    if isinstance(mode, (AllByApplicant, AllByCollege)):
        return store.find_all()
    raise TypeError(f"Unknown aggregation mode: {mode!r}")


def get_applications(store: ApplicationStore, mode: AggregationMode) -> dict[str, Any] | None:
    """Load records from the store and aggregate them.

    Returns:
        The aggregated view, or None when a single-applicant or
        single-college lookup has no applications.
    """
    return aggregate(_load_records(store, mode), mode)
