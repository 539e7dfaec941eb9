"""Duplicate submission guard.

An applicant may apply to each college once. The guard is a pure
query-and-scan over the store; it never writes.

Note: the check and the subsequent insert are two separate store
operations. Two concurrent submissions for the same pair can both pass.
"""

from __future__ import annotations

from collegeapps.store.base import ApplicationStore


def is_new_application(store: ApplicationStore, applicant_name: str, college_name: str) -> bool:
    """Check whether (applicant_name, college_name) has not been applied for yet.

    Matching is exact and case-sensitive on both fields.

    Args:
        store: Application store to query.
        applicant_name: Name from the incoming submission.
        college_name: College from the incoming submission.

    Returns:
        True if no application exists for the pair, False otherwise.
    """
    previous = store.find_by("name", applicant_name)
    return not any(record.college == college_name for record in previous)
