"""Grouping and ranking of applications.

Turns a flat sequence of records into applicant-centric or
college-centric views. Every mode is built from one primitive:
group by a key field, sort each group by score descending, project
each record down to the two remaining fields.

Pure functions - no database access.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from collegeapps.models.domain import ApplicationRecord

# Fields kept on each entry, per grouping key
APPLICANT_ENTRY_FIELDS = ("college", "score")
COLLEGE_ENTRY_FIELDS = ("name", "score")


# ============================================================================
# Modes
# ============================================================================


@dataclass(frozen=True)
class AllByApplicant:
    """Every applicant mapped to their applications."""


@dataclass(frozen=True)
class SingleApplicant:
    """One applicant's applications."""

    name: str


@dataclass(frozen=True)
class AllByCollege:
    """Every college mapped to the applications it received."""


@dataclass(frozen=True)
class SingleCollege:
    """One college's applications."""

    college: str


AggregationMode = AllByApplicant | SingleApplicant | AllByCollege | SingleCollege


# ============================================================================
# Group / sort / project
# ============================================================================


def group_records(
    records: Sequence[ApplicationRecord],
    key: str,
    fields: Sequence[str],
) -> dict[str, list[dict[str, Any]]]:
    """Group records by `key`, rank each group, and project to `fields`.

    Groups appear in first-seen order. Within a group, entries are sorted
    by score descending; the sort is stable, so equal scores keep their
    input order.

    Args:
        records: Records in store iteration order.
        key: Grouping field, "name" or "college".
        fields: Fields retained on each entry.

    Returns:
        Mapping of key value to ordered list of projected entries.
    """
    groups: dict[str, list[ApplicationRecord]] = {}
    for record in records:
        groups.setdefault(getattr(record, key), []).append(record)

    return {
        value: [
            _project(record, fields)
            for record in sorted(members, key=lambda r: r.score, reverse=True)
        ]
        for value, members in groups.items()
    }


def _project(record: ApplicationRecord, fields: Sequence[str]) -> dict[str, Any]:
    """Pick `fields` off a record, values unchanged."""
    return {field: getattr(record, field) for field in fields}


# ============================================================================
# Public entry point
# ============================================================================


def aggregate(
    records: Sequence[ApplicationRecord],
    mode: AggregationMode,
) -> dict[str, Any] | None:
    """Build the view selected by `mode`.

    Single-applicant and single-college modes filter first and return
    None when nothing matches. All-* modes return {} for empty input.

    Args:
        records: Records to aggregate, in store iteration order.
        mode: One of the four aggregation modes.

    Returns:
        Aggregated view, or None for a single-* lookup with no match.

    Raises:
        TypeError: If mode is not a known aggregation mode.
    """
    if isinstance(mode, AllByApplicant):
        return group_records(records, "name", APPLICANT_ENTRY_FIELDS)

    if isinstance(mode, AllByCollege):
        return group_records(records, "college", COLLEGE_ENTRY_FIELDS)

    if isinstance(mode, SingleApplicant):
        matching = [r for r in records if r.name == mode.name]
        if not matching:
            return None
        grouped = group_records(matching, "name", APPLICANT_ENTRY_FIELDS)
        return {"name": mode.name, "applications": grouped[mode.name]}

    if isinstance(mode, SingleCollege):
        matching = [r for r in records if r.college == mode.college]
        if not matching:
            return None
        grouped = group_records(matching, "college", COLLEGE_ENTRY_FIELDS)
        return {"college": mode.college, "applications": grouped[mode.college]}

    raise TypeError(f"Unknown aggregation mode: {mode!r}")
