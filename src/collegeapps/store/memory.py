"""In-memory application store for tests and scripting.

Keeps records in a plain list so iteration order is insertion order,
matching the SQL store.
"""

from __future__ import annotations

from collections.abc import Iterable

from collegeapps.models.domain import ApplicationRecord
from collegeapps.store.base import ApplicationStore, check_queryable


class InMemoryApplicationStore(ApplicationStore):
    """List-backed store with no persistence."""

    def __init__(self, records: Iterable[ApplicationRecord] = ()):
        self._records: list[ApplicationRecord] = list(records)

    def find_by(self, field: str, value: str) -> list[ApplicationRecord]:
        check_queryable(field)
        return [r for r in self._records if getattr(r, field) == value]

    def find_all(self) -> list[ApplicationRecord]:
        return list(self._records)

    def insert_one(self, record: ApplicationRecord) -> ApplicationRecord:
        self._records.append(record)
        return record

    def __len__(self) -> int:
        return len(self._records)
