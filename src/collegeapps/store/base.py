"""Base application store interface.

The core only ever talks to storage through this narrow interface:
- find_by(field, value): equality query on one field
- find_all(): every record
- insert_one(record): append one record

Stores must NOT:
- Update or delete records
- Enforce (name, college) uniqueness themselves
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from collegeapps.models.domain import ApplicationRecord

QUERYABLE_FIELDS = ("name", "college")


class ApplicationStore(ABC):
    """Abstract base class for application storage backends.

    All query methods return records in the store's natural iteration
    order, which is insertion order.
    """

    @abstractmethod
    def find_by(self, field: str, value: str) -> list[ApplicationRecord]:
        """Return every record whose `field` equals `value` exactly.

        Args:
            field: Either "name" or "college".
            value: Value to match (case-sensitive).

        Returns:
            Matching records, possibly empty.

        Raises:
            ValueError: If field is not queryable.
        """
        pass

    @abstractmethod
    def find_all(self) -> list[ApplicationRecord]:
        """Return every stored record."""
        pass

    @abstractmethod
    def insert_one(self, record: ApplicationRecord) -> ApplicationRecord:
        """Persist a new record and return it."""
        pass


def check_queryable(field: str) -> None:
    """Raise ValueError unless field can be used in find_by."""
    if field not in QUERYABLE_FIELDS:
        raise ValueError(f"Cannot query applications by field: {field}")
