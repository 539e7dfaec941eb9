"""SQLAlchemy-backed application store.

Wraps the repository functions around a caller-owned session. The
caller decides when to commit; insert_one commits so that a submission
is durable once the endpoint reports success.
"""

from __future__ import annotations

from collegeapps.db import repo
from collegeapps.db.repo import DbSession
from collegeapps.models.domain import ApplicationRecord
from collegeapps.store.base import ApplicationStore, check_queryable


class SqlApplicationStore(ApplicationStore):
    """Application store on top of a SQLAlchemy session."""

    def __init__(self, session: DbSession):
        self.session = session

    def find_by(self, field: str, value: str) -> list[ApplicationRecord]:
        check_queryable(field)
        if field == "name":
            return repo.get_applications_by_name(self.session, value)
        return repo.get_applications_by_college(self.session, value)

    def find_all(self) -> list[ApplicationRecord]:
        return repo.get_all_applications(self.session)

    def insert_one(self, record: ApplicationRecord) -> ApplicationRecord:
        try:
            created = repo.create_application(self.session, record)
            repo.commit(self.session)
        except Exception:
            repo.rollback(self.session)
            raise
        return created
