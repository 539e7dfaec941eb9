"""Storage backends for application records.

Backends implement the narrow ApplicationStore interface:
query-by-equality, query-all, insert-one.
"""

from collegeapps.store.base import ApplicationStore
from collegeapps.store.memory import InMemoryApplicationStore
from collegeapps.store.sql import SqlApplicationStore

__all__ = ["ApplicationStore", "InMemoryApplicationStore", "SqlApplicationStore"]
