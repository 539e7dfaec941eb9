"""Shared pytest fixtures for collegeapps tests."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from collegeapps.db.schema import Base
from collegeapps.models.domain import ApplicationRecord
from collegeapps.store.sql import SqlApplicationStore


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine for testing."""
    engine = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def session(engine):
    """Create a database session for testing."""
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def sql_store(session):
    """SQL-backed store on the test session."""
    return SqlApplicationStore(session)


@pytest.fixture
def scenario_b_records():
    """Bob applies to Yale and Harvard, Carol to Yale."""
    return [
        ApplicationRecord(name="Bob", college="Yale", score=70),
        ApplicationRecord(name="Bob", college="Harvard", score=95),
        ApplicationRecord(name="Carol", college="Yale", score=80),
    ]
