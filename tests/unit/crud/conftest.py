"""Shared fixtures for crud unit tests"""

import pytest
from sqlalchemy import event
from sqlmodel import SQLModel, Session

from accounts import Account
from hashfield.crud.database import init_db, make_engine
from hashfield.crud.tracking import hash_from


@pytest.fixture(name="engine")
def engine_fixture():
    """In-memory SQLite engine with all tables created."""
    engine = make_engine("sqlite://")
    init_db(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="session")
def session_fixture(engine):
    """Fresh session per test; changes are not committed."""
    with Session(engine) as s:
        yield s


@pytest.fixture(name="tracked")
def tracked_fixture():
    """Account.email_hash follows Account.email for the duration of a test."""
    listener = hash_from(Account.email, Account.email_hash)
    yield listener
    for name in ("before_insert", "before_update"):
        event.remove(Account, name, listener)
