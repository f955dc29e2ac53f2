"""Shared fixtures for the report template tests."""

from __future__ import annotations

import os
import pathlib
import sys

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret"

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from reporting.config import get_settings

get_settings.cache_clear()

from reporting.domain.entities import Right  # noqa: E402
from reporting.infrastructure.database import Base, initialize_database  # noqa: E402
from reporting.infrastructure.repositories import RightRepository  # noqa: E402

KNOWN_RIGHTS = ("REPORTS_VIEW", "REPORT_TEMPLATES_EDIT", "STOCK_CARDS_VIEW")


@pytest.fixture()
def engine():
    """Return an in-memory database shared by every connection of a test."""

    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    initialize_database(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def known_rights(session):
    """Register the rights used across the tests."""

    repository = RightRepository(session)
    for name in KNOWN_RIGHTS:
        repository.create(Right(id=None, name=name, type="REPORTS"))
    return KNOWN_RIGHTS
