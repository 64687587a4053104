"""Shared fixtures for the SQL-backed tests: one in-memory SQLite database per test."""

from __future__ import annotations

import pytest

from kiosk.infrastructure.config import Settings
from kiosk.infrastructure.persistence.database import (
    create_engine_from_settings,
    create_schema,
    session_factory,
)


@pytest.fixture
def engine():
    engine = create_engine_from_settings(Settings(database_url="sqlite://"))
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def sessions(engine):
    return session_factory(engine)


@pytest.fixture
def session(sessions):
    with sessions() as session:
        yield session
        session.rollback()
