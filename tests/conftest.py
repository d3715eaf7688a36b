"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest

from tests import TEST_DB_URL, build_test_database


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring database (deselect with '-m \"not db\"')"
    )


@pytest.fixture
def db_manager():
    """In-memory SQLite database with all tables created."""
    db = build_test_database()
    yield db
    db.dispose()


@pytest.fixture
def db_session(db_manager):
    session = db_manager.SessionLocal()
    yield session
    session.close()


@pytest.fixture(scope="session")
def postgres_url():
    """URL of a real PostgreSQL for tests marked ``db``."""
    if not TEST_DB_URL:
        pytest.skip("TEST_DATABASE_URL not set")
    return TEST_DB_URL
