"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest

from tests import create_test_session_factory


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring a database session (deselect with '-m \"not db\"')"
    )


@pytest.fixture
def session_factory():
    """Sessionmaker bound to a fresh in-memory database."""
    return create_test_session_factory()


@pytest.fixture
def db_session(session_factory):
    """A session on a fresh in-memory database, closed after the test."""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()
