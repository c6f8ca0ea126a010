"""
Pytest configuration and fixtures for expense_tracker tests.
"""
import pytest
from datetime import datetime
from fastapi.testclient import TestClient

from expense_tracker.config import Settings
from expense_tracker.db.database import RecordStore
from expense_tracker.main import create_app


@pytest.fixture
def store():
    """Fresh in-memory record store per test."""
    record_store = RecordStore.from_url("sqlite://")
    record_store.create_all()
    yield record_store
    record_store.drop_all()
    record_store.dispose()


@pytest.fixture
def db_session(store):
    """Session bound to the in-memory store."""
    session = store.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def settings():
    return Settings(database_url="sqlite://", cors_origins=["*"], log_level="WARNING")


@pytest.fixture
def client(settings, store):
    """API client running against the in-memory store."""
    app = create_app(settings, store=store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_personal_expense():
    """Personal expense payload as a client would post it."""
    return {
        "userEmail": "asha@example.com",
        "type": "expense",
        "amount": 45.5,
        "category": "food",
        "categoryName": "Food & Dining",
        "note": "Lunch with team",
        "date": "2024-03-01T10:00:00Z",
    }


@pytest.fixture
def sample_group():
    """Group payload as a client would post it."""
    return {
        "id": "g-goa-trip",
        "name": "Goa Trip",
        "color": "#ff9800",
        "createdBy": "asha@example.com",
    }


def at(day: int, hour: int = 12) -> datetime:
    """Naive timestamp in March 2024, handy for ordering tests."""
    return datetime(2024, 3, day, hour, 0, 0)
