"""
Centralized Test Configuration.
"""

import random

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from tracker.app.db.session import init_db, drop_db
from tracker.app.schemas.parcel import Parcel
from tracker.app.models.parcel_enums import ParcelStatus
from tracker.app.services.parcel_store import ParcelStore

# Setup In-Memory Test Database
TEST_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture
def engine():
    """Fresh in-memory database with the parcel table for each test."""
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    
    yield engine
    
    drop_db(engine)
    engine.dispose()


@pytest.fixture
def store(engine):
    return ParcelStore(engine)


def make_test_parcel(**overrides) -> Parcel:
    """Registered parcel for client 1000, as a new caller would build it."""
    fields = {
        "client": 1000,
        "status": ParcelStatus.REGISTERED,
        "address": "test",
        "created_at": "2024-01-01T00:00:00Z",
    }
    fields.update(overrides)
    return Parcel(**fields)


@pytest.fixture
def test_parcel():
    return make_test_parcel()


@pytest.fixture
def random_client():
    return random.randint(1, 10_000_000)
