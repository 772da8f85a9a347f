"""Shared fixtures: seeded catalogue on both storage backends, FastAPI test clients."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session

from mobile_price.api.v1.dependencies import get_memory_store, get_storage_backend
from mobile_price.db.repositories.memory import MemoryStore
from mobile_price.db.seed import seed_database, seed_memory_store
from mobile_price.db.session import build_engine, get_session, init_db
from mobile_price.main import app


@pytest.fixture
def memory_store():
    """Fresh in-memory catalogue seeded from the YAML fixtures."""
    store = MemoryStore()
    seed_memory_store(store)
    return store


@pytest.fixture
def db_engine():
    """In-memory SQLite engine shared by every session of a test."""
    engine = build_engine("sqlite://", poolclass=StaticPool)
    init_db(bind=engine)
    with Session(engine) as session:
        seed_database(session)
    yield engine
    engine.dispose()


@pytest.fixture
def memory_client(memory_store):
    app.dependency_overrides[get_storage_backend] = lambda: "memory"
    app.dependency_overrides[get_memory_store] = lambda: memory_store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def database_client(db_engine):
    def _session():
        with Session(db_engine) as session:
            yield session

    app.dependency_overrides[get_storage_backend] = lambda: "database"
    app.dependency_overrides[get_session] = _session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture(params=["memory", "database"])
def client(request):
    """Same API contract checked against both storage backends."""
    return request.getfixturevalue(f"{request.param}_client")


@pytest.fixture
def unsafe_client(memory_store):
    """Client that returns 500 responses instead of re-raising server errors."""
    app.dependency_overrides[get_storage_backend] = lambda: "memory"
    app.dependency_overrides[get_memory_store] = lambda: memory_store
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def brand_payload():
    return {
        "name": "Nothing",
        "slug": "nothing",
        "logo": "N",
        "phone_count": "3",
        "description": "British consumer technology company",
    }


@pytest.fixture
def mobile_payload():
    return {
        "slug": "phone-2a",
        "name": "Nothing Phone (2a)",
        "brand": "nothing",
        "model": "Phone (2a)",
        "image_url": "https://example.com/phone-2a.jpg",
        "release_date": "2024-03-05",
        "price": "₨ 99,999",
        "short_specs": {"ram": "8GB", "storage": "128GB", "camera": "50MP"},
        "specifications": [
            {"category": "Display", "specs": [{"feature": "Screen Size", "value": "6.7 inches"}]},
        ],
    }
