import os

# Settings() needs a secret before anything under app/ is imported
os.environ.setdefault("JWT_SECRET", "test-secret")

import pytest
from fastapi.testclient import TestClient
from app.main import app
from app.utils.deps import get_individual_store, get_species_directory
from tests.factories import FakeSpecies, FakeStore, breeding_records, make_token, snapshot_of

OWNER = "owner-1"

@pytest.fixture
def records():
    return breeding_records()

@pytest.fixture
def snapshot(records):
    return snapshot_of(*records)

@pytest.fixture
def store(records):
    return FakeStore({OWNER: records, "owner-2": records[:2]})

@pytest.fixture
def client(store):
    app.dependency_overrides[get_individual_store] = lambda: store
    app.dependency_overrides[get_species_directory] = lambda: FakeSpecies()
    yield TestClient(app)
    app.dependency_overrides.clear()

@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {make_token(OWNER)}"}
